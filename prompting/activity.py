"""
Storyboard Prompts - Activity Classifier

Detect what a character is doing in a scene and pick a natural camera
composition for it, so a character typing on a laptop is not framed
facing the camera.

Usage:
    from prompting.activity import natural_composition

    natural_composition("typing furiously on a laptop")
    # "over-the-shoulder view or side profile ..."
"""

import re
from typing import Optional

from core.constants import ActivityEnum
from core.logging import get_logger
from core.textnorm import lower_text

logger = get_logger(__name__)


# ============================================================================
# Activity Patterns (priority order)
# ============================================================================

# Each category is tested independently; several patterns may feed one category.
ACTIVITY_PATTERNS: dict[ActivityEnum, tuple[re.Pattern, ...]] = {
    ActivityEnum.CODING: (
        re.compile(r"\b(cod(e|ing)|programming|typing|laptop|computer|keyboard|screen)\b", re.I),
        re.compile(r"\b(writ(e|ing)|typing|document|paper|note)\b", re.I),
    ),
    ActivityEnum.READING: (
        re.compile(r"\b(read(ing)?|book|newspaper|magazine|document)\b", re.I),
    ),
    ActivityEnum.EATING: (
        re.compile(r"\b(eat(ing)?|meal|food|dinner|lunch|breakfast)\b", re.I),
        re.compile(r"\b(drink(ing)?|coffee|tea|water|beverage)\b", re.I),
    ),
    ActivityEnum.TALKING: (
        re.compile(r"\b(talk(ing)?|speak(ing)?|conversation|discuss|phone|call)\b", re.I),
    ),
    ActivityEnum.WALKING: (
        re.compile(r"\b(walk(ing)?|stroll|stride|step)\b", re.I),
        re.compile(r"\b(run(ning)?|jog(ging)?|sprint)\b", re.I),
    ),
    ActivityEnum.THINKING: (
        re.compile(r"\b(think(ing)?|contemplat(e|ing)|ponder|reflect)\b", re.I),
    ),
}

ACTIVITY_COMPOSITIONS: dict[ActivityEnum, str] = {
    ActivityEnum.CODING: (
        "over-the-shoulder view or side profile showing the person engaged "
        "with the laptop/screen, NOT facing camera directly"
    ),
    ActivityEnum.READING: (
        "side view or 3/4 angle showing person focused on reading material, "
        "natural reading posture"
    ),
    ActivityEnum.EATING: (
        "natural eating/drinking posture, can be front view or side angle"
    ),
    ActivityEnum.TALKING: (
        "facing camera or another person, engaged in conversation, "
        "natural speaking posture"
    ),
    ActivityEnum.WALKING: (
        "dynamic movement captured from side or 3/4 angle, showing motion and direction"
    ),
    ActivityEnum.THINKING: (
        "contemplative pose, profile or 3/4 view, thoughtful expression"
    ),
}


# ============================================================================
# Classification
# ============================================================================


def detect_activities(scene_text: str) -> list[ActivityEnum]:
    """
    Detect every activity category mentioned in a scene.

    Args:
        scene_text: Scene description

    Returns:
        Matching categories in priority order
    """
    text = lower_text(scene_text)
    return [
        activity
        for activity, patterns in ACTIVITY_PATTERNS.items()
        if any(pattern.search(text) for pattern in patterns)
    ]


def classify_activity(scene_text: str) -> Optional[ActivityEnum]:
    """Return the highest-priority activity in a scene, or None."""
    activities = detect_activities(scene_text)
    return activities[0] if activities else None


def natural_composition(scene_text: str) -> str:
    """
    Get the natural camera composition for the scene's activity.

    Args:
        scene_text: Scene description

    Returns:
        Composition phrase, or "" when no activity is detected
    """
    activity = classify_activity(scene_text)
    if activity is None:
        return ""

    logger.debug(f"Detected activity: {activity.value}")
    return ACTIVITY_COMPOSITIONS[activity]
