"""
Storyboard Prompts - Continuity Classifier

Decide whether a character's clothing may change in a scene.

Clothing stays fixed unless the scene text gives evidence for a change:
an explicit clothing change, a time transition, a day-to-night span, or a
setting change backed by a time cue. A setting change alone is not enough.
"""

from dataclasses import dataclass

from core.constants import (
    CLOTHING_CHANGE_PHRASES,
    DAY_KEYWORDS,
    NIGHT_KEYWORDS,
    SETTING_CHANGE_KEYWORDS,
    TIME_TRANSITION_PHRASES,
    ContinuityReasonEnum,
)
from core.logging import get_logger
from core.textnorm import contains_any, lower_text

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContinuityDecision:
    """Outcome of the clothing continuity check for one scene."""
    allow_clothing_change: bool
    reason: ContinuityReasonEnum

    @property
    def maintain_clothing(self) -> bool:
        return not self.allow_clothing_change


def classify_continuity(scene_text: str) -> ContinuityDecision:
    """
    Classify whether clothing may change in a scene.

    Rules, first match wins:
        1. explicit clothing change phrase
        2. explicit time transition phrase
        3. both a day keyword and a night keyword
        4. a setting change keyword together with any day/night/time cue

    Args:
        scene_text: Scene description

    Returns:
        ContinuityDecision
    """
    text = lower_text(scene_text)

    has_day = contains_any(text, DAY_KEYWORDS)
    has_night = contains_any(text, NIGHT_KEYWORDS)
    has_time_transition = contains_any(text, TIME_TRANSITION_PHRASES)

    if contains_any(text, CLOTHING_CHANGE_PHRASES):
        reason = ContinuityReasonEnum.EXPLICIT_CHANGE
    elif has_time_transition:
        reason = ContinuityReasonEnum.TIME_TRANSITION
    elif has_day and has_night:
        reason = ContinuityReasonEnum.DAY_NIGHT_SPAN
    elif contains_any(text, SETTING_CHANGE_KEYWORDS) and (has_day or has_night):
        reason = ContinuityReasonEnum.SETTING_CHANGE
    else:
        reason = ContinuityReasonEnum.NONE

    decision = ContinuityDecision(
        allow_clothing_change=reason is not ContinuityReasonEnum.NONE,
        reason=reason,
    )
    logger.debug(f"Clothing continuity: {reason.value}")
    return decision


def resolve_maintain_clothing(scene_text: str) -> bool:
    """Return True when the character must keep the same clothing."""
    return classify_continuity(scene_text).maintain_clothing
