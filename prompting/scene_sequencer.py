"""
Storyboard Prompts - Scene Sequencer

Force one character into every scene of a storyboard and keep them
recognizable: the character's name is injected into the scene text, a
natural camera angle is chosen for what they are doing, clothing
continuity is resolved from the scene's own text, and the result goes
through the master prompt builder with the character lock enabled.

Scenes are enhanced independently; nothing is carried from one scene to
the next.

Usage:
    from prompting.scene_sequencer import build_character_consistent_scenes

    scenes = [{"text": "Mara typing on a laptop"}, {"text": "the next day at the park"}]
    enhanced = build_character_consistent_scenes(scenes, {"name": "Mara"})
"""

from typing import Any, Optional, Sequence, Union

from core.constants import SCENE_TYPE_KEYWORDS, ContentTypeEnum, PriorityEnum, SceneTypeEnum
from core.logging import get_logger
from core.models import CharacterProfile, PromptRequest, SceneOptions, SceneRecord, coerce_record
from core.textnorm import contains_any, lower_text
from prompting.activity import natural_composition
from prompting.continuity import classify_continuity
from prompting.master_prompt import build_master_prompt

logger = get_logger(__name__)

CharacterInput = Union[CharacterProfile, dict, None]
OptionsInput = Union[SceneOptions, dict, None]


# ============================================================================
# Character Reference
# ============================================================================


def build_character_reference(character: CharacterInput) -> str:
    """
    Build the character reference text from a profile.

    Format: "name, appearance, personality: ... . description", skipping
    empty fields.

    Args:
        character: CharacterProfile or dict

    Returns:
        Character reference ("" without a character)
    """
    profile = coerce_character(character)
    if profile is None:
        return ""

    reference = profile.name
    parts = [
        (", ", profile.appearance),
        (", ", f"personality: {profile.personality}" if profile.personality else ""),
        (". ", profile.description),
    ]
    for separator, value in parts:
        if not value:
            continue
        reference = f"{reference}{separator}{value}" if reference else value

    return reference


# ============================================================================
# Scene Analysis
# ============================================================================


def classify_scene_type(scene_text: str) -> SceneTypeEnum:
    """
    Classify a scene as action, dialog, emotional or neutral.

    Priority: action > dialog > emotional > neutral.
    """
    text = lower_text(scene_text)
    for scene_type, keywords in SCENE_TYPE_KEYWORDS.items():
        if contains_any(text, keywords):
            return scene_type
    return SceneTypeEnum.NEUTRAL


def inject_character_focus(scene_prompt: str, character: CharacterInput) -> str:
    """
    Put the character at the front of a scene description.

    When the name is already in the scene (case-insensitive) the scene is
    marked "PRIMARY FOCUS:" instead of repeating the name. A visibility
    clause and, for recognized activities, a camera angle clause follow.

    Args:
        scene_prompt: Scene description
        character: CharacterProfile or dict

    Returns:
        Scene text with character focus (unchanged without a named character)
    """
    scene_prompt = scene_prompt or ""
    profile = coerce_character(character)
    if profile is None or not profile.name:
        return scene_prompt

    name = profile.name
    if name.lower() in lower_text(scene_prompt):
        scene = f"PRIMARY FOCUS: {scene_prompt}"
    else:
        scene_type = classify_scene_type(scene_prompt)
        if scene_type is SceneTypeEnum.ACTION:
            scene = f"{name} is the main subject actively {scene_prompt}"
        elif scene_type is SceneTypeEnum.DIALOG:
            scene = f"{name} prominently featured {scene_prompt}"
        elif scene_type is SceneTypeEnum.EMOTIONAL:
            scene = f"Close focus on {name} as protagonist: {scene_prompt}"
        else:
            scene = f"{name} as central character in scene: {scene_prompt}"

    scene += f". {name} must be clearly visible, in focus, and prominently placed in the composition"

    composition = natural_composition(scene_prompt)
    if composition:
        scene += (
            f". Camera angle: {composition}. "
            "Realistic and natural body positioning appropriate for the activity"
        )

    return scene


# ============================================================================
# Enhancement
# ============================================================================


def enhance_scene_for_character(
    scene_prompt: str,
    character: CharacterInput,
    options: OptionsInput = None,
) -> str:
    """
    Enhance a scene prompt to force character inclusion and consistency.

    Args:
        scene_prompt: Original scene prompt
        character: CharacterProfile or dict (name, appearance, personality,
            description, image_url)
        options: SceneOptions or dict (visual_style, color_theme, lighting,
            camera_angle)

    Returns:
        Master prompt with the character lock
    """
    scene_prompt = scene_prompt or ""
    profile = coerce_character(character)
    scene_options = _coerce_options(options)

    continuity = classify_continuity(scene_prompt)

    if scene_options.scene_index is not None:
        logger.debug(
            f"Enhancing scene {scene_options.scene_index + 1}/{scene_options.total_scenes} "
            f"(clothing: {continuity.reason.value})"
        )

    return build_master_prompt(PromptRequest(
        base_prompt=inject_character_focus(scene_prompt, profile),
        content_type=ContentTypeEnum.STORYBOARD.value,
        visual_style=scene_options.visual_style,
        color_theme=scene_options.color_theme,
        character_ref=build_character_reference(profile),
        lighting=scene_options.lighting,
        camera_angle=scene_options.camera_angle,
        priority=PriorityEnum.QUALITY.value,
        has_character_image=bool(profile and profile.has_image),
        force_character_inclusion=True,
        maintain_clothing=continuity.maintain_clothing,
    ))


def build_character_consistent_scenes(
    scenes: Optional[Sequence[Any]],
    character: CharacterInput,
    global_options: OptionsInput = None,
) -> Any:
    """
    Build character-consistent prompts for every scene in a storyboard.

    Each scene is copied with an added enhanced_prompt; the scene's own
    text is never modified. Scene text is taken from image_prompt, then text.

    Args:
        scenes: List of scene dicts or SceneRecords
        character: CharacterProfile or dict
        global_options: SceneOptions or dict applied to every scene

    Returns:
        New list of scenes, or the input unchanged when there is no
        character or nothing to enhance
    """
    if not character or not scenes:
        return scenes
    if not isinstance(scenes, (list, tuple)):
        logger.warning(f"Scenes must be a list, got {type(scenes).__name__}")
        return scenes

    profile = coerce_character(character)
    if profile is None:
        return scenes

    base_options = _coerce_options(global_options).model_dump()
    total = len(scenes)

    enhanced_scenes = []
    for index, scene in enumerate(scenes):
        options = {**base_options, "scene_index": index, "total_scenes": total}

        if isinstance(scene, SceneRecord):
            prompt = enhance_scene_for_character(scene.source_text, profile, options)
            enhanced_scenes.append(scene.model_copy(update={"enhanced_prompt": prompt}))
        elif isinstance(scene, dict):
            text = scene.get("image_prompt") or scene.get("text") or ""
            prompt = enhance_scene_for_character(text, profile, options)
            enhanced_scenes.append({**scene, "enhanced_prompt": prompt})
        else:
            logger.warning(f"Skipping scene {index}: unsupported type {type(scene).__name__}")
            enhanced_scenes.append(scene)

    logger.debug(f"Enhanced {total} scenes for character {profile.name or '(unnamed)'}")
    return enhanced_scenes


# ============================================================================
# Helpers
# ============================================================================


def coerce_character(character: CharacterInput) -> Optional[CharacterProfile]:
    """Coerce a character record, or None when there is none or it is malformed."""
    if character is None:
        return None
    profile = coerce_record(CharacterProfile, character)
    if profile is None:
        logger.warning("Malformed character record, ignoring character")
    return profile


def _coerce_options(options: OptionsInput) -> SceneOptions:
    scene_options = coerce_record(SceneOptions, options if options is not None else {})
    if scene_options is None:
        logger.warning("Malformed scene options, using defaults")
        return SceneOptions()
    return scene_options
