"""
Storyboard Prompts - Persona Helpers

Turn the character material a storyboard carries (a selected character
profile, or a free-text markdown persona) into prompt inputs, and build
the final prompt for a storyboard frame from its color theme.

Usage:
    from prompting.persona import build_optimized_prompt, extract_character_reference

    ref = extract_character_reference(storyboard["character_persona"])
    prompt = build_optimized_prompt("Mara reviews the budget", character_ref=ref,
                                    color_theme="warm")
"""

import re
from typing import Any, Optional

from core.constants import (
    COLOR_THEME_LIGHTING,
    DEFAULT_CAMERA_ANGLE,
    DEFAULT_COLOR_THEME,
    DEFAULT_LIGHTING,
    DEFAULT_VISUAL_STYLE,
    FALLBACK_SCENE_PROMPT,
    ContentTypeEnum,
    PriorityEnum,
)
from core.logging import get_logger
from core.models import CharacterProfile, PromptRequest, SceneOptions
from core.textnorm import lower_text, truncate
from prompting.catalogs import normalize_key
from prompting.master_prompt import build_master_prompt
from prompting.scene_sequencer import coerce_character, enhance_scene_for_character

logger = get_logger(__name__)

PERSONA_REFERENCE_BUDGET = 120
PERSONA_REFERENCE_MAX_CHARS = 150
PROFILE_REFERENCE_MAX_CHARS = 200
PERSONA_DESCRIPTION_MAX_CHARS = 200

APPEARANCE_HINTS = ("appearance", "hair", "eyes")
DRAMATIC_HINTS = ("action", "dramatic")


def lighting_for_color_theme(color_theme: Optional[str]) -> str:
    """Map a storyboard color theme to a lighting preset (natural by default)."""
    return COLOR_THEME_LIGHTING.get(normalize_key(color_theme), DEFAULT_LIGHTING)


def _persona_lines(persona: Any) -> list[str]:
    if not persona or not isinstance(persona, str):
        return []
    return [line for line in persona.split("\n") if line.strip()]


def _is_character_line(line: str) -> bool:
    return "**" in line and ("character" in line.lower() or ":" in line)


def extract_character_reference(persona: Any) -> str:
    """
    Extract a short character reference from a markdown persona.

    Keeps bold lines that mention a character or carry a "label: value",
    while the accumulated text stays under the budget.

    Args:
        persona: Free-text persona (anything else yields "")

    Returns:
        Character reference, at most 150 characters
    """
    reference = ""
    for line in _persona_lines(persona):
        if not _is_character_line(line):
            continue
        info = line.replace("**", "").strip()
        if len(reference) + len(info) < PERSONA_REFERENCE_BUDGET:
            reference += f"{info}. "

    return truncate(reference.strip(), PERSONA_REFERENCE_MAX_CHARS)


def profile_reference(character: Any) -> str:
    """
    Build a character reference from a selected character profile.

    Args:
        character: CharacterProfile or dict

    Returns:
        "name, appearance, personality. description", at most 200 characters
    """
    profile = coerce_character(character)
    if profile is None:
        return ""

    reference = profile.name
    if profile.appearance:
        reference += f", {profile.appearance}"
    if profile.personality:
        reference += f", {profile.personality}"
    if profile.description:
        reference += f". {profile.description}"

    return truncate(reference, PROFILE_REFERENCE_MAX_CHARS)


def parse_character_persona(persona: Any) -> Optional[CharacterProfile]:
    """
    Parse a character profile out of a markdown persona.

    Args:
        persona: Free-text persona

    Returns:
        CharacterProfile, or None when no character name is found
    """
    name = ""
    appearance = ""

    for line in _persona_lines(persona):
        if "character:" not in line.lower() and "**" not in line:
            continue
        cleaned = re.sub(r"character:", "", line.replace("**", ""), count=1, flags=re.I).strip()
        if not name and cleaned:
            name = cleaned.split(",")[0] or cleaned.split(".")[0]
        if any(hint in cleaned for hint in APPEARANCE_HINTS):
            appearance += f"{cleaned}. "

    if not name.strip():
        logger.debug("No character name found in persona")
        return None

    return CharacterProfile(
        name=name.strip(),
        appearance=appearance.strip(),
        description=persona[:PERSONA_DESCRIPTION_MAX_CHARS],
    )


def build_optimized_prompt(
    scene_prompt: Optional[str],
    character_ref: Optional[str] = "",
    visual_style: Optional[str] = DEFAULT_VISUAL_STYLE,
    color_theme: Optional[str] = DEFAULT_COLOR_THEME,
    character: Any = None,
    logo_context: str = "",
) -> str:
    """
    Build the final prompt for one storyboard frame.

    With a character profile the scene goes through the scene sequencer;
    otherwise the character reference is used as a featured character.

    Args:
        scene_prompt: Scene description
        character_ref: Character reference text (e.g. from a persona)
        visual_style: Visual style
        color_theme: Color theme, mapped to a lighting preset
        character: Optional selected CharacterProfile or dict
        logo_context: Optional logo clause

    Returns:
        Prompt string
    """
    scene = str(scene_prompt or "").strip()
    reference = str(character_ref or "").strip()
    style = str(visual_style or DEFAULT_VISUAL_STYLE).strip()
    theme = str(color_theme or DEFAULT_COLOR_THEME).strip()

    if not scene:
        return build_master_prompt(PromptRequest(
            base_prompt=FALLBACK_SCENE_PROMPT,
            content_type=ContentTypeEnum.STORYBOARD.value,
            visual_style=style,
            color_theme=theme,
        ))

    lighting = lighting_for_color_theme(theme)

    if character:
        prompt = enhance_scene_for_character(
            scene,
            character,
            SceneOptions(visual_style=style, color_theme=theme, lighting=lighting),
        )
        return f"{prompt}. {logo_context}" if logo_context else prompt

    scene_lower = lower_text(scene)
    mood = "dramatic" if any(hint in scene_lower for hint in DRAMATIC_HINTS) else "professional"

    return build_master_prompt(PromptRequest(
        base_prompt=scene,
        content_type=ContentTypeEnum.STORYBOARD.value,
        visual_style=style,
        color_theme=theme,
        character_ref=reference,
        logo_context=logo_context,
        mood=mood,
        camera_angle=DEFAULT_CAMERA_ANGLE,
        lighting=lighting,
        priority=PriorityEnum.QUALITY.value,
    ))
