"""
Storyboard Prompts - Catalogs

Static lookup tables for the prompt engine: content-type templates,
prompt techniques (negative terms, quality enhancers, composition rules,
lighting presets), visual style enhancements and scenario templates.

Every lookup falls back to a default entry for unknown keys.

Usage:
    from prompting.catalogs import get_template, get_style, get_lighting

    template = get_template("storyboard")
    style = get_style("cinematic")
    lighting = get_lighting("golden")
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from core.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LIGHTING,
    DEFAULT_VISUAL_STYLE,
    ContentTypeEnum,
    LightingEnum,
    VisualStyleEnum,
)
from core.logging import get_logger
from core.models import ScenarioTemplate

logger = get_logger(__name__)


# ============================================================================
# Data Classes
# ============================================================================


@dataclass(frozen=True)
class Template:
    """Master template for one content type."""
    prefix: str
    quality_modifiers: tuple[str, ...]
    structure_hint: str  # Semantic ordering of prompt parts


@dataclass(frozen=True)
class StyleEnhancement:
    """Technical and mood phrases for a visual style."""
    technical: str
    mood: str


# ============================================================================
# Template Registry
# ============================================================================

MASTER_TEMPLATES: Mapping[str, Template] = MappingProxyType({
    ContentTypeEnum.STORYBOARD.value: Template(
        prefix="Professional cinematic storyboard frame:",
        quality_modifiers=(
            "8K resolution",
            "professional photography",
            "cinematic lighting",
            "sharp focus",
            "detailed composition",
        ),
        structure_hint="subject, action, setting, mood, technical",
    ),
    ContentTypeEnum.CHARACTER.value: Template(
        prefix="Professional character portrait:",
        quality_modifiers=(
            "studio lighting",
            "high resolution",
            "detailed facial features",
            "consistent character design",
            "professional photography",
        ),
        structure_hint="character, pose, expression, background, lighting",
    ),
    ContentTypeEnum.SCENE.value: Template(
        prefix="Cinematic scene composition:",
        quality_modifiers=(
            "dramatic lighting",
            "depth of field",
            "atmospheric perspective",
            "professional cinematography",
            "detailed environment",
        ),
        structure_hint="environment, subjects, action, atmosphere, camera angle",
    ),
})


# ============================================================================
# Technique Library
# ============================================================================

NEGATIVE_PROMPTS: tuple[str, ...] = (
    "blurry",
    "low quality",
    "distorted faces",
    "extra limbs",
    "text overlays",
    "watermarks",
    "text",
    "words",
    "letters",
    "captions",
    "subtitles",
    "labels",
    "scene markers",
    "metadata text",
    "timestamp",
    "duplicate subjects",
    "cropped faces",
)

QUALITY_ENHANCERS: tuple[str, ...] = (
    "masterpiece",
    "best quality",
    "ultra detailed",
    "sharp focus",
    "professional grade",
)

COMPOSITION_RULES: tuple[str, ...] = (
    "rule of thirds",
    "balanced composition",
    "leading lines",
    "proper framing",
)

LIGHTING_STYLES: Mapping[str, str] = MappingProxyType({
    LightingEnum.DRAMATIC.value: "dramatic lighting, high contrast, chiaroscuro",
    LightingEnum.SOFT.value: "soft diffused lighting, even illumination",
    LightingEnum.NATURAL.value: "natural daylight, realistic shadows",
    LightingEnum.CINEMATIC.value: "cinematic lighting, three-point lighting setup",
    LightingEnum.GOLDEN.value: "golden hour lighting, warm tones",
})

# Type-specific negatives (unknown types get none)
TYPE_NEGATIVE_PROMPTS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    ContentTypeEnum.STORYBOARD.value: ("inconsistent style", "poor composition"),
    ContentTypeEnum.CHARACTER.value: ("inconsistent features", "multiple faces"),
    ContentTypeEnum.SCENE.value: ("cluttered composition", "poor perspective"),
})

# Identity-preservation negatives, added whenever a character is present
CHARACTER_NEGATIVE_PROMPTS: tuple[str, ...] = (
    "different face",
    "different hair",
    "changing appearance",
    "inconsistent clothing",
    "multiple characters with same face",
    "face swap",
    "identity change",
    "appearance inconsistency",
    "character variation",
    "different person",
    "altered features",
    "modified appearance",
    "wrong character",
    "character replacement",
    "face morphing",
    "inconsistent facial features",
    "different body type",
    "wrong hairstyle",
    "no character visible",
    "character missing",
    "character hidden",
    "character out of frame",
    "unnatural pose",
    "awkward positioning",
    "unrealistic body angle",
    "facing wrong direction for activity",
    "unnatural posture",
    "stiff pose",
    "forced composition",
)

BASE_NEGATIVE_COUNT = 6
TYPE_NEGATIVE_COUNT = 2
QUALITY_MODIFIER_COUNT = 3
QUALITY_ENHANCER_COUNT = 2


# ============================================================================
# Style Enhancement Map
# ============================================================================

STYLE_ENHANCEMENTS: Mapping[str, StyleEnhancement] = MappingProxyType({
    VisualStyleEnum.REALISTIC.value: StyleEnhancement(
        technical="photorealistic, natural lighting, accurate proportions",
        mood="authentic, lifelike, believable",
    ),
    VisualStyleEnum.CINEMATIC.value: StyleEnhancement(
        technical="film grain, anamorphic lens, color grading",
        mood="dramatic, epic, movie-like atmosphere",
    ),
    VisualStyleEnum.ARTISTIC.value: StyleEnhancement(
        technical="painterly style, artistic interpretation, creative composition",
        mood="expressive, stylized, artistic vision",
    ),
    VisualStyleEnum.PROFESSIONAL.value: StyleEnhancement(
        technical="corporate photography, clean composition, professional lighting",
        mood="polished, business-appropriate, refined",
    ),
})


# ============================================================================
# Scenario Templates
# ============================================================================

DEFAULT_SCENARIO = "news_story"

SCENARIO_TEMPLATES: Mapping[str, ScenarioTemplate] = MappingProxyType({
    "news_story": ScenarioTemplate(
        structure=(
            "Professional news photography: [subject] [action] in [setting]. "
            "Journalistic style, natural lighting, documentary approach."
        ),
        example=(
            "Professional news photography: business executive announcing "
            "quarterly results in modern conference room. Journalistic style, "
            "natural lighting, documentary approach."
        ),
    ),
    "character_introduction": ScenarioTemplate(
        structure=(
            "Character introduction shot: [character description] [pose/expression] "
            "in [environment]. Cinematic lighting, character focus, detailed features."
        ),
        example=(
            "Character introduction shot: confident female CEO in navy suit "
            "standing in glass office. Cinematic lighting, character focus, "
            "detailed features."
        ),
    ),
    "action_scene": ScenarioTemplate(
        structure=(
            "Dynamic action scene: [characters] [action] in [location]. High energy, "
            "dramatic lighting, motion blur effects, cinematic composition."
        ),
        example=(
            "Dynamic action scene: team of developers collaborating intensely "
            "around computer screens in modern office. High energy, dramatic "
            "lighting, motion blur effects, cinematic composition."
        ),
    ),
    "establishing_shot": ScenarioTemplate(
        structure=(
            "Establishing shot: [wide view of location] showing [key elements]. "
            "Atmospheric perspective, environmental storytelling, cinematic framing."
        ),
        example=(
            "Establishing shot: wide view of bustling tech startup office showing "
            "open workspace and collaboration areas. Atmospheric perspective, "
            "environmental storytelling, cinematic framing."
        ),
    ),
})


# ============================================================================
# Lookups
# ============================================================================


def normalize_key(key: Optional[str]) -> str:
    """Normalize a lookup key: trimmed and lower-cased."""
    if not key:
        return ""
    return str(key).strip().lower()


def resolve_content_type(content_type: Optional[str]) -> str:
    """Map a content type onto a registered one (storyboard by default)."""
    key = normalize_key(content_type)
    if key in MASTER_TEMPLATES:
        return key
    logger.debug(f"Unknown content type {content_type!r}, using {DEFAULT_CONTENT_TYPE}")
    return DEFAULT_CONTENT_TYPE


def get_template(content_type: Optional[str]) -> Template:
    """Get the master template for a content type."""
    return MASTER_TEMPLATES[resolve_content_type(content_type)]


def get_style(visual_style: Optional[str]) -> StyleEnhancement:
    """Get style enhancements, falling back to realistic."""
    key = normalize_key(visual_style)
    if key not in STYLE_ENHANCEMENTS:
        logger.debug(f"Unknown visual style {visual_style!r}, using {DEFAULT_VISUAL_STYLE}")
        key = DEFAULT_VISUAL_STYLE
    return STYLE_ENHANCEMENTS[key]


def get_lighting(lighting: Optional[str]) -> str:
    """Get the lighting phrase for a preset, falling back to natural."""
    key = normalize_key(lighting)
    if key not in LIGHTING_STYLES:
        logger.debug(f"Unknown lighting {lighting!r}, using {DEFAULT_LIGHTING}")
        key = DEFAULT_LIGHTING
    return LIGHTING_STYLES[key]


def get_type_negatives(content_type: Optional[str]) -> tuple[str, ...]:
    """Get up to two type-specific negative terms (none for unknown types)."""
    return TYPE_NEGATIVE_PROMPTS.get(normalize_key(content_type), ())[:TYPE_NEGATIVE_COUNT]


def _scenario_key(scenario: Optional[str]) -> str:
    """Accept both newsStory and news_story spellings."""
    if not scenario:
        return ""
    snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", str(scenario).strip())
    return snake.replace("-", "_").replace(" ", "_").lower()


def get_prompt_template(scenario: Optional[str]) -> ScenarioTemplate:
    """
    Get a prompt template for a common storyboard scenario.

    Args:
        scenario: Scenario name (news_story, character_introduction,
            action_scene, establishing_shot; camelCase also accepted)

    Returns:
        ScenarioTemplate (news_story for unknown scenarios)
    """
    key = _scenario_key(scenario)
    if key not in SCENARIO_TEMPLATES:
        logger.debug(f"Unknown scenario {scenario!r}, using {DEFAULT_SCENARIO}")
        key = DEFAULT_SCENARIO
    return SCENARIO_TEMPLATES[key]
