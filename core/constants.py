"""
Storyboard Prompts - Constants

Enums, keyword sets, and constant values used by the prompt engine.
"""

from enum import Enum


class ContentTypeEnum(str, Enum):
    """Kinds of image a prompt is composed for."""

    STORYBOARD = "storyboard"
    CHARACTER = "character"
    SCENE = "scene"


class VisualStyleEnum(str, Enum):
    """Visual styles with technical/mood enhancements."""

    REALISTIC = "realistic"
    CINEMATIC = "cinematic"
    ARTISTIC = "artistic"
    PROFESSIONAL = "professional"


class LightingEnum(str, Enum):
    """Named lighting presets."""

    DRAMATIC = "dramatic"
    SOFT = "soft"
    NATURAL = "natural"
    CINEMATIC = "cinematic"
    GOLDEN = "golden"


class PriorityEnum(str, Enum):
    """Generation priority requested by the caller."""

    QUALITY = "quality"
    SPEED = "speed"
    CREATIVITY = "creativity"


class SceneTypeEnum(str, Enum):
    """How a scene's character name is injected (priority order)."""

    ACTION = "action"
    DIALOG = "dialog"
    EMOTIONAL = "emotional"
    NEUTRAL = "neutral"


class ActivityEnum(str, Enum):
    """Activity categories detected in scene text (priority order)."""

    CODING = "coding"
    READING = "reading"
    EATING = "eating"
    TALKING = "talking"
    WALKING = "walking"
    THINKING = "thinking"


class ContinuityReasonEnum(str, Enum):
    """Why clothing may (or may not) change in a scene."""

    EXPLICIT_CHANGE = "explicit_change"
    TIME_TRANSITION = "time_transition"
    DAY_NIGHT_SPAN = "day_night_span"
    SETTING_CHANGE = "setting_change"
    NONE = "none"


# Defaults used when a lookup key is unknown
DEFAULT_CONTENT_TYPE = ContentTypeEnum.STORYBOARD.value
DEFAULT_VISUAL_STYLE = VisualStyleEnum.REALISTIC.value
DEFAULT_LIGHTING = LightingEnum.NATURAL.value
DEFAULT_CAMERA_ANGLE = "medium shot"
DEFAULT_COLOR_THEME = "modern"
DEFAULT_MOOD = "neutral"
DEFAULT_PRIORITY = PriorityEnum.QUALITY.value


# Character reference truncation (exact lengths)
PRIMARY_SUBJECT_MAX_CHARS = 100
FEATURED_CHARACTER_MAX_CHARS = 80


# ============================================================================
# Prompt Analyzer Keywords (exact token matches)
# ============================================================================

ANALYZER_LIGHTING_WORDS: frozenset[str] = frozenset({
    "lighting", "light", "shadow", "bright", "dark",
})
ANALYZER_COMPOSITION_WORDS: frozenset[str] = frozenset({
    "composition", "frame", "angle", "shot",
})
ANALYZER_QUALITY_WORDS: frozenset[str] = frozenset({
    "quality", "detailed", "sharp", "clear",
})
ANALYZER_ACTION_WORDS: frozenset[str] = frozenset({
    "action", "moving", "dynamic", "gesture",
})
ANALYZER_DRAMATIC_WORDS: frozenset[str] = frozenset({
    "dramatic", "intense", "action",
})
ANALYZER_CLOSE_UP_WORDS: frozenset[str] = frozenset({
    "close", "face", "portrait",
})

# Confidence heuristic
CONFIDENCE_BASE = 0.5
CONFIDENCE_CAP = 0.9
CONFIDENCE_WORDS_DIVISOR = 20
CONFIDENCE_ATTRIBUTE_BONUS = 0.1
SHORT_PROMPT_WORDS = 10


# ============================================================================
# Continuity Keywords (substring matches on lower-cased text)
# ============================================================================

CLOTHING_CHANGE_PHRASES: tuple[str, ...] = (
    "change clothes",
    "different outfit",
    "new clothes",
    "wearing different",
    "changed outfit",
    "switched clothes",
)

DAY_KEYWORDS: tuple[str, ...] = (
    "day", "morning", "afternoon", "dawn", "sunrise", "daylight", "sunny day",
)

NIGHT_KEYWORDS: tuple[str, ...] = (
    "night", "evening", "dusk", "sunset", "midnight", "dark", "nighttime",
    "late night",
)

TIME_TRANSITION_PHRASES: tuple[str, ...] = (
    "next day",
    "following day",
    "later that day",
    "the next morning",
    "that evening",
)

SETTING_CHANGE_KEYWORDS: tuple[str, ...] = (
    "different location", "new setting", "another place", "different venue",
    "indoor", "outdoor", "inside", "outside", "at home", "at office",
    "at work", "at event", "at party", "formal event", "casual setting",
)


# ============================================================================
# Scene Type Keywords (substring matches on lower-cased text)
# ============================================================================

SCENE_TYPE_KEYWORDS: dict[SceneTypeEnum, tuple[str, ...]] = {
    SceneTypeEnum.ACTION: ("action", "moving", "running"),
    SceneTypeEnum.DIALOG: ("speaking", "talking", "conversation"),
    SceneTypeEnum.EMOTIONAL: ("sad", "happy", "angry"),
}


# ============================================================================
# Color Theme Lighting
# ============================================================================

COLOR_THEME_LIGHTING: dict[str, str] = {
    "warm": LightingEnum.GOLDEN.value,
    "cool": LightingEnum.NATURAL.value,
    "vibrant": LightingEnum.DRAMATIC.value,
    "muted": LightingEnum.SOFT.value,
    "monochrome": LightingEnum.DRAMATIC.value,
    "modern": LightingEnum.NATURAL.value,
}

# Logo clauses
LOGO_CONTEXT = "company logo in bottom-right corner"
LOGO_PLACEMENT_CONTEXT = "company logo placement"

# Placeholder character text for retrofitted prompts
GENERIC_CHARACTER_REF = "consistent character design"

# Scene text used when a caller has nothing to describe
FALLBACK_SCENE_PROMPT = "detailed professional scene"
