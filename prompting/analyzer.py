"""
Storyboard Prompts - Prompt Analyzer

Estimate how complete a free-text image prompt is and what it is missing.
Pure keyword heuristics: the confidence score is bounded, not a probability.
"""

from core.constants import (
    ANALYZER_ACTION_WORDS,
    ANALYZER_CLOSE_UP_WORDS,
    ANALYZER_COMPOSITION_WORDS,
    ANALYZER_DRAMATIC_WORDS,
    ANALYZER_LIGHTING_WORDS,
    ANALYZER_QUALITY_WORDS,
    CONFIDENCE_ATTRIBUTE_BONUS,
    CONFIDENCE_BASE,
    CONFIDENCE_CAP,
    CONFIDENCE_WORDS_DIVISOR,
    DEFAULT_CAMERA_ANGLE,
    LightingEnum,
    SHORT_PROMPT_WORDS,
)
from core.logging import get_logger
from core.models import AnalysisResult
from core.textnorm import tokenize

logger = get_logger(__name__)

SUGGEST_LIGHTING = "Add lighting description"
SUGGEST_COMPOSITION = "Specify camera angle or composition"
SUGGEST_QUALITY = "Include quality modifiers"
SUGGEST_DETAILS = "Add more descriptive details"

CLOSE_UP_ANGLE = "close-up"


def calculate_confidence(
    word_count: int,
    has_lighting: bool,
    has_composition: bool,
    has_quality: bool,
) -> float:
    """
    Calculate prompt completeness confidence.

    confidence = min(0.9, 0.5 + words/20 + 0.1 per lighting/composition/quality)

    Args:
        word_count: Number of whitespace-separated tokens
        has_lighting: Prompt mentions lighting
        has_composition: Prompt mentions composition
        has_quality: Prompt mentions quality

    Returns:
        Confidence in [0.5, 0.9]
    """
    bonus = CONFIDENCE_ATTRIBUTE_BONUS * sum((has_lighting, has_composition, has_quality))
    return min(CONFIDENCE_CAP, CONFIDENCE_BASE + word_count / CONFIDENCE_WORDS_DIVISOR + bonus)


def analyze_prompt(prompt: str) -> AnalysisResult:
    """
    Analyze prompt quality and suggest improvements.

    Args:
        prompt: Free-text prompt

    Returns:
        AnalysisResult
    """
    # Empty tokens are dropped: "" has 0 words, "  A person " has 2
    words = tokenize(prompt)
    vocabulary = set(words)

    has_lighting = not vocabulary.isdisjoint(ANALYZER_LIGHTING_WORDS)
    has_composition = not vocabulary.isdisjoint(ANALYZER_COMPOSITION_WORDS)
    has_quality = not vocabulary.isdisjoint(ANALYZER_QUALITY_WORDS)
    has_action = not vocabulary.isdisjoint(ANALYZER_ACTION_WORDS)

    suggestions = []
    if not has_lighting:
        suggestions.append(SUGGEST_LIGHTING)
    if not has_composition:
        suggestions.append(SUGGEST_COMPOSITION)
    if not has_quality:
        suggestions.append(SUGGEST_QUALITY)
    if len(words) < SHORT_PROMPT_WORDS:
        suggestions.append(SUGGEST_DETAILS)

    if vocabulary.isdisjoint(ANALYZER_DRAMATIC_WORDS):
        suggested_lighting = LightingEnum.NATURAL.value
    else:
        suggested_lighting = LightingEnum.DRAMATIC.value

    if vocabulary.isdisjoint(ANALYZER_CLOSE_UP_WORDS):
        suggested_angle = DEFAULT_CAMERA_ANGLE
    else:
        suggested_angle = CLOSE_UP_ANGLE

    result = AnalysisResult(
        word_count=len(words),
        has_lighting=has_lighting,
        has_composition=has_composition,
        has_quality=has_quality,
        has_action=has_action,
        suggestions=suggestions,
        confidence=calculate_confidence(len(words), has_lighting, has_composition, has_quality),
        suggested_lighting=suggested_lighting,
        suggested_angle=suggested_angle,
    )

    logger.debug(
        f"Analyzed prompt: {result.word_count} words, "
        f"confidence {result.confidence:.2f}, {len(suggestions)} suggestions"
    )
    return result
