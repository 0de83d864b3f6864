"""
Storyboard Prompts - Master Prompt Builder

Compose engineered positive and negative prompts for text-to-image
generation from a terse scene description plus style and character
metadata.

The positive prompt is an ordered list of clauses joined with ". ":
    1. template prefix + scene
    2. character clauses (primary subject lock, or featured character)
    3. camera / composition
    4. lighting
    5. style technical, style mood
    6. logo context
    7. template quality modifiers (quality priority only)
    8. consistency rules (primary subject lock only)
    9. quality enhancers

The consistency rules deliberately repeat the identity lock from step 2;
the downstream image model follows repeated constraints more reliably.

Usage:
    from prompting.master_prompt import build_master_prompt, build_negative_prompt

    prompt = build_master_prompt({"base_prompt": "A chef plating dessert"})
    negative = build_negative_prompt("storyboard", has_character=False)
"""

from typing import Any, Optional, Union

from core.constants import (
    FEATURED_CHARACTER_MAX_CHARS,
    GENERIC_CHARACTER_REF,
    LOGO_PLACEMENT_CONTEXT,
    PRIMARY_SUBJECT_MAX_CHARS,
    ContentTypeEnum,
    PriorityEnum,
)
from core.logging import get_logger
from core.models import EnhancementContext, PromptEnhancement, PromptRequest, coerce_record
from core.textnorm import truncate
from prompting.analyzer import analyze_prompt
from prompting.catalogs import (
    BASE_NEGATIVE_COUNT,
    CHARACTER_NEGATIVE_PROMPTS,
    COMPOSITION_RULES,
    NEGATIVE_PROMPTS,
    QUALITY_ENHANCER_COUNT,
    QUALITY_ENHANCERS,
    QUALITY_MODIFIER_COUNT,
    get_lighting,
    get_style,
    get_template,
    get_type_negatives,
    normalize_key,
    resolve_content_type,
)

logger = get_logger(__name__)

CLAUSE_SEPARATOR = ". "
TERM_SEPARATOR = ", "

CLOTHING_MAY_VARY = (
    "Clothing may vary if day/setting/time changes, but face, physique, hair, "
    "and characteristics MUST remain identical"
)


# ============================================================================
# Character Clauses
# ============================================================================


def _primary_subject_clause(character_ref: str) -> str:
    truncated = truncate(character_ref, PRIMARY_SUBJECT_MAX_CHARS)
    return f"PRIMARY SUBJECT - MAIN CHARACTER (REQUIRED IN FRAME): {truncated}"


def _identity_lock_clause(has_character_image: bool, maintain_clothing: bool) -> str:
    """
    Build the identity lock that follows the primary subject.

    With a reference image the wording pins the character to the image;
    without one it pins the character across scenes.
    """
    if has_character_image:
        clause = (
            "ABSOLUTE REQUIREMENT: Character MUST be visible and prominently featured. "
            "EXACT same facial features (face structure, eyes, nose, mouth - zero deviation), "
            "IDENTICAL hair style and color (no variation), "
            "SAME physical build and physique (same body proportions, height, build), "
            "SAME personality characteristics and traits (consistent behavior, expressions, mannerisms)"
        )
        if maintain_clothing:
            clause += ", same clothing style as reference image"
        else:
            clause += f". {CLOTHING_MAY_VARY}"
        clause += ". Zero deviation from reference appearance in physical features, face, hair, and physique"
        return clause

    clause = (
        "ABSOLUTE REQUIREMENT: Character MUST be clearly visible and prominently featured in this scene. "
        "Consistent facial features (same face structure across all scenes), "
        "same hair style and color (no variation), "
        "same body type and physique (consistent physical build), "
        "same personality characteristics (consistent traits, behavior, expressions)"
    )
    if maintain_clothing:
        clause += ", same clothing/outfit"
    else:
        clause += f". {CLOTHING_MAY_VARY}"
    clause += " across ALL scenes. Character is the focal point"
    return clause


PLACEMENT_CLAUSE = (
    "Character placement: CENTER or PROMINENT POSITION in frame. "
    "Character visibility: MANDATORY"
)


def _featured_character_clause(character_ref: str) -> str:
    return f"Featured Character: {truncate(character_ref, FEATURED_CHARACTER_MAX_CHARS)}"


def _consistency_rules_clause(maintain_clothing: bool) -> str:
    rules = (
        "CONSISTENCY RULES - ABSOLUTE REQUIREMENTS (NON-NEGOTIABLE): "
        "Same person in every frame, IDENTICAL facial features (same face structure, eyes, nose, mouth, expression style), "
        "IDENTICAL hair style and color (no variation in hair length, color, or style), "
        "SAME body proportions and physique (same height, build, body type, physical characteristics), "
        "SAME personality traits and characteristics (consistent behavior, mannerisms, expressions), "
    )
    if maintain_clothing:
        rules += "wearing the same outfit/clothing throughout the scene, "
    else:
        rules += "clothing may vary based on day/setting/time changes, but "
    rules += (
        "recognizable as the EXACT same individual across ALL scenes. "
        "NO variation in core physical features, facial structure, hair, or body type. "
        "Character identity must be unmistakable and consistent. "
        "ONLY clothing can change (if day/setting/time changes), but face, physique, "
        "hair, and characteristics MUST remain identical."
    )
    return rules


# ============================================================================
# Builders
# ============================================================================


def _coerce_request(request: Union[PromptRequest, dict, None], fields: dict[str, Any]) -> PromptRequest:
    data = request if request is not None else {}
    if fields:
        if isinstance(data, PromptRequest):
            base = data.model_dump()
        elif isinstance(data, dict):
            base = dict(data)
        else:
            base = {}
        base.update(fields)
        data = base

    coerced = coerce_record(PromptRequest, data)
    if coerced is None:
        logger.warning("Malformed prompt request, using defaults")
        return PromptRequest()
    return coerced


def uses_character_lock(request: PromptRequest) -> bool:
    """
    True when the request gets the full primary subject / identity lock.

    Only an explicit storyboard type qualifies; unknown types borrow the
    storyboard template but keep the featured character clause.
    """
    return bool(
        request.character_ref
        and request.force_character_inclusion
        and normalize_key(request.content_type) == ContentTypeEnum.STORYBOARD.value
    )


def build_master_prompt(
    request: Union[PromptRequest, dict, None] = None,
    **fields: Any,
) -> str:
    """
    Build a master-enhanced prompt.

    Args:
        request: PromptRequest or dict of its fields
        **fields: Field overrides (e.g. base_prompt="...")

    Returns:
        Composed prompt string
    """
    request = _coerce_request(request, fields)
    template = get_template(request.content_type)
    style = get_style(request.visual_style)
    character_lock = uses_character_lock(request)

    clauses = [f"{template.prefix} {request.base_prompt.strip()}"]

    if request.character_ref:
        if character_lock:
            clauses.append(_primary_subject_clause(request.character_ref))
            clauses.append(_identity_lock_clause(
                request.has_character_image,
                request.maintain_clothing,
            ))
            clauses.append(PLACEMENT_CLAUSE)
        else:
            clauses.append(_featured_character_clause(request.character_ref))

    if character_lock:
        clauses.append(f"{request.camera_angle} focusing on character, character-centric composition")
    else:
        clauses.append(f"{request.camera_angle}, {COMPOSITION_RULES[0]}")

    clauses.append(get_lighting(request.lighting))
    clauses.append(style.technical)
    clauses.append(style.mood)

    if request.logo_context:
        clauses.append(request.logo_context)

    if normalize_key(request.priority) == PriorityEnum.QUALITY.value:
        clauses.append(TERM_SEPARATOR.join(template.quality_modifiers[:QUALITY_MODIFIER_COUNT]))

    if character_lock:
        clauses.append(_consistency_rules_clause(request.maintain_clothing))

    clauses.append(TERM_SEPARATOR.join(QUALITY_ENHANCERS[:QUALITY_ENHANCER_COUNT]))

    prompt = CLAUSE_SEPARATOR.join(clauses)
    logger.debug(
        f"Built master prompt ({len(prompt)} chars, "
        f"type={resolve_content_type(request.content_type)}, character_lock={character_lock})"
    )
    return prompt


def build_negative_prompt(
    content_type: Optional[str] = ContentTypeEnum.STORYBOARD.value,
    has_character: bool = False,
) -> str:
    """
    Generate a negative prompt.

    Order is base terms, then type-specific terms, then character identity
    terms; the list is not deduplicated.

    Args:
        content_type: storyboard, character or scene (unknown types add no type terms)
        has_character: Whether character consistency matters

    Returns:
        Comma-joined negative prompt
    """
    terms = list(NEGATIVE_PROMPTS[:BASE_NEGATIVE_COUNT])
    terms.extend(get_type_negatives(content_type))
    if has_character:
        terms.extend(CHARACTER_NEGATIVE_PROMPTS)

    return TERM_SEPARATOR.join(terms)


def enhance_existing_prompt(
    original_prompt: str,
    context: Union[EnhancementContext, dict, None] = None,
) -> PromptEnhancement:
    """
    Analyze an existing prompt and rebuild it with master techniques.

    Suggested lighting and camera angle come from the prompt analyzer.

    Args:
        original_prompt: Prompt to enhance
        context: EnhancementContext or dict (content_type, visual_style,
            has_character, needs_logo)

    Returns:
        PromptEnhancement
    """
    original_prompt = original_prompt or ""
    ctx = coerce_record(EnhancementContext, context if context is not None else {})
    if ctx is None:
        logger.warning("Malformed enhancement context, using defaults")
        ctx = EnhancementContext()

    analysis = analyze_prompt(original_prompt)

    enhanced = build_master_prompt(PromptRequest(
        base_prompt=original_prompt,
        content_type=ctx.content_type,
        visual_style=ctx.visual_style,
        character_ref=GENERIC_CHARACTER_REF if ctx.has_character else "",
        logo_context=LOGO_PLACEMENT_CONTEXT if ctx.needs_logo else "",
        lighting=analysis.suggested_lighting,
        camera_angle=analysis.suggested_angle,
    ))

    return PromptEnhancement(
        original=original_prompt,
        enhanced=enhanced,
        negative=build_negative_prompt(ctx.content_type),
        improvements=analysis.suggestions,
        confidence=analysis.confidence,
    )
