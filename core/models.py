"""
Storyboard Prompts - Pydantic Models

Plain data records exchanged between callers and the prompt engine.
Every model accepts snake_case or camelCase keys and ignores None values,
so records coming straight from a JSON payload degrade to defaults.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from core.constants import (
    DEFAULT_CAMERA_ANGLE,
    DEFAULT_COLOR_THEME,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LIGHTING,
    DEFAULT_MOOD,
    DEFAULT_PRIORITY,
    DEFAULT_VISUAL_STYLE,
)


class RecordModel(BaseModel):
    """Base record: camelCase aliases, unknown keys ignored, None means default."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ============================================================================
# Inputs
# ============================================================================


class PromptRequest(RecordModel):
    """Everything the master prompt builder needs for one prompt."""

    base_prompt: str = ""
    content_type: str = DEFAULT_CONTENT_TYPE  # storyboard, character, scene
    visual_style: str = DEFAULT_VISUAL_STYLE
    color_theme: str = DEFAULT_COLOR_THEME
    character_ref: str = ""
    logo_context: str = ""
    mood: str = DEFAULT_MOOD
    camera_angle: str = DEFAULT_CAMERA_ANGLE
    lighting: str = DEFAULT_LIGHTING
    priority: str = DEFAULT_PRIORITY  # quality, speed, creativity
    has_character_image: bool = False
    force_character_inclusion: bool = False
    maintain_clothing: bool = True


class CharacterProfile(RecordModel):
    """A caller-owned character record."""

    name: str = ""
    appearance: str = ""
    personality: str = ""
    description: str = ""
    image_url: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)


class SceneOptions(RecordModel):
    """Styling options applied to a scene (or a whole sequence)."""

    visual_style: str = DEFAULT_VISUAL_STYLE
    color_theme: str = DEFAULT_COLOR_THEME
    lighting: str = DEFAULT_LIGHTING
    camera_angle: str = DEFAULT_CAMERA_ANGLE
    scene_index: Optional[int] = None
    total_scenes: Optional[int] = None


class SceneRecord(RecordModel):
    """One scene of a storyboard; extra caller fields are carried along."""

    model_config = ConfigDict(extra="allow")

    index: int = 0
    text: str = ""
    image_prompt: Optional[str] = None
    enhanced_prompt: Optional[str] = None

    @property
    def source_text(self) -> str:
        """Text the enhanced prompt is derived from."""
        return self.image_prompt or self.text or ""


class EnhancementContext(RecordModel):
    """Context for retrofitting an existing prompt."""

    content_type: str = DEFAULT_CONTENT_TYPE
    visual_style: str = DEFAULT_VISUAL_STYLE
    has_character: bool = False
    needs_logo: bool = False


# ============================================================================
# Outputs
# ============================================================================


class AnalysisResult(BaseModel):
    """Heuristic completeness analysis of a free-text prompt."""

    word_count: int
    has_lighting: bool = False
    has_composition: bool = False
    has_quality: bool = False
    has_action: bool = False
    suggestions: list[str] = Field(default_factory=list)
    confidence: float = 0.0  # 0.0-0.9
    suggested_lighting: str = DEFAULT_LIGHTING
    suggested_angle: str = DEFAULT_CAMERA_ANGLE


class PromptEnhancement(BaseModel):
    """An existing prompt together with its engineered versions."""

    original: str
    enhanced: str
    negative: str
    improvements: list[str] = Field(default_factory=list)
    confidence: float = 0.0


class ScenarioTemplate(BaseModel):
    """A fill-in-the-blanks prompt structure with a worked example."""

    model_config = ConfigDict(frozen=True)

    structure: str
    example: str


# ============================================================================
# Coercion
# ============================================================================


def coerce_record(model_cls: type[RecordModel], data: Any) -> Optional[RecordModel]:
    """
    Coerce caller data (model instance or dict) into a record model.

    Args:
        model_cls: Target record class
        data: Model instance, dict, or anything else

    Returns:
        Model instance, or None when data cannot be coerced
    """
    if isinstance(data, model_cls):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if not isinstance(data, dict):
        return None
    try:
        return model_cls.model_validate(data)
    except ValidationError:
        return None
