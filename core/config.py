"""
Storyboard Prompts - Configuration

Load caller-side prompt defaults from YAML files and environment variables.
The prompt engine itself never reads configuration; callers (and the CLI)
resolve defaults here and pass them in explicitly.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from core.constants import (
    DEFAULT_CAMERA_ANGLE,
    DEFAULT_COLOR_THEME,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LIGHTING,
    DEFAULT_PRIORITY,
    DEFAULT_VISUAL_STYLE,
)
from core.logging import get_logger
from core.models import SceneOptions

logger = get_logger(__name__)

# Default paths
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Default config file
DEFAULT_CONFIG_FILE = CONFIG_DIR / "prompting.yaml"

# Environment overrides for option defaults
ENV_OVERRIDES: dict[str, str] = {
    "visual_style": "STORYBOARD_VISUAL_STYLE",
    "color_theme": "STORYBOARD_COLOR_THEME",
    "lighting": "STORYBOARD_LIGHTING",
    "camera_angle": "STORYBOARD_CAMERA_ANGLE",
}


def load_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file (default: config/prompting.yaml)

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return _default_config()

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    logger.debug(f"Loaded config from {config_path}")
    return config


def _default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "defaults": {
            "content_type": DEFAULT_CONTENT_TYPE,
            "visual_style": DEFAULT_VISUAL_STYLE,
            "color_theme": DEFAULT_COLOR_THEME,
            "lighting": DEFAULT_LIGHTING,
            "camera_angle": DEFAULT_CAMERA_ANGLE,
            "priority": DEFAULT_PRIORITY,
        },
    }


def get_defaults(config: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """
    Get the merged option defaults.

    Built-in defaults < config file < environment variables.

    Env vars:
        STORYBOARD_VISUAL_STYLE
        STORYBOARD_COLOR_THEME
        STORYBOARD_LIGHTING
        STORYBOARD_CAMERA_ANGLE

    Args:
        config: Configuration dictionary (loads from file if None)

    Returns:
        Dictionary of defaults
    """
    if config is None:
        config = load_config()

    defaults = dict(_default_config()["defaults"])
    defaults.update(config.get("defaults") or {})

    for key, env_var in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            defaults[key] = value

    return defaults


def get_default_options(config: Optional[dict[str, Any]] = None) -> SceneOptions:
    """
    Get default scene options.

    Args:
        config: Configuration dictionary (loads from file if None)

    Returns:
        SceneOptions instance
    """
    return SceneOptions.model_validate(get_defaults(config))
