"""
Storyboard Prompts - Logging

Centralized logging configuration using Rich for console output.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Global console instance
console = Console()

# Log directory
LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "storyboard_prompts.log"


def _default_log_file() -> Path:
    """Resolve the log file, honoring STORYBOARD_LOG_FILE."""
    override = os.environ.get("STORYBOARD_LOG_FILE")
    return Path(override) if override else LOG_FILE


def get_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Get a configured logger with Rich console output and file output.

    Args:
        name: Name of the logger (usually __name__)
        level: Logging level (default: INFO)
        log_file: Optional path to log file (default: logs/storyboard_prompts.log)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(level)

    # Rich console handler
    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    # File handler
    if log_file is None:
        log_file = _default_log_file()

    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger


def get_console() -> Console:
    """Get the global Rich console instance."""
    return console
