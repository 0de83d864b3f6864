"""
Storyboard Prompts - Text Normalization

Small text helpers shared by the heuristic classifiers.
"""

from typing import Iterable, Optional


def lower_text(text: Optional[str]) -> str:
    """
    Lower-case text for keyword matching.

    Args:
        text: Input text (None is treated as empty)

    Returns:
        Lower-cased text
    """
    if not text:
        return ""
    return str(text).lower()


def tokenize(text: Optional[str]) -> list[str]:
    """
    Split lower-cased text on whitespace.

    Punctuation stays attached to its word, so "light," is not "light".

    Args:
        text: Input text

    Returns:
        List of tokens
    """
    return lower_text(text).split()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Check whether any keyword occurs in text as a substring."""
    return any(keyword in text for keyword in keywords)


def truncate(text: str, max_chars: int) -> str:
    """Cut text to at most max_chars characters (no ellipsis)."""
    return text[:max_chars]
