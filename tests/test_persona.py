"""
Tests for prompting/persona.py
"""

import pytest

from core.constants import LOGO_CONTEXT
from prompting.persona import (
    build_optimized_prompt,
    extract_character_reference,
    lighting_for_color_theme,
    parse_character_persona,
    profile_reference,
)


PERSONA = (
    "# Persona\n"
    "**Character: Mara Lopez**\n"
    "**Appearance:** short black hair, green eyes\n"
    "Likes coffee\n"
    "**Role:** CFO"
)


class TestLightingForColorTheme:
    """Tests for lighting_for_color_theme function."""

    @pytest.mark.parametrize(
        "theme,expected",
        [
            ("warm", "golden"),
            ("cool", "natural"),
            ("Vibrant", "dramatic"),
            ("muted", "soft"),
            ("monochrome", "dramatic"),
            ("modern", "natural"),
            ("sepia", "natural"),
            (None, "natural"),
        ],
    )
    def test_themes(self, theme, expected):
        """Test the theme map and its fallback."""
        assert lighting_for_color_theme(theme) == expected


class TestExtractCharacterReference:
    """Tests for extract_character_reference function."""

    def test_bold_lines(self):
        """Test that only bold character lines are kept."""
        assert extract_character_reference(PERSONA) == (
            "Character: Mara Lopez. Appearance: short black hair, green eyes. Role: CFO."
        )

    def test_budget(self):
        """Test that lines past the budget are dropped."""
        persona = "\n".join(f"**Trait {i}:** {'x' * 40}" for i in range(5))
        reference = extract_character_reference(persona)

        assert reference.count("Trait") == 2
        assert len(reference) <= 150

    @pytest.mark.parametrize("persona", [None, "", 42, "no bold text here"])
    def test_nothing_to_extract(self, persona):
        """Test that unusable personas yield an empty reference."""
        assert extract_character_reference(persona) == ""


class TestProfileReference:
    """Tests for profile_reference function."""

    def test_full_profile(self):
        """Test name, appearance, personality and description."""
        character = {"name": "Mara", "appearance": "tall", "personality": "calm", "description": "CFO"}

        assert profile_reference(character) == "Mara, tall, calm. CFO"

    def test_truncated(self):
        """Test the 200 character limit."""
        assert len(profile_reference({"name": "Mara", "description": "x" * 300})) == 200

    def test_no_character(self):
        """Test that a missing character yields an empty reference."""
        assert profile_reference(None) == ""


class TestParseCharacterPersona:
    """Tests for parse_character_persona function."""

    def test_name_and_appearance(self):
        """Test the profile parsed from a markdown persona."""
        profile = parse_character_persona(PERSONA)

        assert profile.name == "Mara Lopez"
        assert profile.appearance == "Appearance: short black hair, green eyes."
        assert profile.description == PERSONA

    def test_name_before_comma(self):
        """Test that the name stops at the first comma."""
        profile = parse_character_persona("Character: Sam, 34, engineer")

        assert profile.name == "Sam"

    @pytest.mark.parametrize("persona", [None, "", "plain text only"])
    def test_no_name(self, persona):
        """Test that personas without a name yield None."""
        assert parse_character_persona(persona) is None


class TestBuildOptimizedPrompt:
    """Tests for build_optimized_prompt function."""

    def test_empty_scene_fallback(self):
        """Test the generic scene used when there is nothing to describe."""
        prompt = build_optimized_prompt("   ")

        assert prompt.startswith("Professional cinematic storyboard frame: detailed professional scene")

    def test_featured_character_and_theme(self):
        """Test a persona reference with a warm theme."""
        prompt = build_optimized_prompt(
            "Mara reviews the budget",
            character_ref="Mara Lopez",
            color_theme="warm",
        )

        assert "Featured Character: Mara Lopez" in prompt
        assert "golden hour lighting, warm tones" in prompt
        assert "PRIMARY SUBJECT" not in prompt

    def test_logo_context(self):
        """Test that the logo clause is passed through."""
        prompt = build_optimized_prompt("A product launch", logo_context=LOGO_CONTEXT)

        assert LOGO_CONTEXT in prompt

    def test_selected_character(self):
        """Test that a selected profile goes through the character lock."""
        prompt = build_optimized_prompt(
            "Mara reviews the budget",
            character={"name": "Mara", "appearance": "short black hair"},
            visual_style="professional",
            logo_context=LOGO_CONTEXT,
        )

        assert "PRIMARY FOCUS: Mara reviews the budget" in prompt
        assert "CONSISTENCY RULES" in prompt
        assert "corporate photography" in prompt
        assert prompt.endswith(f". {LOGO_CONTEXT}")

    def test_none_arguments(self):
        """Test that None style and theme fall back to defaults."""
        prompt = build_optimized_prompt("A quiet street", None, None, None)

        assert "photorealistic" in prompt
        assert "natural daylight" in prompt
