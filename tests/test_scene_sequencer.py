"""
Tests for prompting/scene_sequencer.py

Character injection and character-consistent storyboard sequences.
"""

import pytest

from core.constants import ActivityEnum, SceneTypeEnum
from core.models import CharacterProfile, SceneRecord
from prompting.activity import ACTIVITY_COMPOSITIONS
from prompting.scene_sequencer import (
    build_character_consistent_scenes,
    build_character_reference,
    classify_scene_type,
    enhance_scene_for_character,
    inject_character_focus,
)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mara() -> dict:
    """Character record as stored by the caller."""
    return {
        "name": "Mara",
        "appearance": "short black hair",
        "personality": "calm",
        "description": "CFO of a fintech startup",
    }


@pytest.fixture
def scenes() -> list[dict]:
    """Storyboard scenes with caller-owned extra fields."""
    return [
        {"index": 0, "text": "Mara typing on a laptop", "duration": 4},
        {"index": 1, "text": "ignored", "image_prompt": "walking into the office"},
        {"index": 2, "text": "the next day at the park"},
    ]


# ============================================================================
# Character Reference
# ============================================================================


class TestBuildCharacterReference:
    """Tests for build_character_reference function."""

    def test_full_profile(self, mara):
        """Test every field in order."""
        assert build_character_reference(mara) == (
            "Mara, short black hair, personality: calm. CFO of a fintech startup"
        )

    def test_skips_empty_fields(self):
        """Test that empty fields leave no dangling separators."""
        assert build_character_reference({"name": "Mara", "description": "CFO"}) == "Mara. CFO"
        assert build_character_reference({"description": "CFO"}) == "CFO"

    def test_no_character(self):
        """Test that a missing character yields an empty reference."""
        assert build_character_reference(None) == ""


# ============================================================================
# Scene Analysis
# ============================================================================


class TestClassifySceneType:
    """Tests for classify_scene_type function."""

    @pytest.mark.parametrize(
        "scene,expected",
        [
            ("running for the train", SceneTypeEnum.ACTION),
            ("speaking with investors", SceneTypeEnum.DIALOG),
            ("a sad farewell", SceneTypeEnum.EMOTIONAL),
            ("an empty office", SceneTypeEnum.NEUTRAL),
        ],
    )
    def test_scene_types(self, scene, expected):
        """Test each scene type."""
        assert classify_scene_type(scene) == expected

    def test_priority(self):
        """Test that action wins over dialog."""
        assert classify_scene_type("talking while running") == SceneTypeEnum.ACTION


class TestInjectCharacterFocus:
    """Tests for inject_character_focus function."""

    def test_name_present_marks_primary_focus(self, mara):
        """Test case-insensitive name detection."""
        scene = inject_character_focus("MARA signs the contract", mara)

        assert scene.startswith("PRIMARY FOCUS: MARA signs the contract. ")
        assert "Mara must be clearly visible, in focus, and prominently placed" in scene

    @pytest.mark.parametrize(
        "scene,prefix",
        [
            ("running for the train", "Mara is the main subject actively running for the train"),
            ("speaking with investors", "Mara prominently featured speaking with investors"),
            ("a sad farewell", "Close focus on Mara as protagonist: a sad farewell"),
            ("an empty office", "Mara as central character in scene: an empty office"),
        ],
    )
    def test_name_injection(self, mara, scene, prefix):
        """Test the name injection template for each scene type."""
        assert inject_character_focus(scene, mara).startswith(prefix)

    def test_activity_camera_angle(self, mara):
        """Test that recognized activities add a camera angle clause."""
        scene = inject_character_focus("Mara typing on a laptop", mara)

        assert f"Camera angle: {ACTIVITY_COMPOSITIONS[ActivityEnum.CODING]}" in scene
        assert scene.endswith("Realistic and natural body positioning appropriate for the activity")

    def test_no_activity_no_camera_clause(self, mara):
        """Test that static scenes get no camera angle clause."""
        assert "Camera angle" not in inject_character_focus("an empty office", mara)

    def test_unnamed_character(self):
        """Test that a character without a name leaves the scene alone."""
        assert inject_character_focus("an empty office", {"appearance": "tall"}) == "an empty office"


# ============================================================================
# Enhancement
# ============================================================================


class TestEnhanceSceneForCharacter:
    """Tests for enhance_scene_for_character function."""

    def test_laptop_scene(self, mara):
        """Test the full prompt for a named character at a laptop."""
        prompt = enhance_scene_for_character("Mara typing on a laptop", mara)

        assert prompt.startswith("Professional cinematic storyboard frame: PRIMARY FOCUS: Mara typing on a laptop")
        assert "NOT facing camera directly" in prompt
        assert "PRIMARY SUBJECT - MAIN CHARACTER (REQUIRED IN FRAME): Mara, short black hair" in prompt
        assert "Consistent facial features" in prompt
        assert "same clothing/outfit across ALL scenes" in prompt
        assert "CONSISTENCY RULES" in prompt
        assert "medium shot focusing on character" in prompt

    def test_image_reference(self, mara):
        """Test that a reference image switches the identity wording."""
        profile = CharacterProfile(**mara, image_url="https://example.com/mara.png")
        prompt = enhance_scene_for_character("Mara at her desk", profile)

        assert "EXACT same facial features" in prompt
        assert "same clothing style as reference image" in prompt

    def test_camel_case_image_url(self, mara):
        """Test the camelCase imageUrl key."""
        prompt = enhance_scene_for_character("Mara at her desk", {**mara, "imageUrl": "mara.png"})

        assert "EXACT same facial features" in prompt

    def test_time_transition_releases_clothing(self, mara):
        """Test that 'next day' lets clothing vary."""
        prompt = enhance_scene_for_character("the next day at the park", mara)

        assert "Clothing may vary if day/setting/time changes" in prompt
        assert "same clothing/outfit" not in prompt

    def test_caller_cannot_release_clothing(self, mara):
        """Test that a plain scene keeps clothing fixed whatever the caller asks."""
        prompt = enhance_scene_for_character(
            "Mara sits at a desk",
            mara,
            {"maintain_clothing": False, "maintainClothing": False},
        )

        assert "same clothing/outfit" in prompt
        assert "Clothing may vary" not in prompt

    def test_caller_cannot_pin_clothing(self, mara):
        """Test that a time transition releases clothing whatever the caller asks."""
        prompt = enhance_scene_for_character(
            "the next day at the park",
            mara,
            {"maintain_clothing": True},
        )

        assert "Clothing may vary" in prompt

    def test_options(self, mara):
        """Test that scene options reach the master prompt."""
        prompt = enhance_scene_for_character(
            "an empty office",
            mara,
            {"visualStyle": "cinematic", "lighting": "golden", "camera_angle": "wide shot"},
        )

        assert "film grain, anamorphic lens" in prompt
        assert "golden hour lighting" in prompt
        assert "wide shot focusing on character" in prompt


class TestBuildCharacterConsistentScenes:
    """Tests for build_character_consistent_scenes function."""

    def test_adds_enhanced_prompt(self, scenes, mara):
        """Test that every scene gains an enhanced prompt."""
        result = build_character_consistent_scenes(scenes, mara)

        assert len(result) == 3
        assert all(scene["enhanced_prompt"] for scene in result)

    def test_extra_fields_kept(self, scenes, mara):
        """Test that caller fields are carried through."""
        result = build_character_consistent_scenes(scenes, mara)

        assert result[0]["duration"] == 4
        assert result[1]["text"] == "ignored"

    def test_inputs_not_mutated(self, scenes, mara):
        """Test that the caller's scenes are left untouched."""
        build_character_consistent_scenes(scenes, mara)

        assert all("enhanced_prompt" not in scene for scene in scenes)

    def test_image_prompt_preferred(self, scenes, mara):
        """Test that image_prompt is used before text."""
        result = build_character_consistent_scenes(scenes, mara)

        assert "walking into the office" in result[1]["enhanced_prompt"]
        assert "ignored" not in result[1]["enhanced_prompt"]

    def test_scenes_are_independent(self, scenes, mara):
        """Test that each prompt depends only on its own scene."""
        result = build_character_consistent_scenes(scenes, mara)

        for original, enhanced in zip(scenes, result):
            text = original.get("image_prompt") or original["text"]
            assert enhanced["enhanced_prompt"] == enhance_scene_for_character(text, mara)

    def test_clothing_decided_per_scene(self, scenes, mara):
        """Test that only the time-transition scene may change clothing."""
        result = build_character_consistent_scenes(scenes, mara)

        assert "Clothing may vary" not in result[0]["enhanced_prompt"]
        assert "Clothing may vary" in result[2]["enhanced_prompt"]

    def test_scene_records(self, mara):
        """Test SceneRecord input with extra fields."""
        record = SceneRecord(index=0, text="Mara reads a book", mood="calm")
        result = build_character_consistent_scenes([record], mara)

        assert isinstance(result[0], SceneRecord)
        assert result[0].enhanced_prompt
        assert result[0].model_extra["mood"] == "calm"
        assert record.enhanced_prompt is None

    def test_global_options(self, scenes, mara):
        """Test that global options apply to every scene."""
        result = build_character_consistent_scenes(scenes, mara, {"visual_style": "artistic"})

        assert all("painterly style" in scene["enhanced_prompt"] for scene in result)

    def test_no_character(self, scenes):
        """Test that scenes are returned unchanged without a character."""
        assert build_character_consistent_scenes(scenes, None) is scenes
        assert build_character_consistent_scenes(scenes, {}) is scenes

    def test_empty_or_invalid_scenes(self, mara):
        """Test that empty or non-list input is returned as is."""
        assert build_character_consistent_scenes([], mara) == []
        assert build_character_consistent_scenes(None, mara) is None
        assert build_character_consistent_scenes("not a list", mara) == "not a list"
