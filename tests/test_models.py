"""Tests for profile and block model defaults and the block union."""

import pytest
from pydantic import ValidationError

from career_canvas.models.blocks import (
    BlockType,
    ExperienceBlock,
    SkillsBlock,
    document_adapter,
    new_id,
)
from career_canvas.models.profile import Profile, ProfileUpdate


class TestProfileModel:
    """Test the Profile document model."""

    def test_defaults(self) -> None:
        profile = Profile()
        assert profile.id is not None
        assert profile.created_at is not None
        assert profile.deleted_at is None
        assert profile.summary == ""
        assert profile.skills == []
        assert profile.experience == []

    def test_ignores_unknown_entry_keys(self) -> None:
        profile = Profile(experience=[{"_id": "abc", "title": "Dev"}])
        assert profile.experience[0].title == "Dev"


class TestProfileUpdate:
    """Test the Profile Update payload."""

    def test_only_set_fields_dump(self) -> None:
        update = ProfileUpdate(summary="x", skills=[])
        assert update.model_dump(exclude_unset=True) == {"summary": "x", "skills": []}


class TestBlocks:
    """Test the block union."""

    def test_new_id_shape(self) -> None:
        value = new_id()
        assert len(value) == 7
        assert value.isalnum()
        assert value == value.lower()

    def test_document_adapter_dispatches_on_type(self) -> None:
        document = document_adapter.validate_python(
            [
                {"id": "b1", "type": "skills", "data": ["Go"]},
                {"id": "b2", "type": "experience", "data": [{"id": "e1", "title": "Dev"}]},
            ]
        )
        assert isinstance(document[0], SkillsBlock)
        assert isinstance(document[1], ExperienceBlock)
        assert document[1].data[0].id == "e1"

    def test_document_adapter_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            document_adapter.validate_python([{"id": "b1", "type": "hobbies", "data": []}])

    def test_structural_equality(self) -> None:
        assert SkillsBlock(id="s", data=["a"]) == SkillsBlock(id="s", data=["a"])
        assert SkillsBlock(id="s", data=["a"]) != SkillsBlock(id="s", data=["b"])
        assert SkillsBlock(id="s", collapsed=True) != SkillsBlock(id="s")
