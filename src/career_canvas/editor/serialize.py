"""Fold an editor document into the flat profile update payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from career_canvas.models.blocks import (
    EducationBlock,
    ExperienceBlock,
    PersonalBlock,
    ProjectsBlock,
    SkillsBlock,
    SummaryBlock,
)
from career_canvas.models.profile import ProfileUpdate

if TYPE_CHECKING:
    from career_canvas.models.blocks import Document


def to_profile_update(document: Document) -> ProfileUpdate:
    """Build the profile update for a document.

    Blocks are folded in order, so when a type appears more than once the
    last block wins. Entry ids are editor-local and are dropped.
    """
    fields: dict[str, Any] = {}
    for block in document:
        match block:
            case PersonalBlock():
                fields.update(block.data.model_dump())
            case SummaryBlock():
                fields["summary"] = block.data.text
            case ExperienceBlock() | EducationBlock() | ProjectsBlock():
                fields[block.type] = [entry.model_dump(exclude={"id"}) for entry in block.data]
            case SkillsBlock():
                fields["skills"] = list(block.data)
    return ProfileUpdate(**fields)


def to_payload(document: Document) -> dict[str, Any]:
    """Return the JSON-ready payload sent to the profile collaborator."""
    return to_profile_update(document).model_dump(mode="json", exclude_unset=True)
