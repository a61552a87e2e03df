"""Pure constructors for blocks, entries and the initial document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from career_canvas.editor.errors import InvalidBlockType
from career_canvas.models.blocks import (
    BLOCK_CLASSES,
    ENTRY_CLASSES,
    BlockType,
    EducationBlock,
    EducationEntry,
    ExperienceBlock,
    ExperienceEntry,
    PersonalBlock,
    PersonalInfo,
    ProjectEntry,
    ProjectsBlock,
    SkillsBlock,
    SummaryBlock,
    SummaryText,
)

if TYPE_CHECKING:
    from career_canvas.models.blocks import Block, Document, Entry
    from career_canvas.models.profile import Profile


def _coerce_type(block_type: BlockType | str) -> BlockType:
    try:
        return BlockType(block_type)
    except ValueError:
        raise InvalidBlockType(block_type) from None


def build_empty_block(block_type: BlockType | str) -> Block:
    """Return a new expanded block of the given type with blank content."""
    return BLOCK_CLASSES[_coerce_type(block_type)]()


def build_empty_entry(block_type: BlockType | str) -> Entry:
    """Return a blank entry for an experience, education or projects block."""
    resolved = _coerce_type(block_type)
    if resolved not in ENTRY_CLASSES:
        raise InvalidBlockType(block_type)
    return ENTRY_CLASSES[resolved]()


def build_initial_blocks(profile: Profile) -> Document:
    """Seed the six canonical blocks from a stored profile.

    Every entry gets a fresh editor id; the stored records carry none.
    """
    return [
        PersonalBlock(
            data=PersonalInfo(
                name=profile.name,
                email=profile.email,
                phone=profile.phone,
                linkedin=profile.linkedin,
                github=profile.github,
                website=profile.website,
            )
        ),
        SummaryBlock(data=SummaryText(text=profile.summary)),
        ExperienceBlock(
            data=[ExperienceEntry(**record.model_dump()) for record in profile.experience]
        ),
        EducationBlock(
            data=[EducationEntry(**record.model_dump()) for record in profile.education]
        ),
        ProjectsBlock(data=[ProjectEntry(**record.model_dump()) for record in profile.projects]),
        SkillsBlock(data=list(profile.skills)),
    ]
