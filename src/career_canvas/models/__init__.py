"""Data models for profile documents and editor blocks."""

from career_canvas.models.blocks import (
    Block,
    BlockType,
    Document,
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
from career_canvas.models.profile import (
    EducationRecord,
    ExperienceRecord,
    Profile,
    ProfileUpdate,
    ProjectRecord,
)

__all__ = [
    "Block",
    "BlockType",
    "Document",
    "EducationBlock",
    "EducationEntry",
    "EducationRecord",
    "ExperienceBlock",
    "ExperienceEntry",
    "ExperienceRecord",
    "PersonalBlock",
    "PersonalInfo",
    "Profile",
    "ProfileUpdate",
    "ProjectEntry",
    "ProjectRecord",
    "ProjectsBlock",
    "SkillsBlock",
    "SummaryBlock",
    "SummaryText",
]
