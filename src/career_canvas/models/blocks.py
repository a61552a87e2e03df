"""Editor block models — a resume as an ordered list of typed sections."""

from __future__ import annotations

import secrets
import string
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from career_canvas.models.profile import EducationRecord, ExperienceRecord, ProjectRecord

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 7


def new_id() -> str:
    """Return a short random identifier for a block or entry."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class BlockType(StrEnum):
    PERSONAL = "personal"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    SKILLS = "skills"


class ExperienceEntry(ExperienceRecord):
    id: str = Field(default_factory=new_id)


class EducationEntry(EducationRecord):
    id: str = Field(default_factory=new_id)


class ProjectEntry(ProjectRecord):
    id: str = Field(default_factory=new_id)


Entry = ExperienceEntry | EducationEntry | ProjectEntry


class PersonalInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""


class SummaryText(BaseModel):
    text: str = ""


class _BlockBase(BaseModel):
    id: str = Field(default_factory=new_id)
    collapsed: bool = False


class PersonalBlock(_BlockBase):
    type: Literal["personal"] = "personal"
    data: PersonalInfo = Field(default_factory=PersonalInfo)


class SummaryBlock(_BlockBase):
    type: Literal["summary"] = "summary"
    data: SummaryText = Field(default_factory=SummaryText)


class ExperienceBlock(_BlockBase):
    type: Literal["experience"] = "experience"
    data: list[ExperienceEntry] = Field(default_factory=list)


class EducationBlock(_BlockBase):
    type: Literal["education"] = "education"
    data: list[EducationEntry] = Field(default_factory=list)


class ProjectsBlock(_BlockBase):
    type: Literal["projects"] = "projects"
    data: list[ProjectEntry] = Field(default_factory=list)


class SkillsBlock(_BlockBase):
    type: Literal["skills"] = "skills"
    data: list[str] = Field(default_factory=list)


Block = Annotated[
    PersonalBlock | SummaryBlock | ExperienceBlock | EducationBlock | ProjectsBlock | SkillsBlock,
    Field(discriminator="type"),
]

Document = list[Block]

BLOCK_CLASSES: dict[BlockType, type[BaseModel]] = {
    BlockType.PERSONAL: PersonalBlock,
    BlockType.SUMMARY: SummaryBlock,
    BlockType.EXPERIENCE: ExperienceBlock,
    BlockType.EDUCATION: EducationBlock,
    BlockType.PROJECTS: ProjectsBlock,
    BlockType.SKILLS: SkillsBlock,
}

ENTRY_CLASSES: dict[BlockType, type[ExperienceEntry | EducationEntry | ProjectEntry]] = {
    BlockType.EXPERIENCE: ExperienceEntry,
    BlockType.EDUCATION: EducationEntry,
    BlockType.PROJECTS: ProjectEntry,
}

document_adapter: TypeAdapter[list[Block]] = TypeAdapter(list[Block])
