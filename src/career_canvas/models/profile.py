"""Profile document model — the persisted source a resume is edited from."""

from __future__ import annotations

from pydantic import BaseModel, Field

from career_canvas.models.base import DocumentBase


class ExperienceRecord(BaseModel):
    title: str = ""
    company: str = ""
    location: str = ""
    start: str = ""
    end: str = ""
    description: str = ""


class EducationRecord(BaseModel):
    school: str = ""
    degree: str = ""
    field: str = ""
    start: str = ""
    end: str = ""
    description: str = ""


class ProjectRecord(BaseModel):
    name: str = ""
    technologies: str = ""
    url: str = ""
    description: str = ""


class Profile(DocumentBase):
    """A user's career profile, stored one document per user."""

    user_id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    summary: str = ""
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceRecord] = Field(default_factory=list)
    education: list[EducationRecord] = Field(default_factory=list)
    projects: list[ProjectRecord] = Field(default_factory=list)


class ProfileUpdate(BaseModel):
    """Flat update payload; only explicitly set keys are applied.

    Dump with ``exclude_unset=True`` so that sections absent from the editor
    leave the stored values untouched.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    summary: str | None = None
    skills: list[str] | None = None
    experience: list[ExperienceRecord] | None = None
    education: list[EducationRecord] | None = None
    projects: list[ProjectRecord] | None = None
