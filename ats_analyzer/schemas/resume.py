from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Snapshot(BaseModel):
    # Accepts snake_case and the editor's camelCase keys (firstName, startDate, ...).
    model_config = ConfigDict(frozen=True, extra="ignore", alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(_Snapshot):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None
    github: str | None = None
    summary: str | None = None


class WorkExperience(_Snapshot):
    id: str | None = None
    company: str | None = None
    position: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    description: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def description_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Education(_Snapshot):
    id: str | None = None
    institution: str | None = None
    degree: str | None = None
    field: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    gpa: str | None = None
    description: list[str] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def description_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Skill(_Snapshot):
    id: str | None = None
    name: str
    category: str | None = None
    level: str | None = None


class Project(_Snapshot):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    url: str | None = None

    @field_validator("technologies", mode="before")
    @classmethod
    def technologies_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ResumeSnapshot(_Snapshot):
    """Top-level resume snapshot; unknown top-level keys fail validation."""

    model_config = ConfigDict(extra="forbid")

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    work_experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] | None = None

    @field_validator("work_experience", "education", "skills", mode="before")
    @classmethod
    def sections_none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("personal_info", mode="before")
    @classmethod
    def personal_info_none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value
