"""Schemas for construction projects and their updates."""
from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from ..models.project import ProjectStatus
from .common import CamelModel, NonEmptyStr, PartialUpdate, RecordRead, reject_null


class ProjectFields(CamelModel):
    description: str | None = None
    total_units: int | None = Field(default=None, ge=0)
    available_units: int | None = Field(default=None, ge=0)
    start_date: datetime | None = None
    expected_completion: datetime | None = None


class ProjectCreate(ProjectFields):
    name: NonEmptyStr
    location: NonEmptyStr
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: int = 0
    images: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)


class ProjectUpdate(ProjectFields, PartialUpdate):
    name: NonEmptyStr | None = None
    location: NonEmptyStr | None = None
    status: ProjectStatus | None = None
    progress: int | None = None
    images: list[str] | None = None
    features: list[str] | None = None

    @field_validator("name", "location", "status", "progress", "images", "features")
    @classmethod
    def _required_not_null(cls, value: object) -> object:
        return reject_null(value)


class ProjectRead(RecordRead):
    name: str
    description: str | None = None
    location: str
    status: ProjectStatus
    progress: int
    total_units: int | None = None
    available_units: int | None = None
    start_date: datetime | None = None
    expected_completion: datetime | None = None
    images: list[str]
    features: list[str]


class ConstructionUpdateCreate(CamelModel):
    project_id: NonEmptyStr
    title: NonEmptyStr
    content: str | None = None
    progress: int | None = None
    images: list[str] = Field(default_factory=list)
    update_date: datetime | None = None


class ConstructionUpdateRead(RecordRead):
    project_id: str | None = None
    title: str
    content: str | None = None
    progress: int | None = None
    images: list[str]
    update_date: datetime
