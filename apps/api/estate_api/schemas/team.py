"""Schemas for team member profiles."""
from __future__ import annotations

from pydantic import Field, field_validator

from .common import CamelModel, NonEmptyStr, PartialUpdate, RecordRead, reject_null


class TeamMemberFields(CamelModel):
    user_id: str | None = None
    bio: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    email: str | None = None
    profile_image: str | None = None


class TeamMemberCreate(TeamMemberFields):
    name: NonEmptyStr
    position: NonEmptyStr
    specializations: list[str] = Field(default_factory=list)
    active: bool = True
    display_order: int = 0


class TeamMemberUpdate(TeamMemberFields, PartialUpdate):
    name: NonEmptyStr | None = None
    position: NonEmptyStr | None = None
    specializations: list[str] | None = None
    active: bool | None = None
    display_order: int | None = None

    @field_validator("name", "position", "specializations", "active", "display_order")
    @classmethod
    def _required_not_null(cls, value: object) -> object:
        return reject_null(value)


class TeamMemberRead(RecordRead):
    user_id: str | None = None
    name: str
    position: str
    bio: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    email: str | None = None
    profile_image: str | None = None
    specializations: list[str]
    active: bool
    display_order: int
