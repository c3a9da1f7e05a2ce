"""Schemas for lead intake and lead management."""
from __future__ import annotations

from pydantic import field_validator

from ..models.lead import LeadStatus
from .common import CamelModel, NonEmptyStr, PartialUpdate, RecordRead, reject_null

DEFAULT_LEAD_SOURCE = "website"


def plausible_email(value: str | None) -> str | None:
    """Accept anything shaped like ``local@domain``."""

    if value is None:
        return value
    local, sep, domain = value.partition("@")
    if not sep or not local or not domain:
        raise ValueError("Invalid email address")
    return value


class LeadCreate(CamelModel):
    """Public contact-form payload. Unknown keys such as ``status`` are ignored."""

    first_name: NonEmptyStr
    last_name: NonEmptyStr
    email: NonEmptyStr
    phone: str | None = None
    property_interest: str | None = None
    message: str | None = None
    source: str = DEFAULT_LEAD_SOURCE
    property_id: str | None = None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return plausible_email(value)

    @field_validator("source", mode="before")
    @classmethod
    def _default_source(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_LEAD_SOURCE
        if isinstance(value, str):
            return value.strip()
        return value


class LeadUpdate(PartialUpdate):
    """Back-office changes are limited to workflow status and assignment."""

    status: LeadStatus | None = None
    assigned_to: str | None = None
    property_id: str | None = None

    @field_validator("status")
    @classmethod
    def _required_not_null(cls, value: object) -> object:
        return reject_null(value)


class LeadRead(RecordRead):
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    property_interest: str | None = None
    message: str | None = None
    source: str
    status: LeadStatus
    property_id: str | None = None
    assigned_to: str | None = None
