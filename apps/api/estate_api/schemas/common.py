"""Shared schema building blocks."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RecordRead(CamelModel):
    """Identifier and timestamps present on every stored record."""

    id: str
    created_at: datetime
    updated_at: datetime


class PartialUpdate(CamelModel):
    """Base for patch payloads: every field optional, unknown keys rejected."""

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""

        return self.model_dump(exclude_unset=True)


def reject_null(value: Any) -> Any:
    """Required columns may be omitted from a patch but never cleared."""

    if value is None:
        raise ValueError("Field may not be null")
    return value


class MessageResponse(BaseModel):
    message: str = Field(description="Human readable outcome")
