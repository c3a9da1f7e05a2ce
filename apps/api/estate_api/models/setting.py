"""Site setting model."""
from __future__ import annotations

import enum

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, enum_column


class SettingType(str, enum.Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"


class Setting(TimestampMixin, Base):
    """Key/value configuration editable from the admin surface."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    value: Mapped[str | None] = mapped_column(Text)
    type: Mapped[SettingType] = mapped_column(
        enum_column(SettingType, "setting_type"), default=SettingType.STRING, nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text)
