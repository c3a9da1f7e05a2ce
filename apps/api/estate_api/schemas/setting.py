"""Schemas for site settings."""
from __future__ import annotations

from ..models.setting import SettingType
from .common import CamelModel, NonEmptyStr, RecordRead


class SettingUpsert(CamelModel):
    key: NonEmptyStr
    value: str | None = None
    type: SettingType = SettingType.STRING
    description: str | None = None


class SettingRead(RecordRead):
    key: str
    value: str | None = None
    type: SettingType
    description: str | None = None
