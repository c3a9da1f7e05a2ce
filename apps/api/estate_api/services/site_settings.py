"""Key/value site settings."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import NotFoundError
from ..models.base import utcnow
from ..models.setting import Setting
from ..repositories import common as records_repo
from ..repositories import settings as settings_repo
from ..schemas import setting as schemas


async def list_settings(session: AsyncSession) -> list[schemas.SettingRead]:
    rows = await settings_repo.list_settings(session)
    return [schemas.SettingRead.model_validate(row) for row in rows]


async def get_setting(key: str, session: AsyncSession) -> schemas.SettingRead:
    record = await settings_repo.get_by_key(session, key)
    if record is None:
        raise NotFoundError("Setting")
    return schemas.SettingRead.model_validate(record)


async def upsert_setting(payload: schemas.SettingUpsert, session: AsyncSession) -> schemas.SettingRead:
    """Insert a setting or overwrite the one with the same key.

    The value is stored verbatim; ``type`` is a hint for clients only.
    """

    async with session.begin():
        record = await settings_repo.get_by_key(session, payload.key)
        if record is None:
            record = await records_repo.insert(session, Setting(**payload.model_dump()))
        else:
            record.value = payload.value
            record.type = payload.type
            record.description = payload.description
            record.updated_at = utcnow()
            session.add(record)
    return schemas.SettingRead.model_validate(record)
