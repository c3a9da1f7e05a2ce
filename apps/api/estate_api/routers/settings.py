"""Public site settings endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import setting as schemas
from ..services import site_settings as settings_service

router = APIRouter(tags=["settings"])


@router.get("/settings", response_model=list[schemas.SettingRead])
async def list_settings(session: AsyncSession = Depends(get_session)) -> list[schemas.SettingRead]:
    return await settings_service.list_settings(session)


@router.get("/settings/{key}", response_model=schemas.SettingRead)
async def get_setting(key: str, session: AsyncSession = Depends(get_session)) -> schemas.SettingRead:
    return await settings_service.get_setting(key, session)
