"""Site setting repository helpers."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.setting import Setting


async def list_settings(session: AsyncSession) -> Sequence[Setting]:
    result = await session.execute(select(Setting).order_by(Setting.key.asc()))
    return result.scalars().all()


async def get_by_key(session: AsyncSession, key: str) -> Setting | None:
    """Return a setting by its unique key."""

    result = await session.execute(select(Setting).where(Setting.key == key))
    return result.scalar_one_or_none()
