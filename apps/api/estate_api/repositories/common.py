"""Generic persistence helpers shared by the entity repositories."""
from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import Base, utcnow

RecordT = TypeVar("RecordT", bound=Base)


async def get_by_id(session: AsyncSession, model: type[RecordT], record_id: str) -> RecordT | None:
    """Return a record by identifier."""

    return await session.get(model, record_id)


async def insert(session: AsyncSession, record: RecordT) -> RecordT:
    """Persist a new record and populate server-side defaults."""

    session.add(record)
    await session.flush()
    return record


async def apply_changes(session: AsyncSession, record: RecordT, changes: dict[str, Any]) -> RecordT:
    """Merge a partial patch into a record and bump ``updated_at``.

    ``updated_at`` is refreshed even when the patch is empty.
    """

    for field, value in changes.items():
        setattr(record, field, value)
    record.updated_at = utcnow()
    session.add(record)
    await session.flush()
    return record


async def remove(session: AsyncSession, record: Base) -> None:
    """Hard delete a record."""

    await session.delete(record)
    await session.flush()


async def count(session: AsyncSession, model: type[Base], *conditions: Any) -> int:
    stmt = select(func.count()).select_from(model)
    if conditions:
        stmt = stmt.where(*conditions)
    result = await session.execute(stmt)
    return int(result.scalar_one())
