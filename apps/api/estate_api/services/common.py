"""Create/read/update/delete flow shared by the catalog services."""
from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import NotFoundError
from ..models.base import Base
from ..repositories import common as records_repo
from ..schemas.common import MessageResponse

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Base)


async def fetch_or_404(session: AsyncSession, model: type[RecordT], record_id: str, label: str) -> RecordT:
    record = await records_repo.get_by_id(session, model, record_id)
    if record is None:
        raise NotFoundError(label)
    return record


async def create_record(session: AsyncSession, model: type[RecordT], fields: dict[str, Any]) -> RecordT:
    """Insert a new record inside its own transaction."""

    async with session.begin():
        record = await records_repo.insert(session, model(**fields))
    logger.info("Created %s %s", model.__name__, record.id)
    return record


async def update_record(
    session: AsyncSession,
    model: type[RecordT],
    record_id: str,
    changes: dict[str, Any],
    label: str,
) -> RecordT:
    """Apply a partial patch; last write wins."""

    async with session.begin():
        record = await fetch_or_404(session, model, record_id, label)
        await records_repo.apply_changes(session, record, changes)
    logger.info("Updated %s %s fields=%s", model.__name__, record_id, sorted(changes))
    return record


async def delete_record(session: AsyncSession, model: type[Base], record_id: str, label: str) -> MessageResponse:
    """Hard delete; a record that is already gone is a 404."""

    async with session.begin():
        record = await fetch_or_404(session, model, record_id, label)
        await records_repo.remove(session, record)
    logger.info("Deleted %s %s", model.__name__, record_id)
    return MessageResponse(message=f"{label} deleted successfully")
