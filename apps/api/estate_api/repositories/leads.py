"""Lead repository helpers."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.lead import Lead, LeadStatus


async def list_leads(session: AsyncSession, *, status: LeadStatus | None = None) -> Sequence[Lead]:
    """Return leads newest first, optionally narrowed to one status."""

    stmt: Select[tuple[Lead]] = select(Lead)
    if status is not None:
        stmt = stmt.where(Lead.status == status)
    stmt = stmt.order_by(Lead.created_at.desc(), Lead.id.desc())
    result = await session.execute(stmt)
    return result.scalars().all()
