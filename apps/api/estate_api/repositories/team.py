"""Data access helpers for team members."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.team_member import TeamMember


async def list_members(session: AsyncSession, *, active: bool | None = True) -> Sequence[TeamMember]:
    """Return members in presentation order; ``active=None`` returns everyone."""

    stmt = select(TeamMember)
    if active is not None:
        stmt = stmt.where(TeamMember.active.is_(active))
    stmt = stmt.order_by(TeamMember.display_order.asc(), TeamMember.created_at.desc())
    result = await session.execute(stmt)
    return result.scalars().all()
