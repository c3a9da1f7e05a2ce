"""Data access helpers for projects and construction updates."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.project import ConstructionUpdate, Project


async def list_projects(session: AsyncSession) -> Sequence[Project]:
    """Return all projects, newest first."""

    stmt = select(Project).order_by(Project.created_at.desc(), Project.id.desc())
    result = await session.execute(stmt)
    return result.scalars().all()


async def list_updates(session: AsyncSession, *, project_id: str | None = None) -> Sequence[ConstructionUpdate]:
    """Return construction updates, most recent ``update_date`` first."""

    stmt = select(ConstructionUpdate)
    if project_id:
        stmt = stmt.where(ConstructionUpdate.project_id == project_id)
    stmt = stmt.order_by(ConstructionUpdate.update_date.desc(), ConstructionUpdate.created_at.desc())
    result = await session.execute(stmt)
    return result.scalars().all()
