"""User repository helpers."""
from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User, UserRole


async def find_admin_by_login(session: AsyncSession, login: str) -> User | None:
    """Lookup an active admin by username or email."""

    stmt = (
        select(User)
        .where(
            or_(User.username == login, User.email == login),
            User.role == UserRole.ADMIN,
            User.is_active.is_(True),
        )
        .order_by(User.created_at.asc())
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()
