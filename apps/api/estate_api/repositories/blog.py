"""Blog post repository helpers."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.blog_post import BlogPost


async def list_posts(session: AsyncSession, *, published: bool | None = True) -> Sequence[BlogPost]:
    """Return posts newest first; ``published=None`` returns drafts too."""

    stmt = select(BlogPost)
    if published is not None:
        stmt = stmt.where(BlogPost.published.is_(published))
    stmt = stmt.order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_by_slug(session: AsyncSession, slug: str) -> BlogPost | None:
    result = await session.execute(select(BlogPost).where(BlogPost.slug == slug))
    return result.scalar_one_or_none()
