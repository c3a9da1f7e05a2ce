"""Public blog endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import blog as schemas
from ..services import blog as blog_service

router = APIRouter(tags=["blog"])


@router.get("/blog", response_model=list[schemas.BlogPostRead])
async def list_posts(
    published: str | None = None,
    session: AsyncSession = Depends(get_session),
) -> list[schemas.BlogPostRead]:
    """Published posts by default; ``published=false`` lists unpublished ones instead."""

    only_published = (published or "").strip().lower() != "false"
    return await blog_service.list_posts(only_published, session)


@router.get("/blog/{slug}", response_model=schemas.BlogPostRead)
async def get_post(slug: str, session: AsyncSession = Depends(get_session)) -> schemas.BlogPostRead:
    return await blog_service.get_post_by_slug(slug, session)
