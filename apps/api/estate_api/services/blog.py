"""Blog posts for the public site and their back-office management."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import NotFoundError, ValidationFailed
from ..models.blog_post import BlogPost
from ..repositories import blog as blog_repo
from ..repositories import common as records_repo
from ..schemas import blog as schemas
from ..schemas.common import MessageResponse
from . import common

logger = logging.getLogger(__name__)

LABEL = "Blog post"
SLUG_TAKEN = "Slug is already in use"


async def list_posts(published: bool | None, session: AsyncSession) -> list[schemas.BlogPostRead]:
    rows = await blog_repo.list_posts(session, published=published)
    return [schemas.BlogPostRead.model_validate(row) for row in rows]


async def get_post_by_slug(slug: str, session: AsyncSession) -> schemas.BlogPostRead:
    record = await blog_repo.get_by_slug(session, slug)
    if record is None:
        raise NotFoundError(LABEL)
    return schemas.BlogPostRead.model_validate(record)


async def create_post(payload: schemas.BlogPostCreate, session: AsyncSession) -> schemas.BlogPostRead:
    """Create a post; slugs are unique across drafts and published posts."""

    async with session.begin():
        if await blog_repo.get_by_slug(session, payload.slug) is not None:
            raise ValidationFailed.for_field("slug", SLUG_TAKEN)
        record = await records_repo.insert(session, BlogPost(**payload.model_dump()))
    logger.info("Created blog post %s slug=%s", record.id, record.slug)
    return schemas.BlogPostRead.model_validate(record)


async def update_post(post_id: str, payload: schemas.BlogPostUpdate, session: AsyncSession) -> schemas.BlogPostRead:
    changes = payload.changes()
    async with session.begin():
        record = await common.fetch_or_404(session, BlogPost, post_id, LABEL)
        if "slug" in changes and changes["slug"] != record.slug:
            if await blog_repo.get_by_slug(session, changes["slug"]) is not None:
                raise ValidationFailed.for_field("slug", SLUG_TAKEN)
        await records_repo.apply_changes(session, record, changes)
    logger.info("Updated blog post %s fields=%s", post_id, sorted(changes))
    return schemas.BlogPostRead.model_validate(record)


async def delete_post(post_id: str, session: AsyncSession) -> MessageResponse:
    return await common.delete_record(session, BlogPost, post_id, LABEL)
