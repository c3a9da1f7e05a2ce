"""Schemas for blog posts."""
from __future__ import annotations

from pydantic import Field, field_validator

from .common import CamelModel, NonEmptyStr, PartialUpdate, RecordRead, reject_null


class BlogPostFields(CamelModel):
    content: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    author_id: str | None = None


class BlogPostCreate(BlogPostFields):
    title: NonEmptyStr
    slug: NonEmptyStr
    published: bool = False
    tags: list[str] = Field(default_factory=list)


class BlogPostUpdate(BlogPostFields, PartialUpdate):
    title: NonEmptyStr | None = None
    slug: NonEmptyStr | None = None
    published: bool | None = None
    tags: list[str] | None = None

    @field_validator("title", "slug", "published", "tags")
    @classmethod
    def _required_not_null(cls, value: object) -> object:
        return reject_null(value)


class BlogPostRead(RecordRead):
    title: str
    slug: str
    content: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    published: bool
    author_id: str | None = None
    tags: list[str]
