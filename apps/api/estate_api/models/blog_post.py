"""Blog post model."""
from __future__ import annotations

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringList, TimestampMixin


class BlogPost(TimestampMixin, Base):
    """Article for the public blog, addressed by slug."""

    __tablename__ = "blog_posts"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    content: Mapped[str | None] = mapped_column(Text)
    excerpt: Mapped[str | None] = mapped_column(Text)
    featured_image: Mapped[str | None] = mapped_column(Text)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    author_id: Mapped[str | None] = mapped_column(String)
    tags: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)
