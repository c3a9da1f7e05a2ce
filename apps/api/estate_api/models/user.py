"""User model."""
from __future__ import annotations

import enum

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, enum_column


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"
    EDITOR = "editor"
    AGENT = "agent"


class User(TimestampMixin, Base):
    """Back-office account. Only admins may sign in to the admin surface."""

    __tablename__ = "users"

    email: Mapped[str | None] = mapped_column(String, unique=True)
    username: Mapped[str | None] = mapped_column(String, unique=True)
    password_hash: Mapped[str | None] = mapped_column(String)
    first_name: Mapped[str | None] = mapped_column(String)
    last_name: Mapped[str | None] = mapped_column(String)
    profile_image_url: Mapped[str | None] = mapped_column(Text)
    role: Mapped[UserRole] = mapped_column(enum_column(UserRole, "user_role"), default=UserRole.USER, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
