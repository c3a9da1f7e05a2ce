"""Team member model."""
from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringList, TimestampMixin


class TeamMember(TimestampMixin, Base):
    """Public profile of an agent or staff member."""

    __tablename__ = "team_members"

    user_id: Mapped[str | None] = mapped_column(String)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[str] = mapped_column(Text, nullable=False)
    bio: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(String)
    whatsapp: Mapped[str | None] = mapped_column(String)
    email: Mapped[str | None] = mapped_column(String)
    profile_image: Mapped[str | None] = mapped_column(Text)
    specializations: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
