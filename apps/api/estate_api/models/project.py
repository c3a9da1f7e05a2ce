"""Construction project and progress update models."""
from __future__ import annotations

from datetime import datetime
import enum

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringList, TimestampMixin, enum_column, utcnow


class ProjectStatus(str, enum.Enum):
    PLANNING = "planning"
    CONSTRUCTION = "construction"
    COMPLETED = "completed"


class Project(TimestampMixin, Base):
    """A development project shown in the projects catalog."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ProjectStatus] = mapped_column(
        enum_column(ProjectStatus, "project_status"), default=ProjectStatus.PLANNING, nullable=False
    )
    # Stored as supplied; values outside 0-100 are not clamped.
    progress: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_units: Mapped[int | None] = mapped_column(Integer)
    available_units: Mapped[int | None] = mapped_column(Integer)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    expected_completion: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    images: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)
    features: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)


class ConstructionUpdate(TimestampMixin, Base):
    """Progress note attached to a project."""

    __tablename__ = "construction_updates"

    # Informational reference; no foreign key is enforced.
    project_id: Mapped[str | None] = mapped_column(String, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str | None] = mapped_column(Text)
    progress: Mapped[int | None] = mapped_column(Integer)
    images: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)
    update_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
