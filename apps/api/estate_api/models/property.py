"""Property listing model."""
from __future__ import annotations

import enum

from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, StringList, TimestampMixin, enum_column


class PropertyType(str, enum.Enum):
    APARTMENT = "apartment"
    VILLA = "villa"
    OFFICE = "office"
    COMMERCIAL = "commercial"
    LAND = "land"


class ListingType(str, enum.Enum):
    SALE = "sale"
    RENT = "rent"


class PropertyStatus(str, enum.Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RENTED = "rented"
    PENDING = "pending"


class Property(TimestampMixin, Base):
    """A listing in the public catalog."""

    __tablename__ = "properties"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    property_type: Mapped[PropertyType] = mapped_column(enum_column(PropertyType, "property_type"), nullable=False)
    listing_type: Mapped[ListingType] = mapped_column(enum_column(ListingType, "listing_type"), nullable=False)
    status: Mapped[PropertyStatus] = mapped_column(
        enum_column(PropertyStatus, "property_status"), default=PropertyStatus.AVAILABLE, nullable=False
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    price_per_sqm: Mapped[float | None] = mapped_column(Float)
    currency: Mapped[str] = mapped_column(String, default="ETB", nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str | None] = mapped_column(Text)
    bedrooms: Mapped[int | None] = mapped_column(Integer)
    bathrooms: Mapped[int | None] = mapped_column(Integer)
    area: Mapped[float | None] = mapped_column(Float)
    features: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)
    images: Mapped[list[str]] = mapped_column(StringList, default=list, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    virtual_tour_url: Mapped[str | None] = mapped_column(Text)
    map_coordinates: Mapped[str | None] = mapped_column(Text)
    agent_id: Mapped[str | None] = mapped_column(String)
