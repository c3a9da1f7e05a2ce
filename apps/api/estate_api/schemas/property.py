"""Schemas for property listings."""
from __future__ import annotations

import math
from dataclasses import dataclass

from pydantic import Field, field_validator

from ..models.property import ListingType, PropertyStatus, PropertyType
from .common import CamelModel, NonEmptyStr, PartialUpdate, RecordRead, reject_null


class PropertyFields(CamelModel):
    description: str | None = None
    price_per_sqm: float | None = Field(default=None, ge=0)
    address: str | None = None
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    area: float | None = Field(default=None, ge=0)
    virtual_tour_url: str | None = None
    map_coordinates: str | None = None
    agent_id: str | None = None


class PropertyCreate(PropertyFields):
    title: NonEmptyStr
    property_type: PropertyType
    listing_type: ListingType
    status: PropertyStatus = PropertyStatus.AVAILABLE
    price: float = Field(ge=0)
    currency: NonEmptyStr = "ETB"
    location: NonEmptyStr
    features: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    featured: bool = False


class PropertyUpdate(PropertyFields, PartialUpdate):
    title: NonEmptyStr | None = None
    property_type: PropertyType | None = None
    listing_type: ListingType | None = None
    status: PropertyStatus | None = None
    price: float | None = Field(default=None, ge=0)
    currency: NonEmptyStr | None = None
    location: NonEmptyStr | None = None
    features: list[str] | None = None
    images: list[str] | None = None
    featured: bool | None = None

    @field_validator(
        "title",
        "property_type",
        "listing_type",
        "status",
        "price",
        "currency",
        "location",
        "features",
        "images",
        "featured",
    )
    @classmethod
    def _required_not_null(cls, value: object) -> object:
        return reject_null(value)


class PropertyRead(RecordRead):
    title: str
    description: str | None = None
    property_type: PropertyType
    listing_type: ListingType
    status: PropertyStatus
    price: float
    price_per_sqm: float | None = None
    currency: str
    location: str
    address: str | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    area: float | None = None
    features: list[str]
    images: list[str]
    featured: bool
    virtual_tour_url: str | None = None
    map_coordinates: str | None = None
    agent_id: str | None = None


@dataclass(slots=True)
class PropertyFilters:
    """Parsed catalog query. ``None`` means the filter is not applied."""

    property_type: str | None = None
    listing_type: str | None = None
    status: str | None = None
    location: str | None = None
    featured: bool | None = None
    search: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def from_query(
        cls,
        *,
        type: str | None = None,
        listing_type: str | None = None,
        status: str | None = None,
        location: str | None = None,
        featured: str | None = None,
        search: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
        limit: str | None = None,
        offset: str | None = None,
    ) -> "PropertyFilters":
        """Parse raw query strings leniently: blank or malformed values are dropped."""

        return cls(
            property_type=_text(type),
            listing_type=_text(listing_type),
            status=_text(status),
            location=_text(location),
            featured=_flag(featured),
            search=_text(search),
            min_price=_number(min_price),
            max_price=_number(max_price),
            limit=_count(limit),
            offset=_count(offset),
        )


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _flag(value: str | None) -> bool | None:
    """Only the literal ``true`` narrows the catalog; any other value leaves it unfiltered."""

    return True if _text(value) == "true" else None


def _number(value: str | None) -> float | None:
    text = _text(value)
    if text is None:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _count(value: str | None) -> int | None:
    text = _text(value)
    if text is None or not text.isdigit():
        return None
    return int(text)
