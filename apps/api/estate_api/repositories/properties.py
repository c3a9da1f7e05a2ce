"""Data access helpers for property listings."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import ColumnElement, Select, false, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.property import ListingType, Property, PropertyStatus, PropertyType
from ..schemas.property import PropertyFilters


def build_conditions(filters: PropertyFilters) -> list[ColumnElement[bool]]:
    """Translate parsed query parameters into SQL predicates, all ANDed together."""

    conditions: list[ColumnElement[bool]] = []

    if filters.property_type is not None:
        conditions.append(_enum_equals(Property.property_type, PropertyType, filters.property_type))
    if filters.listing_type is not None:
        conditions.append(_enum_equals(Property.listing_type, ListingType, filters.listing_type))
    if filters.status is not None:
        conditions.append(_enum_equals(Property.status, PropertyStatus, filters.status))

    if filters.location:
        conditions.append(_icontains(Property.location, filters.location))

    if filters.featured is not None:
        conditions.append(Property.featured.is_(filters.featured))

    if filters.search:
        conditions.append(
            or_(
                _icontains(Property.title, filters.search),
                _icontains(Property.location, filters.search),
                _icontains(Property.description, filters.search),
            )
        )

    if filters.min_price is not None:
        conditions.append(Property.price >= filters.min_price)
    if filters.max_price is not None:
        conditions.append(Property.price <= filters.max_price)

    return conditions


async def search_properties(session: AsyncSession, filters: PropertyFilters) -> Sequence[Property]:
    """Return listings matching the filters, newest first."""

    stmt: Select[tuple[Property]] = select(Property).where(*build_conditions(filters))
    stmt = stmt.order_by(Property.created_at.desc(), Property.id.desc())
    if filters.offset:
        stmt = stmt.offset(filters.offset)
    if filters.limit is not None:
        stmt = stmt.limit(filters.limit)
    result = await session.execute(stmt)
    return result.scalars().all()


async def sum_price(session: AsyncSession, *conditions: ColumnElement[bool]) -> float:
    stmt = select(func.coalesce(func.sum(Property.price), 0)).where(*conditions)
    result = await session.execute(stmt)
    return float(result.scalar_one())


def _icontains(column, needle: str) -> ColumnElement[bool]:
    """Case-insensitive literal substring match; LIKE wildcards in the needle are escaped."""

    escaped = needle.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return func.lower(column).like(f"%{escaped}%", escape="\\")


def _enum_equals(column, enum_cls, raw: str) -> ColumnElement[bool]:
    """Exact match; values outside the enum match nothing."""

    try:
        member = enum_cls(raw)
    except ValueError:
        return false()
    return column == member
