"""Public property catalog endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import property as schemas
from ..services import properties as properties_service

router = APIRouter(tags=["properties"])


@router.get("/properties", response_model=list[schemas.PropertyRead])
async def list_properties(
    type: str | None = Query(default=None, description="Exact property type"),
    listing_type: str | None = Query(default=None, alias="listingType"),
    status: str | None = None,
    location: str | None = Query(default=None, description="Case-insensitive substring"),
    featured: str | None = None,
    search: str | None = Query(default=None, description="Matches title, location or description"),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    limit: str | None = None,
    offset: str | None = None,
    session: AsyncSession = Depends(get_session),
) -> list[schemas.PropertyRead]:
    """Return listings matching every supplied filter, newest first.

    Numeric parameters are parsed leniently so a malformed price bound is ignored
    rather than rejected.
    """

    filters = schemas.PropertyFilters.from_query(
        type=type,
        listing_type=listing_type,
        status=status,
        location=location,
        featured=featured,
        search=search,
        min_price=min_price,
        max_price=max_price,
        limit=limit,
        offset=offset,
    )
    return await properties_service.search_properties(filters, session)


@router.get("/properties/{property_id}", response_model=schemas.PropertyRead)
async def get_property(
    property_id: str,
    session: AsyncSession = Depends(get_session),
) -> schemas.PropertyRead:
    return await properties_service.get_property(property_id, session)
