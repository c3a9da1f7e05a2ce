"""Business rules for property listings."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.property import Property
from ..repositories import common as records_repo
from ..repositories import properties as properties_repo
from ..schemas import property as schemas
from ..schemas.common import MessageResponse
from . import common

logger = logging.getLogger(__name__)

LABEL = "Property"


async def search_properties(
    filters: schemas.PropertyFilters,
    session: AsyncSession,
) -> list[schemas.PropertyRead]:
    """Return catalog listings matching the query, newest first."""

    rows = await properties_repo.search_properties(session, filters)
    return [schemas.PropertyRead.model_validate(row) for row in rows]


async def get_property(property_id: str, session: AsyncSession) -> schemas.PropertyRead:
    record = await common.fetch_or_404(session, Property, property_id, LABEL)
    return schemas.PropertyRead.model_validate(record)


async def create_property(payload: schemas.PropertyCreate, session: AsyncSession) -> schemas.PropertyRead:
    """Create a listing, deriving ``price_per_sqm`` when the client left it out."""

    fields = payload.model_dump()
    if "price_per_sqm" not in payload.model_fields_set:
        fields["price_per_sqm"] = derive_price_per_sqm(fields.get("price"), fields.get("area"))
    record = await common.create_record(session, Property, fields)
    return schemas.PropertyRead.model_validate(record)


async def update_property(
    property_id: str,
    payload: schemas.PropertyUpdate,
    session: AsyncSession,
) -> schemas.PropertyRead:
    """Merge supplied fields into the listing.

    When price or area changes and ``price_per_sqm`` was not sent, the derived
    value is recomputed from the merged record.
    """

    changes = payload.changes()
    async with session.begin():
        record = await common.fetch_or_404(session, Property, property_id, LABEL)
        if ("price" in changes or "area" in changes) and "price_per_sqm" not in changes:
            changes["price_per_sqm"] = derive_price_per_sqm(
                changes.get("price", record.price), changes.get("area", record.area)
            )
        await records_repo.apply_changes(session, record, changes)
    logger.info("Updated Property %s fields=%s", property_id, sorted(changes))
    return schemas.PropertyRead.model_validate(record)


async def delete_property(property_id: str, session: AsyncSession) -> MessageResponse:
    return await common.delete_record(session, Property, property_id, LABEL)


def derive_price_per_sqm(price: float | None, area: float | None) -> float | None:
    """Return price / area rounded to cents, or None when area is unusable."""

    if price is None or not area or area <= 0:
        return None
    return round(price / area, 2)

