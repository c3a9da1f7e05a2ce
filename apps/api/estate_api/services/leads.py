"""Lead intake and back-office lead management."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.lead import Lead, LeadStatus
from ..repositories import leads as leads_repo
from ..schemas import lead as schemas
from ..schemas.common import MessageResponse
from . import common

logger = logging.getLogger(__name__)

LABEL = "Lead"


async def submit_lead(payload: schemas.LeadCreate, session: AsyncSession) -> schemas.LeadRead:
    """Store a contact-form submission as a new lead.

    Every submission creates its own record, even when the same email was seen
    moments ago.
    """

    fields = payload.model_dump()
    fields["status"] = LeadStatus.NEW
    record = await common.create_record(session, Lead, fields)
    logger.info("Lead %s captured from %s", record.id, record.source)
    return schemas.LeadRead.model_validate(record)


async def list_leads(status: LeadStatus | None, session: AsyncSession) -> list[schemas.LeadRead]:
    rows = await leads_repo.list_leads(session, status=status)
    return [schemas.LeadRead.model_validate(row) for row in rows]


async def get_lead(lead_id: str, session: AsyncSession) -> schemas.LeadRead:
    record = await common.fetch_or_404(session, Lead, lead_id, LABEL)
    return schemas.LeadRead.model_validate(record)


async def update_lead(lead_id: str, payload: schemas.LeadUpdate, session: AsyncSession) -> schemas.LeadRead:
    """Status and assignment changes are plain overwrites."""

    record = await common.update_record(session, Lead, lead_id, payload.changes(), LABEL)
    return schemas.LeadRead.model_validate(record)


async def delete_lead(lead_id: str, session: AsyncSession) -> MessageResponse:
    return await common.delete_record(session, Lead, lead_id, LABEL)
