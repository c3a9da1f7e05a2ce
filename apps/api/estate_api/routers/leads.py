"""Public lead intake endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import lead as schemas
from ..services import leads as leads_service

router = APIRouter(tags=["leads"])


@router.post("/leads", response_model=schemas.LeadRead, status_code=status.HTTP_201_CREATED)
async def submit_lead(
    payload: schemas.LeadCreate,
    session: AsyncSession = Depends(get_session),
) -> schemas.LeadRead:
    """Capture a contact-form submission."""

    return await leads_service.submit_lead(payload, session)
