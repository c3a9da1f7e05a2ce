"""Public team directory endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import team as schemas
from ..services import team as team_service

router = APIRouter(tags=["team"])


@router.get("/team", response_model=list[schemas.TeamMemberRead])
async def list_team(
    active: str | None = None,
    session: AsyncSession = Depends(get_session),
) -> list[schemas.TeamMemberRead]:
    """Active members by default; ``active=false`` lists inactive ones instead."""

    only_active = (active or "").strip().lower() != "false"
    return await team_service.list_members(only_active, session)


@router.get("/team/{member_id}", response_model=schemas.TeamMemberRead)
async def get_team_member(member_id: str, session: AsyncSession = Depends(get_session)) -> schemas.TeamMemberRead:
    return await team_service.get_member(member_id, session)
