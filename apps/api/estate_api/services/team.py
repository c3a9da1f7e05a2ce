"""Team member profiles."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.team_member import TeamMember
from ..repositories import team as team_repo
from ..schemas import team as schemas
from ..schemas.common import MessageResponse
from . import common

LABEL = "Team member"


async def list_members(active: bool | None, session: AsyncSession) -> list[schemas.TeamMemberRead]:
    rows = await team_repo.list_members(session, active=active)
    return [schemas.TeamMemberRead.model_validate(row) for row in rows]


async def get_member(member_id: str, session: AsyncSession) -> schemas.TeamMemberRead:
    record = await common.fetch_or_404(session, TeamMember, member_id, LABEL)
    return schemas.TeamMemberRead.model_validate(record)


async def create_member(payload: schemas.TeamMemberCreate, session: AsyncSession) -> schemas.TeamMemberRead:
    record = await common.create_record(session, TeamMember, payload.model_dump())
    return schemas.TeamMemberRead.model_validate(record)


async def update_member(
    member_id: str,
    payload: schemas.TeamMemberUpdate,
    session: AsyncSession,
) -> schemas.TeamMemberRead:
    record = await common.update_record(session, TeamMember, member_id, payload.changes(), LABEL)
    return schemas.TeamMemberRead.model_validate(record)


async def delete_member(member_id: str, session: AsyncSession) -> MessageResponse:
    return await common.delete_record(session, TeamMember, member_id, LABEL)
