"""Project catalog and construction progress updates."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.project import ConstructionUpdate, Project
from ..repositories import projects as projects_repo
from ..schemas import project as schemas
from ..schemas.common import MessageResponse
from . import common

LABEL = "Project"
UPDATE_LABEL = "Construction update"


async def list_projects(session: AsyncSession) -> list[schemas.ProjectRead]:
    rows = await projects_repo.list_projects(session)
    return [schemas.ProjectRead.model_validate(row) for row in rows]


async def get_project(project_id: str, session: AsyncSession) -> schemas.ProjectRead:
    record = await common.fetch_or_404(session, Project, project_id, LABEL)
    return schemas.ProjectRead.model_validate(record)


async def create_project(payload: schemas.ProjectCreate, session: AsyncSession) -> schemas.ProjectRead:
    record = await common.create_record(session, Project, payload.model_dump())
    return schemas.ProjectRead.model_validate(record)


async def update_project(
    project_id: str,
    payload: schemas.ProjectUpdate,
    session: AsyncSession,
) -> schemas.ProjectRead:
    record = await common.update_record(session, Project, project_id, payload.changes(), LABEL)
    return schemas.ProjectRead.model_validate(record)


async def delete_project(project_id: str, session: AsyncSession) -> MessageResponse:
    """Delete the project only; its construction updates are left in place."""

    return await common.delete_record(session, Project, project_id, LABEL)


async def list_construction_updates(
    project_id: str | None,
    session: AsyncSession,
) -> list[schemas.ConstructionUpdateRead]:
    rows = await projects_repo.list_updates(session, project_id=project_id)
    return [schemas.ConstructionUpdateRead.model_validate(row) for row in rows]


async def create_construction_update(
    payload: schemas.ConstructionUpdateCreate,
    session: AsyncSession,
) -> schemas.ConstructionUpdateRead:
    fields = payload.model_dump()
    if fields.get("update_date") is None:
        fields["update_date"] = utcnow()
    record = await common.create_record(session, ConstructionUpdate, fields)
    return schemas.ConstructionUpdateRead.model_validate(record)


async def delete_construction_update(update_id: str, session: AsyncSession) -> MessageResponse:
    return await common.delete_record(session, ConstructionUpdate, update_id, UPDATE_LABEL)
