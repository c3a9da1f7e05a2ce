"""Public project and construction progress endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import project as schemas
from ..services import projects as projects_service

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=list[schemas.ProjectRead])
async def list_projects(session: AsyncSession = Depends(get_session)) -> list[schemas.ProjectRead]:
    return await projects_service.list_projects(session)


@router.get("/projects/{project_id}", response_model=schemas.ProjectRead)
async def get_project(project_id: str, session: AsyncSession = Depends(get_session)) -> schemas.ProjectRead:
    return await projects_service.get_project(project_id, session)


@router.get("/construction-updates", response_model=list[schemas.ConstructionUpdateRead])
async def list_construction_updates(
    project_id: str | None = Query(default=None, alias="projectId"),
    session: AsyncSession = Depends(get_session),
) -> list[schemas.ConstructionUpdateRead]:
    """Return progress updates, most recent first, optionally for one project."""

    return await projects_service.list_construction_updates(project_id, session)
