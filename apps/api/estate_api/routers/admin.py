"""Admin endpoints for listings, projects, team, blog, leads and settings.

Every route here sits behind ``require_admin``; requests without a valid admin
session are rejected with 401 before a database session is used.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..models.lead import LeadStatus
from ..schemas import blog as blog_schema
from ..schemas import lead as lead_schema
from ..schemas import project as project_schema
from ..schemas import property as property_schema
from ..schemas import setting as setting_schema
from ..schemas import team as team_schema
from ..schemas.admin import DashboardStats
from ..schemas.common import MessageResponse
from ..services import blog as blog_service
from ..services import dashboard as dashboard_service
from ..services import leads as leads_service
from ..services import projects as projects_service
from ..services import properties as properties_service
from ..services import site_settings as settings_service
from ..services import team as team_service
from .deps import require_admin

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(session: AsyncSession = Depends(get_session)) -> DashboardStats:
    """Headline counts for the dashboard."""

    return await dashboard_service.collect_stats(session)


# Properties


@router.post("/properties", response_model=property_schema.PropertyRead, status_code=status.HTTP_201_CREATED)
async def create_property(
    payload: property_schema.PropertyCreate,
    session: AsyncSession = Depends(get_session),
) -> property_schema.PropertyRead:
    return await properties_service.create_property(payload, session)


@router.api_route("/properties/{property_id}", methods=["PUT", "PATCH"], response_model=property_schema.PropertyRead)
async def update_property(
    property_id: str,
    payload: property_schema.PropertyUpdate,
    session: AsyncSession = Depends(get_session),
) -> property_schema.PropertyRead:
    """Partial update; PUT is accepted with the same merge semantics."""

    return await properties_service.update_property(property_id, payload, session)


@router.delete("/properties/{property_id}", response_model=MessageResponse)
async def delete_property(property_id: str, session: AsyncSession = Depends(get_session)) -> MessageResponse:
    return await properties_service.delete_property(property_id, session)


# Projects


@router.post("/projects", response_model=project_schema.ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: project_schema.ProjectCreate,
    session: AsyncSession = Depends(get_session),
) -> project_schema.ProjectRead:
    return await projects_service.create_project(payload, session)


@router.patch("/projects/{project_id}", response_model=project_schema.ProjectRead)
async def update_project(
    project_id: str,
    payload: project_schema.ProjectUpdate,
    session: AsyncSession = Depends(get_session),
) -> project_schema.ProjectRead:
    return await projects_service.update_project(project_id, payload, session)


@router.delete("/projects/{project_id}", response_model=MessageResponse)
async def delete_project(project_id: str, session: AsyncSession = Depends(get_session)) -> MessageResponse:
    return await projects_service.delete_project(project_id, session)


@router.post(
    "/construction-updates",
    response_model=project_schema.ConstructionUpdateRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_construction_update(
    payload: project_schema.ConstructionUpdateCreate,
    session: AsyncSession = Depends(get_session),
) -> project_schema.ConstructionUpdateRead:
    return await projects_service.create_construction_update(payload, session)


@router.delete("/construction-updates/{update_id}", response_model=MessageResponse)
async def delete_construction_update(
    update_id: str,
    session: AsyncSession = Depends(get_session),
) -> MessageResponse:
    return await projects_service.delete_construction_update(update_id, session)


# Team


@router.get("/team", response_model=list[team_schema.TeamMemberRead])
async def list_team(session: AsyncSession = Depends(get_session)) -> list[team_schema.TeamMemberRead]:
    """All members, active or not, in presentation order."""

    return await team_service.list_members(None, session)


@router.post("/team", response_model=team_schema.TeamMemberRead, status_code=status.HTTP_201_CREATED)
async def create_team_member(
    payload: team_schema.TeamMemberCreate,
    session: AsyncSession = Depends(get_session),
) -> team_schema.TeamMemberRead:
    return await team_service.create_member(payload, session)


@router.patch("/team/{member_id}", response_model=team_schema.TeamMemberRead)
async def update_team_member(
    member_id: str,
    payload: team_schema.TeamMemberUpdate,
    session: AsyncSession = Depends(get_session),
) -> team_schema.TeamMemberRead:
    return await team_service.update_member(member_id, payload, session)


@router.delete("/team/{member_id}", response_model=MessageResponse)
async def delete_team_member(member_id: str, session: AsyncSession = Depends(get_session)) -> MessageResponse:
    return await team_service.delete_member(member_id, session)


# Blog


@router.get("/blog", response_model=list[blog_schema.BlogPostRead])
async def list_blog_posts(session: AsyncSession = Depends(get_session)) -> list[blog_schema.BlogPostRead]:
    """Drafts and published posts together, newest first."""

    return await blog_service.list_posts(None, session)


@router.post("/blog", response_model=blog_schema.BlogPostRead, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    payload: blog_schema.BlogPostCreate,
    session: AsyncSession = Depends(get_session),
) -> blog_schema.BlogPostRead:
    return await blog_service.create_post(payload, session)


@router.patch("/blog/{post_id}", response_model=blog_schema.BlogPostRead)
async def update_blog_post(
    post_id: str,
    payload: blog_schema.BlogPostUpdate,
    session: AsyncSession = Depends(get_session),
) -> blog_schema.BlogPostRead:
    return await blog_service.update_post(post_id, payload, session)


@router.delete("/blog/{post_id}", response_model=MessageResponse)
async def delete_blog_post(post_id: str, session: AsyncSession = Depends(get_session)) -> MessageResponse:
    return await blog_service.delete_post(post_id, session)


# Leads


@router.get("/leads", response_model=list[lead_schema.LeadRead])
async def list_leads(
    lead_status: LeadStatus | None = Query(default=None, alias="status"),
    session: AsyncSession = Depends(get_session),
) -> list[lead_schema.LeadRead]:
    return await leads_service.list_leads(lead_status, session)


@router.get("/leads/{lead_id}", response_model=lead_schema.LeadRead)
async def get_lead(lead_id: str, session: AsyncSession = Depends(get_session)) -> lead_schema.LeadRead:
    return await leads_service.get_lead(lead_id, session)


@router.patch("/leads/{lead_id}", response_model=lead_schema.LeadRead)
async def update_lead(
    lead_id: str,
    payload: lead_schema.LeadUpdate,
    session: AsyncSession = Depends(get_session),
) -> lead_schema.LeadRead:
    return await leads_service.update_lead(lead_id, payload, session)


@router.delete("/leads/{lead_id}", response_model=MessageResponse)
async def delete_lead(lead_id: str, session: AsyncSession = Depends(get_session)) -> MessageResponse:
    return await leads_service.delete_lead(lead_id, session)


# Settings


@router.post("/settings", response_model=setting_schema.SettingRead)
async def upsert_setting(
    payload: setting_schema.SettingUpsert,
    session: AsyncSession = Depends(get_session),
) -> setting_schema.SettingRead:
    return await settings_service.upsert_setting(payload, session)
