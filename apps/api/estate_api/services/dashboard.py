"""Aggregate counts for the admin dashboard."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.lead import Lead, LeadStatus
from ..models.project import Project
from ..models.property import Property, PropertyStatus
from ..models.team_member import TeamMember
from ..repositories import common as records_repo
from ..repositories import properties as properties_repo
from ..schemas.admin import DashboardStats


async def collect_stats(session: AsyncSession) -> DashboardStats:
    sold = Property.status == PropertyStatus.SOLD
    return DashboardStats(
        total_properties=await records_repo.count(session, Property),
        available_properties=await records_repo.count(session, Property, Property.status == PropertyStatus.AVAILABLE),
        sold_properties=await records_repo.count(session, Property, sold),
        sold_value=await properties_repo.sum_price(session, sold),
        total_projects=await records_repo.count(session, Project),
        total_leads=await records_repo.count(session, Lead),
        new_leads=await records_repo.count(session, Lead, Lead.status == LeadStatus.NEW),
        total_team_members=await records_repo.count(session, TeamMember),
        active_team_members=await records_repo.count(session, TeamMember, TeamMember.active.is_(True)),
    )
