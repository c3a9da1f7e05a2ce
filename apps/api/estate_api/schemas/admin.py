"""Schemas for the admin dashboard."""
from __future__ import annotations

from .common import CamelModel


class DashboardStats(CamelModel):
    total_properties: int
    available_properties: int
    sold_properties: int
    sold_value: float
    total_projects: int
    total_leads: int
    new_leads: int
    total_team_members: int
    active_team_members: int
