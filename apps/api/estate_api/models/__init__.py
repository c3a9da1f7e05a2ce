"""Expose ORM models."""
from .base import Base
from .blog_post import BlogPost
from .lead import Lead, LeadStatus
from .project import ConstructionUpdate, Project, ProjectStatus
from .property import ListingType, Property, PropertyStatus, PropertyType
from .setting import Setting, SettingType
from .team_member import TeamMember
from .user import User, UserRole

__all__ = [
    "Base",
    "BlogPost",
    "ConstructionUpdate",
    "Lead",
    "LeadStatus",
    "ListingType",
    "Project",
    "ProjectStatus",
    "Property",
    "PropertyStatus",
    "PropertyType",
    "Setting",
    "SettingType",
    "TeamMember",
    "User",
    "UserRole",
]
