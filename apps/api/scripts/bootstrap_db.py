"""Create database schema and seed sample catalog data for development."""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from sqlalchemy import select

from estate_api.core.config import DatabaseSettings, load_settings
from estate_api.core.logging import configure_logging
from estate_api.db.session import Database
from estate_api.models.project import ConstructionUpdate, Project, ProjectStatus
from estate_api.models.property import ListingType, Property, PropertyStatus, PropertyType
from estate_api.models.setting import Setting, SettingType
from estate_api.models.team_member import TeamMember

PROPERTIES = [
	{
		"title": "Modern Villa in Bole",
		"description": "Four-bedroom villa with a private garden, close to the airport road.",
		"property_type": PropertyType.VILLA,
		"listing_type": ListingType.SALE,
		"status": PropertyStatus.AVAILABLE,
		"price": 25_000_000,
		"currency": "ETB",
		"location": "Bole, Addis Ababa",
		"address": "Bole Sub-city, Woreda 03",
		"bedrooms": 4,
		"bathrooms": 3,
		"area": 420,
		"features": ["garden", "parking", "security"],
		"images": ["https://picsum.photos/seed/bole-villa/800/600"],
		"featured": True,
	},
	{
		"title": "Commercial Office Space",
		"description": "Open-plan office floor with backup power and elevator access.",
		"property_type": PropertyType.OFFICE,
		"listing_type": ListingType.RENT,
		"status": PropertyStatus.AVAILABLE,
		"price": 180_000,
		"currency": "ETB",
		"location": "Kazanchis, Addis Ababa",
		"address": "Kazanchis Business District",
		"area": 300,
		"features": ["generator", "elevator", "parking"],
		"images": ["https://picsum.photos/seed/kazanchis-office/800/600"],
		"featured": False,
	},
]

PROJECTS = [
	{
		"name": "Skyline Residences",
		"description": "Twenty-storey residential tower with mixed apartment sizes.",
		"location": "CMC, Addis Ababa",
		"status": ProjectStatus.CONSTRUCTION,
		"progress": 45,
		"total_units": 120,
		"available_units": 64,
		"start_date": datetime(2024, 3, 1, tzinfo=timezone.utc),
		"expected_completion": datetime(2026, 12, 31, tzinfo=timezone.utc),
		"features": ["gym", "rooftop terrace", "underground parking"],
		"updates": [
			{
				"title": "Structure reaches floor 10",
				"content": "Concrete work on the tenth floor is complete.",
				"progress": 45,
			},
		],
	},
]

TEAM = [
	{
		"name": "Alex Mekonnen",
		"position": "Senior Sales Agent",
		"bio": "Helps families find homes across Bole and CMC.",
		"phone": "+251-911-000000",
		"email": "alex@example.com",
		"specializations": ["residential", "villas"],
		"display_order": 1,
	},
]

SETTINGS = [
	{"key": "company_name", "value": "Addis Homes", "type": SettingType.STRING, "description": "Shown in the site header"},
	{"key": "contact_phone", "value": "+251-911-000000", "type": SettingType.STRING, "description": "Main office line"},
	{"key": "default_currency", "value": "ETB", "type": SettingType.STRING, "description": "Currency for new listings"},
]


async def seed_properties(database: Database) -> None:
	"""Insert demo listings that are not present yet, matched by title."""

	async with database.sessionmaker() as session:
		async with session.begin():
			for data in PROPERTIES:
				existing = await session.scalar(select(Property).where(Property.title == data["title"]))
				if existing is None:
					session.add(Property(**data, price_per_sqm=round(data["price"] / data["area"], 2)))


async def seed_projects(database: Database) -> None:
	"""Insert demo projects and their construction updates."""

	async with database.sessionmaker() as session:
		async with session.begin():
			for data in PROJECTS:
				fields = {key: value for key, value in data.items() if key != "updates"}
				project = await session.scalar(select(Project).where(Project.name == fields["name"]))
				if project is not None:
					continue
				project = Project(**fields)
				session.add(project)
				await session.flush()
				for update in data["updates"]:
					session.add(ConstructionUpdate(project_id=project.id, **update))


async def seed_team(database: Database) -> None:
	async with database.sessionmaker() as session:
		async with session.begin():
			for data in TEAM:
				existing = await session.scalar(select(TeamMember).where(TeamMember.name == data["name"]))
				if existing is None:
					session.add(TeamMember(**data))


async def seed_settings(database: Database) -> None:
	"""Add default settings; values an admin already changed are left alone."""

	async with database.sessionmaker() as session:
		async with session.begin():
			for data in SETTINGS:
				existing = await session.scalar(select(Setting).where(Setting.key == data["key"]))
				if existing is None:
					session.add(Setting(**data))


async def main() -> None:
	settings = load_settings(DatabaseSettings)
	configure_logging()
	database = Database(settings.database_async_url, echo=settings.database_echo)
	try:
		await database.create_all()
		await seed_properties(database)
		await seed_projects(database)
		await seed_team(database)
		await seed_settings(database)
	finally:
		await database.dispose()
	print("Database schema ensured and demo data seeded.")


if __name__ == "__main__":
	asyncio.run(main())
