"""Shared fixtures: an in-memory SQLite database behind the real application."""
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from estate_api.core.config import Settings
from estate_api.core.security import hash_password
from estate_api.db.session import Database
from estate_api.main import create_app
from estate_api.services.auth import AdminPrincipal

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"
SESSION_SECRET = "test-session-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite://",
        admin_username=ADMIN_USERNAME,
        admin_password_hash=hash_password(ADMIN_PASSWORD),
        session_secret=SESSION_SECRET,
        cors_allow_origins=[],
    )


@pytest_asyncio.fixture
async def database():
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http


@pytest.fixture
def admin_token(app) -> str:
    principal = AdminPrincipal(subject=f"config:{ADMIN_USERNAME}", username=ADMIN_USERNAME)
    return app.state.auth_gate.issue_token(principal)


@pytest.fixture
def admin_headers(admin_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


VILLA = {
    "title": "Test Villa",
    "propertyType": "villa",
    "listingType": "sale",
    "price": 1000000,
    "location": "Bole",
}
