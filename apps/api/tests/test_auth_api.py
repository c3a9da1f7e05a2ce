"""Admin login, cookie sessions, verify and logout."""
from __future__ import annotations

import pytest

from conftest import ADMIN_PASSWORD, ADMIN_USERNAME
from estate_api.core.security import hash_password
from estate_api.models.user import User, UserRole

LOGIN_URL = "/api/auth/admin/login"


@pytest.mark.asyncio
async def test_login_returns_token_and_sets_cookie(client):
    response = await client.post(LOGIN_URL, json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["token"]
    assert body["user"]["username"] == ADMIN_USERNAME
    assert body["user"]["role"] == "admin"

    cookie = response.headers["set-cookie"]
    assert cookie.startswith("admin_session=")
    assert "HttpOnly" in cookie

    bearer = await client.get(
        "/api/auth/admin/verify", headers={"Authorization": f"Bearer {body['token']}"}
    )
    assert bearer.status_code == 200
    assert bearer.json()["authenticated"] is True


@pytest.mark.asyncio
async def test_cookie_session_authorises_admin_calls(client):
    await client.post(LOGIN_URL, json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})

    stats = await client.get("/api/admin/stats")
    assert stats.status_code == 200

    logout = await client.post("/api/auth/admin/logout")
    assert logout.json() == {"success": True}

    after = await client.get("/api/admin/stats")
    assert after.status_code == 401


@pytest.mark.asyncio
async def test_wrong_password_is_401(client):
    response = await client.post(LOGIN_URL, json={"username": ADMIN_USERNAME, "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid username or password"}
    assert "set-cookie" not in response.headers


@pytest.mark.asyncio
async def test_blank_credentials_are_400(client):
    response = await client.post(LOGIN_URL, json={"username": " "})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Username and password are required"
    assert {error["field"] for error in body["errors"]} == {"username", "password"}


@pytest.mark.asyncio
async def test_database_admin_can_sign_in(client, database):
    async with database.sessionmaker() as session:
        async with session.begin():
            session.add(
                User(
                    username="ops",
                    email="ops@example.com",
                    first_name="Olga",
                    password_hash=hash_password("ops-pass"),
                    role=UserRole.ADMIN,
                )
            )

    response = await client.post(LOGIN_URL, json={"username": "ops@example.com", "password": "ops-pass"})
    assert response.status_code == 200
    token = response.json()["token"]
    assert response.json()["user"]["firstName"] == "Olga"

    verified = await client.get("/api/auth/admin/verify", headers={"Authorization": f"Bearer {token}"})
    assert verified.json()["user"]["username"] == "ops"


@pytest.mark.asyncio
async def test_inactive_or_non_admin_users_cannot_sign_in(client, database):
    async with database.sessionmaker() as session:
        async with session.begin():
            session.add(User(username="agent", password_hash=hash_password("pw"), role=UserRole.AGENT))
            session.add(
                User(username="gone", password_hash=hash_password("pw"), role=UserRole.ADMIN, is_active=False)
            )

    agent = await client.post(LOGIN_URL, json={"username": "agent", "password": "pw"})
    gone = await client.post(LOGIN_URL, json={"username": "gone", "password": "pw"})

    assert agent.status_code == 401
    assert gone.status_code == 401


@pytest.mark.asyncio
async def test_verify_rejects_deactivated_database_admin(client, database):
    async with database.sessionmaker() as session:
        async with session.begin():
            user = User(username="temp", password_hash=hash_password("pw"), role=UserRole.ADMIN)
            session.add(user)

    login = await client.post(LOGIN_URL, json={"username": "temp", "password": "pw"})
    token = login.json()["token"]

    async with database.sessionmaker() as session:
        async with session.begin():
            stored = await session.get(User, user.id)
            stored.is_active = False

    response = await client.get("/api/auth/admin/verify", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
