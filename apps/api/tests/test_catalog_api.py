"""Projects, construction updates, team directory, settings and dashboard stats."""
from __future__ import annotations

import pytest

from conftest import VILLA

PROJECT = {"name": "Skyline Residences", "location": "CMC", "status": "construction", "progress": 45}


@pytest.mark.asyncio
async def test_project_lifecycle(client, admin_headers):
    created = await client.post("/api/admin/projects", json=PROJECT, headers=admin_headers)
    assert created.status_code == 201
    project = created.json()
    assert project["images"] == []

    patched = await client.patch(
        f"/api/admin/projects/{project['id']}", json={"progress": 120}, headers=admin_headers
    )
    assert patched.json()["progress"] == 120
    assert patched.json()["name"] == "Skyline Residences"

    listed = await client.get("/api/projects")
    assert [item["id"] for item in listed.json()] == [project["id"]]

    deleted = await client.delete(f"/api/admin/projects/{project['id']}", headers=admin_headers)
    assert deleted.json() == {"message": "Project deleted successfully"}
    assert (await client.get(f"/api/projects/{project['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_project_rejects_invalid_status(client, admin_headers):
    response = await client.post("/api/admin/projects", json={**PROJECT, "status": "demolished"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "status"


@pytest.mark.asyncio
async def test_construction_updates_newest_first_and_filtered(client, admin_headers):
    project = (await client.post("/api/admin/projects", json=PROJECT, headers=admin_headers)).json()

    for title, when in (("Foundation", "2024-01-10T00:00:00Z"), ("Floor 10", "2024-06-01T00:00:00Z")):
        response = await client.post(
            "/api/admin/construction-updates",
            json={"projectId": project["id"], "title": title, "updateDate": when},
            headers=admin_headers,
        )
        assert response.status_code == 201
    await client.post(
        "/api/admin/construction-updates",
        json={"projectId": "elsewhere", "title": "Unrelated"},
        headers=admin_headers,
    )

    scoped = await client.get("/api/construction-updates", params={"projectId": project["id"]})
    assert [item["title"] for item in scoped.json()] == ["Floor 10", "Foundation"]

    everything = await client.get("/api/construction-updates")
    assert len(everything.json()) == 3


@pytest.mark.asyncio
async def test_construction_update_requires_project_and_title(client, admin_headers):
    response = await client.post("/api/admin/construction-updates", json={}, headers=admin_headers)

    assert response.status_code == 400
    assert {error["field"] for error in response.json()["errors"]} == {"projectId", "title"}


@pytest.mark.asyncio
async def test_team_directory_orders_and_filters(client, admin_headers):
    async def add(name, order, active=True):
        response = await client.post(
            "/api/admin/team",
            json={"name": name, "position": "Agent", "displayOrder": order, "active": active},
            headers=admin_headers,
        )
        assert response.status_code == 201
        return response.json()

    second = await add("Alex Mekonnen", 2)
    first = await add("Hana Tesfaye", 1)
    retired = await add("Old Timer", 0, active=False)

    public = await client.get("/api/team")
    assert [item["id"] for item in public.json()] == [first["id"], second["id"]]

    inactive = await client.get("/api/team", params={"active": "false"})
    assert [item["id"] for item in inactive.json()] == [retired["id"]]

    everyone = await client.get("/api/admin/team", headers=admin_headers)
    assert [item["id"] for item in everyone.json()] == [retired["id"], first["id"], second["id"]]


@pytest.mark.asyncio
async def test_team_member_update_and_delete(client, admin_headers):
    member = (
        await client.post("/api/admin/team", json={"name": "Alex", "position": "Agent"}, headers=admin_headers)
    ).json()
    url = f"/api/admin/team/{member['id']}"

    patched = await client.patch(url, json={"specializations": ["villas"]}, headers=admin_headers)
    assert patched.json()["specializations"] == ["villas"]

    assert (await client.delete(url, headers=admin_headers)).status_code == 200
    assert (await client.delete(url, headers=admin_headers)).status_code == 404
    assert (await client.get(f"/api/team/{member['id']}")).json() == {"message": "Team member not found"}


@pytest.mark.asyncio
async def test_settings_upsert_by_key(client, admin_headers):
    first = await client.post(
        "/api/admin/settings", json={"key": "company_name", "value": "Addis Homes"}, headers=admin_headers
    )
    second = await client.post(
        "/api/admin/settings",
        json={"key": "company_name", "value": "Addis Homes PLC", "type": "string"},
        headers=admin_headers,
    )

    assert first.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    fetched = await client.get("/api/settings/company_name")
    assert fetched.json()["value"] == "Addis Homes PLC"
    assert len((await client.get("/api/settings")).json()) == 1

    missing = await client.get("/api/settings/nope")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Setting not found"}


@pytest.mark.asyncio
async def test_dashboard_stats(client, admin_headers):
    await client.post("/api/admin/properties", json=VILLA, headers=admin_headers)
    await client.post(
        "/api/admin/properties", json={**VILLA, "title": "Sold One", "status": "sold"}, headers=admin_headers
    )
    await client.post("/api/leads", json={"firstName": "A", "lastName": "B", "email": "a@b.c"})

    response = await client.get("/api/admin/stats", headers=admin_headers)

    assert response.status_code == 200
    stats = response.json()
    assert stats["totalProperties"] == 2
    assert stats["availableProperties"] == 1
    assert stats["soldProperties"] == 1
    assert stats["soldValue"] == 1000000
    assert stats["newLeads"] == 1
    assert stats["totalTeamMembers"] == 0
