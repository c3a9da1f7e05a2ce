"""Public lead intake and back-office lead management."""
from __future__ import annotations

import pytest

CONTACT = {"firstName": "Jane", "lastName": "Doe", "email": "jane@example.com"}


@pytest.mark.asyncio
async def test_missing_fields_are_reported_together(client, admin_headers):
    response = await client.post("/api/leads", json={"firstName": "Jane"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert len(errors) == 2
    assert {error["field"] for error in errors} == {"lastName", "email"}

    stored = await client.get("/api/admin/leads", headers=admin_headers)
    assert stored.json() == []


@pytest.mark.asyncio
async def test_submission_defaults_status_and_source(client):
    response = await client.post("/api/leads", json={**CONTACT, "status": "converted", "source": "  "})

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "new"
    assert body["source"] == "website"
    assert body["firstName"] == "Jane"


@pytest.mark.asyncio
async def test_explicit_source_is_kept(client):
    response = await client.post("/api/leads", json={**CONTACT, "source": "whatsapp"})

    assert response.json()["source"] == "whatsapp"


@pytest.mark.asyncio
async def test_invalid_email_is_rejected(client):
    response = await client.post("/api/leads", json={**CONTACT, "email": "not-an-email"})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"path": "email", "field": "email", "message": "Invalid email address"}
    ]


@pytest.mark.asyncio
async def test_repeat_submissions_are_not_deduplicated(client, admin_headers):
    first = await client.post("/api/leads", json=CONTACT)
    second = await client.post("/api/leads", json=CONTACT)

    assert first.json()["id"] != second.json()["id"]
    listed = await client.get("/api/admin/leads", headers=admin_headers)
    assert len(listed.json()) == 2


@pytest.mark.asyncio
async def test_admin_updates_status_and_filters_by_it(client, admin_headers):
    lead = (await client.post("/api/leads", json=CONTACT)).json()
    await client.post("/api/leads", json={**CONTACT, "email": "other@example.com"})

    response = await client.patch(
        f"/api/admin/leads/{lead['id']}",
        json={"status": "contacted", "assignedTo": "agent-7"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "contacted"
    assert response.json()["assignedTo"] == "agent-7"

    contacted = await client.get("/api/admin/leads", params={"status": "contacted"}, headers=admin_headers)
    assert [item["id"] for item in contacted.json()] == [lead["id"]]

    fetched = await client.get(f"/api/admin/leads/{lead['id']}", headers=admin_headers)
    assert fetched.json()["status"] == "contacted"


@pytest.mark.asyncio
async def test_lead_contact_details_are_not_editable(client, admin_headers):
    lead = (await client.post("/api/leads", json=CONTACT)).json()

    response = await client.patch(
        f"/api/admin/leads/{lead['id']}", json={"email": "x@example.com"}, headers=admin_headers
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_unknown_status_filter_is_rejected(client, admin_headers):
    response = await client.get("/api/admin/leads", params={"status": "lost"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "status"


@pytest.mark.asyncio
async def test_delete_lead_twice(client, admin_headers):
    lead = (await client.post("/api/leads", json=CONTACT)).json()
    url = f"/api/admin/leads/{lead['id']}"

    assert (await client.delete(url, headers=admin_headers)).status_code == 200
    again = await client.delete(url, headers=admin_headers)

    assert again.status_code == 404
    assert again.json() == {"message": "Lead not found"}
