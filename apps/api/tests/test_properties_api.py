"""Property catalog and admin listing management over HTTP."""
from __future__ import annotations

from datetime import datetime

import pytest

from conftest import VILLA


async def _create(client, admin_headers, **overrides):
    payload = {**VILLA, **overrides}
    response = await client.post("/api/admin/properties", json=payload, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_applies_defaults_and_filters_match(client, admin_headers):
    created = await _create(client, admin_headers)

    assert created["status"] == "available"
    assert created["featured"] is False
    assert created["currency"] == "ETB"
    assert created["features"] == []
    assert created["id"]

    matching = await client.get("/api/properties", params={"location": "bole", "maxPrice": "2000000"})
    assert [item["id"] for item in matching.json()] == [created["id"]]

    too_cheap = await client.get("/api/properties", params={"minPrice": "2000000"})
    assert too_cheap.json() == []


@pytest.mark.asyncio
async def test_price_bounds_are_inclusive(client, admin_headers):
    created = await _create(client, admin_headers)

    response = await client.get("/api/properties", params={"minPrice": "1000000", "maxPrice": "1000000"})

    assert [item["id"] for item in response.json()] == [created["id"]]


@pytest.mark.asyncio
async def test_malformed_filters_are_ignored(client, admin_headers):
    await _create(client, admin_headers)

    response = await client.get("/api/properties", params={"minPrice": "abc", "featured": "maybe", "location": ""})

    assert response.status_code == 200
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_search_matches_description_and_combines_with_filters(client, admin_headers):
    garden = await _create(client, admin_headers, title="Family Home", description="Large GARDEN and pool")
    await _create(client, admin_headers, title="City Flat", location="Piassa", propertyType="apartment")

    by_description = await client.get("/api/properties", params={"search": "garden"})
    assert [item["id"] for item in by_description.json()] == [garden["id"]]

    combined = await client.get("/api/properties", params={"search": "garden", "type": "apartment"})
    assert combined.json() == []


@pytest.mark.asyncio
async def test_wildcard_characters_are_literal(client, admin_headers):
    await _create(client, admin_headers)

    response = await client.get("/api/properties", params={"location": "%"})

    assert response.json() == []


@pytest.mark.asyncio
async def test_featured_true_filters_and_false_does_not(client, admin_headers):
    plain = await _create(client, admin_headers)
    star = await _create(client, admin_headers, title="Star Villa", featured=True)

    featured = await client.get("/api/properties", params={"featured": "true"})
    unfiltered = await client.get("/api/properties", params={"featured": "false"})

    assert [item["id"] for item in featured.json()] == [star["id"]]
    assert {item["id"] for item in unfiltered.json()} == {plain["id"], star["id"]}


@pytest.mark.asyncio
async def test_limit_and_offset(client, admin_headers):
    for index in range(3):
        await _create(client, admin_headers, title=f"Villa {index}")

    first = await client.get("/api/properties", params={"limit": "2"})
    rest = await client.get("/api/properties", params={"limit": "2", "offset": "2"})

    assert len(first.json()) == 2
    assert len(rest.json()) == 1


@pytest.mark.asyncio
async def test_price_per_sqm_is_derived(client, admin_headers):
    created = await _create(client, admin_headers, area=200)
    assert created["pricePerSqm"] == 5000.0

    response = await client.patch(
        f"/api/admin/properties/{created['id']}", json={"price": 1200000}, headers=admin_headers
    )
    assert response.json()["pricePerSqm"] == 6000.0


@pytest.mark.asyncio
async def test_empty_patch_only_bumps_updated_at(client, admin_headers):
    created = await _create(client, admin_headers)
    before = (await client.get(f"/api/properties/{created['id']}")).json()

    response = await client.patch(f"/api/admin/properties/{created['id']}", json={}, headers=admin_headers)
    assert response.status_code == 200

    after = (await client.get(f"/api/properties/{created['id']}")).json()
    assert datetime.fromisoformat(after.pop("updatedAt")) > datetime.fromisoformat(before.pop("updatedAt"))
    assert after == before


@pytest.mark.asyncio
async def test_put_merges_like_patch(client, admin_headers):
    created = await _create(client, admin_headers, description="Keep me")

    response = await client.put(
        f"/api/admin/properties/{created['id']}", json={"status": "sold"}, headers=admin_headers
    )

    body = response.json()
    assert body["status"] == "sold"
    assert body["description"] == "Keep me"
    assert body["title"] == "Test Villa"


@pytest.mark.asyncio
async def test_patch_rejects_unknown_keys_and_null_required_fields(client, admin_headers):
    created = await _create(client, admin_headers)
    url = f"/api/admin/properties/{created['id']}"

    unknown = await client.patch(url, json={"colour": "red"}, headers=admin_headers)
    nulled = await client.patch(url, json={"title": None}, headers=admin_headers)

    assert unknown.status_code == 400
    assert unknown.json()["errors"][0]["field"] == "colour"
    assert nulled.status_code == 400
    assert nulled.json()["errors"][0]["field"] == "title"

    unchanged = (await client.get(url.replace("/admin", ""))).json()
    assert unchanged["title"] == "Test Villa"


@pytest.mark.asyncio
async def test_create_validation_reports_each_field(client, admin_headers):
    response = await client.post(
        "/api/admin/properties",
        json={"title": "", "propertyType": "castle", "listingType": "sale", "price": -1},
        headers=admin_headers,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    fields = {error["field"] for error in body["errors"]}
    assert fields == {"title", "propertyType", "price", "location"}


@pytest.mark.asyncio
async def test_delete_then_not_found(client, admin_headers):
    created = await _create(client, admin_headers)
    url = f"/api/admin/properties/{created['id']}"

    deleted = await client.delete(url, headers=admin_headers)
    again = await client.delete(url, headers=admin_headers)
    fetched = await client.get(f"/api/properties/{created['id']}")

    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Property deleted successfully"}
    assert again.status_code == 404
    assert again.json() == {"message": "Property not found"}
    assert fetched.status_code == 404


@pytest.mark.asyncio
async def test_unknown_property_is_404(client):
    response = await client.get("/api/properties/does-not-exist")

    assert response.status_code == 404
    assert response.json()["message"] == "Property not found"
