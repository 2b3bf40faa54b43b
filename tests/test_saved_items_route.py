# tests/test_saved_items_route.py
"""Tests for the saved-items endpoints."""
from __future__ import annotations

import pytest

from tests.helpers import auth_headers

URL = "/api/saved-items"

HOTEL = {"id": "mock-hotel-1", "name": "Budget Hostel Downtown", "pricePerNight": 25}
ACTIVITY = {"id": "mock-act-1", "title": "Free Walking Tour", "price": 0}


@pytest.mark.asyncio
async def test_save_and_list_items(client):
    response = await client.post(
        URL,
        json={"itemType": "hotel", "itemData": HOTEL, "conversationId": "c1"},
        headers=auth_headers(),
    )
    assert response.status_code == 200
    saved = response.json()["data"]
    assert saved["itemType"] == "hotel"
    assert saved["itemData"] == HOTEL
    assert saved["conversationId"] == "c1"

    await client.post(URL, json={"itemType": "activity", "itemData": ACTIVITY}, headers=auth_headers())

    response = await client.get(URL, headers=auth_headers())
    assert len(response.json()["data"]) == 2

    response = await client.get(URL, params={"type": "hotel"}, headers=auth_headers())
    items = response.json()["data"]
    assert [i["itemType"] for i in items] == ["hotel"]


@pytest.mark.asyncio
async def test_items_are_per_user(client):
    await client.post(URL, json={"itemType": "hotel", "itemData": HOTEL}, headers=auth_headers("u1"))
    response = await client.get(URL, headers=auth_headers("u2"))
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_invalid_item_type_is_400(client):
    response = await client.post(URL, json={"itemType": "flight", "itemData": HOTEL}, headers=auth_headers())
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_missing_fields_is_400(client):
    response = await client.post(URL, json={"itemType": "hotel"}, headers=auth_headers())
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_item(client):
    response = await client.post(URL, json={"itemType": "hotel", "itemData": HOTEL}, headers=auth_headers("u1"))
    item_id = response.json()["data"]["id"]

    response = await client.delete(f"{URL}/{item_id}", headers=auth_headers("u2"))
    assert response.status_code == 404

    response = await client.delete(f"{URL}/{item_id}", headers=auth_headers("u1"))
    assert response.status_code == 200

    response = await client.get(URL, headers=auth_headers("u1"))
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_requires_authentication(client):
    assert (await client.get(URL)).status_code == 401
