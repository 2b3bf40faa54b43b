# tests/test_conversations_route.py
"""Tests for the conversation listing, manual save and delete endpoints."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import db.engine as db_engine_module
from api.app.main import app, lifespan
from db.engine import dispose_engine
from services.conversation_store import get_conversation
from services.errors import StorageError
from tests.helpers import auth_headers, sign, webhook_body


@pytest.mark.asyncio
async def test_end_conversation_saves_for_caller(client, db_session):
    response = await client.post(
        "/api/conversations/end",
        json={
            "conversationId": "manual_1",
            "agentId": "agent_1",
            "transcript": [
                {"role": "user", "message": "Barcelona in May"},
                {"role": "agent", "message": "Sounds fun"},
            ],
        },
        headers=auth_headers("user_42"),
    )
    assert response.status_code == 200
    assert response.json()["success"] is True

    row = await get_conversation(db_session, "manual_1")
    assert row.user_id == "user_42"
    assert row.summary == "Barcelona in May"
    assert row.status == "completed"
    assert row.analysis == {}


@pytest.mark.asyncio
async def test_end_conversation_prefers_given_summary(client, db_session):
    await client.post(
        "/api/conversations/end",
        json={"conversationId": "manual_2", "agentId": "agent_1", "summary": "Weekend in Berlin"},
        headers=auth_headers(),
    )
    row = await get_conversation(db_session, "manual_2")
    assert row.summary == "Weekend in Berlin"


@pytest.mark.asyncio
async def test_end_conversation_requires_ids(client):
    response = await client.post("/api/conversations/end", json={"agentId": "a"}, headers=auth_headers())
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_end_conversation_requires_auth(client):
    response = await client.post("/api/conversations/end", json={"conversationId": "x", "agentId": "a"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_end_conversation_storage_failure(client):
    with patch(
        "api.app.routes.conversations.upsert_conversation",
        new_callable=AsyncMock,
        side_effect=StorageError("Failed to save conversation manual_3"),
    ):
        response = await client.post(
            "/api/conversations/end",
            json={"conversationId": "manual_3", "agentId": "a"},
            headers=auth_headers(),
        )
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to save conversation manual_3"}


@pytest.mark.asyncio
async def test_end_conversation_cannot_take_over_another_users_row(client, db_session):
    first = await client.post(
        "/api/conversations/end",
        json={"conversationId": "conv_x", "agentId": "a", "summary": "Alice"},
        headers=auth_headers("alice"),
    )
    assert first.status_code == 200

    second = await client.post(
        "/api/conversations/end",
        json={"conversationId": "conv_x", "agentId": "a", "summary": "Mallory"},
        headers=auth_headers("mallory"),
    )
    assert second.status_code == 404

    row = await get_conversation(db_session, "conv_x")
    assert row.user_id == "alice"
    assert row.summary == "Alice"


@pytest.mark.asyncio
async def test_end_conversation_claims_unattributed_webhook_row(client, db_session, tokyo_event):
    body = webhook_body(tokyo_event)
    await client.post("/api/agent/webhook", content=body, headers={"elevenlabs-signature": sign(body)})

    response = await client.post(
        "/api/conversations/end",
        json={"conversationId": "c1", "agentId": "a1", "summary": "Tokyo in spring"},
        headers=auth_headers("user_8"),
    )
    assert response.status_code == 200

    row = await get_conversation(db_session, "c1")
    assert row.user_id == "user_8"
    assert row.summary == "Tokyo in spring"


@pytest.mark.asyncio
async def test_webhook_after_manual_save_updates_same_row(client, db_session, tokyo_event):
    await client.post(
        "/api/conversations/end",
        json={"conversationId": "c1", "agentId": "a1"},
        headers=auth_headers("user_7"),
    )
    tokyo_event["data"]["metadata"] = {"userId": "user_7"}
    body = webhook_body(tokyo_event)
    await client.post("/api/agent/webhook", content=body, headers={"elevenlabs-signature": sign(body)})

    response = await client.get("/api/conversations", headers=auth_headers("user_7"))
    conversations = response.json()["conversations"]
    assert len(conversations) == 1
    assert conversations[0]["conversationId"] == "c1"
    assert conversations[0]["summary"] == "Trip to Tokyo"


@pytest.mark.asyncio
async def test_list_only_returns_callers_conversations(client):
    for user_id, conversation_id in (("user_a", "ca"), ("user_b", "cb")):
        await client.post(
            "/api/conversations/end",
            json={"conversationId": conversation_id, "agentId": "agent"},
            headers=auth_headers(user_id),
        )
    response = await client.get("/api/conversations", headers=auth_headers("user_a"))
    body = response.json()
    assert body["success"] is True
    assert [c["conversationId"] for c in body["conversations"]] == ["ca"]
    assert body["conversations"][0]["userId"] == "user_a"


@pytest.mark.asyncio
async def test_delete_only_own_conversation(client, db_session):
    await client.post(
        "/api/conversations/end",
        json={"conversationId": "del_1", "agentId": "agent"},
        headers=auth_headers("owner"),
    )
    row = await get_conversation(db_session, "del_1")
    row_id = str(row.id)
    await db_session.close()

    response = await client.delete(f"/api/conversations/{row_id}", headers=auth_headers("intruder"))
    assert response.status_code == 404

    response = await client.delete(f"/api/conversations/{row_id}", headers=auth_headers("owner"))
    assert response.status_code == 200

    response = await client.get("/api/conversations", headers=auth_headers("owner"))
    assert response.json()["conversations"] == []


@pytest.mark.asyncio
async def test_agent_config_returns_ids(client):
    response = await client.get("/api/agent/config", headers=auth_headers("user_9"))
    assert response.status_code == 200
    assert response.json() == {"agentId": "agent_test", "userId": "user_9"}


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "ok", "service": "student-travel-api"}


@pytest.mark.asyncio
async def test_shutdown_disposes_engine():
    with patch("api.app.main.dispose_engine", new_callable=AsyncMock) as dispose:
        async with lifespan(app):
            dispose.assert_not_awaited()
    dispose.assert_awaited_once()


@pytest.mark.asyncio
async def test_dispose_engine_resets_cached_engine():
    engine = MagicMock()
    engine.dispose = AsyncMock()
    with patch("db.engine._engine", engine):
        await dispose_engine()
        assert db_engine_module._engine is None
    engine.dispose.assert_awaited_once()
