# services/observability.py
"""
Structured event logging to the events table, mirrored to the Python logger.
"""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from models.conversation import UNKNOWN_USER_ID
from models.event import Event
from services.webhook_payload import ConversationRecord

logger = logging.getLogger(__name__)


async def log_event(
    db: AsyncSession,
    event_type: str,
    level: str = "info",
    source: str | None = None,
    message: str | None = None,
    metadata: dict | None = None,
) -> Event:
    """Persist a structured event log entry."""
    event = Event(
        event_type=event_type,
        level=level,
        source=source,
        message=message,
        metadata_=metadata,
    )
    db.add(event)
    await db.flush()
    logger.log(
        getattr(logging, level.upper(), logging.INFO),
        "[%s] %s %s",
        event_type,
        message or "",
        metadata or {},
    )
    return event


async def log_conversation_saved(
    db: AsyncSession,
    record: ConversationRecord,
    source: str,
) -> Event:
    """Record a conversation save; saves without a real user id are flagged as warnings."""
    metadata = {
        "conversation_id": record.conversation_id,
        "agent_id": record.agent_id,
        "user_id": record.user_id,
        "status": record.status,
        "transcript_turns": len(record.transcript),
    }
    if record.user_id == UNKNOWN_USER_ID:
        return await log_event(
            db,
            f"conversation_{source}_unknown_user",
            "warning",
            source=source,
            message="Conversation saved without a user id; check the client passes userId when starting calls",
            metadata=metadata,
        )
    return await log_event(db, f"conversation_{source}_saved", "info", source=source, metadata=metadata)
