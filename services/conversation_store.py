# services/conversation_store.py
"""
Conversation persistence.

`upsert_conversation` is a single INSERT ... ON CONFLICT DO UPDATE keyed by
the provider's conversation id, so duplicate webhook deliveries racing each
other still leave exactly one row.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.conversation import UNKNOWN_USER_ID, Conversation
from services.errors import StorageError
from services.webhook_payload import ConversationRecord

logger = logging.getLogger(__name__)

# Overwritten on conflict; id and created_at are never touched
_MUTABLE_COLUMNS = ("user_id", "agent_id", "status", "transcript", "analysis", "summary")

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _dialect_insert(db: AsyncSession):
    dialect = db.bind.dialect.name if db.bind is not None else None
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise StorageError(f"Upsert not supported on dialect {dialect!r}")
    return insert


async def upsert_conversation(
    db: AsyncSession,
    record: ConversationRecord,
    *,
    claimable_by: str | None = None,
) -> bool:
    """
    Insert the record, or overwrite the mutable fields of the existing row.

    With `claimable_by`, an existing row is only overwritten when it belongs
    to that user or is still unattributed. Returns False when the row exists
    but belongs to someone else, True otherwise.
    """
    insert = _dialect_insert(db)
    stmt = insert(Conversation).values(
        user_id=record.user_id,
        conversation_id=record.conversation_id,
        agent_id=record.agent_id,
        status=record.status,
        transcript=record.transcript,
        analysis=record.analysis,
        summary=record.summary,
    )
    where = None
    if claimable_by is not None:
        where = Conversation.user_id.in_((claimable_by, UNKNOWN_USER_ID))
    stmt = stmt.on_conflict_do_update(
        index_elements=["conversation_id"],
        set_={
            **{name: stmt.excluded[name] for name in _MUTABLE_COLUMNS},
            "updated_at": func.now(),
        },
        where=where,
    )
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        logger.error("Upsert failed for conversation %s: %s", record.conversation_id, exc)
        raise StorageError(f"Failed to save conversation {record.conversation_id}") from exc

    if result.rowcount == 0:
        logger.warning(
            "Conversation %s is owned by another user; not overwritten for %s",
            record.conversation_id,
            record.user_id,
        )
        return False

    logger.info(
        "Upserted conversation %s for user %s (status=%s)",
        record.conversation_id,
        record.user_id,
        record.status,
    )
    return True


async def get_conversation(db: AsyncSession, conversation_id: str) -> Conversation | None:
    """Look up a conversation by the provider's conversation id."""
    stmt = (
        select(Conversation)
        .where(Conversation.conversation_id == conversation_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_conversations(db: AsyncSession, user_id: str) -> list[Conversation]:
    stmt = (
        select(Conversation)
        .where(Conversation.user_id == user_id)
        .order_by(Conversation.created_at.desc())
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def delete_conversation(db: AsyncSession, user_id: str, row_id: uuid.UUID) -> bool:
    """Delete a row only if it belongs to `user_id`. Returns whether a row was removed."""
    stmt = delete(Conversation).where(
        Conversation.id == row_id,
        Conversation.user_id == user_id,
    )
    result = await db.execute(stmt)
    return result.rowcount > 0
