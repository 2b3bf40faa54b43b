# api/app/routes/conversations.py
from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.app.dependencies import get_current_user_id, get_session
from api.app.schemas.conversation import (
    ConversationListResponse,
    ConversationResponse,
    EndConversationRequest,
)
from services.conversation_store import delete_conversation, list_conversations, upsert_conversation
from services.errors import StorageError
from services.observability import log_conversation_saved
from services.webhook_payload import (
    DEFAULT_STATUS,
    MAX_SUMMARY_LENGTH,
    NO_SUMMARY_PLACEHOLDER,
    ConversationRecord,
    summarize_transcript,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversations"])


@router.get("/conversations", response_model=ConversationListResponse)
async def get_conversations(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    conversations = await list_conversations(db, user_id)
    return ConversationListResponse(
        conversations=[ConversationResponse.model_validate(c) for c in conversations],
    )


@router.post("/conversations/end")
async def end_conversation(
    body: EndConversationRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    """Save a conversation from the client when it ends, without waiting for the webhook."""
    if not body.conversation_id or not body.agent_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="conversationId and agentId are required",
        )

    transcript = body.transcript or []
    if body.summary and body.summary.strip():
        summary = body.summary[:MAX_SUMMARY_LENGTH]
    else:
        summary = summarize_transcript(transcript) or NO_SUMMARY_PLACEHOLDER

    record = ConversationRecord(
        user_id=user_id,
        conversation_id=body.conversation_id,
        agent_id=body.agent_id,
        status=body.status or DEFAULT_STATUS,
        transcript=transcript,
        analysis={},
        summary=summary,
    )

    try:
        saved = await upsert_conversation(db, record, claimable_by=user_id)
        if saved:
            await log_conversation_saved(db, record, source="manual")
            await db.commit()
        else:
            await db.rollback()
    except (StorageError, SQLAlchemyError) as exc:
        await db.rollback()
        logger.error("Manual save failed for %s: %s", record.conversation_id, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(exc) or "Failed to save conversation"},
        )

    if not saved:
        raise HTTPException(status_code=404, detail="Conversation not found or unauthorized")
    return {"success": True, "message": "Conversation saved successfully"}


@router.delete("/conversations/{conversation_row_id}")
async def remove_conversation(
    conversation_row_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    deleted = await delete_conversation(db, user_id, conversation_row_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Conversation not found or unauthorized")
    await db.commit()
    return {"success": True, "message": "Conversation deleted successfully"}
