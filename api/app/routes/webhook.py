# api/app/routes/webhook.py
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.app.config import Settings, get_settings
from api.app.dependencies import get_session
from services.conversation_store import upsert_conversation
from services.errors import PayloadShapeError, StorageError
from services.observability import log_conversation_saved
from services.webhook_payload import normalize_webhook_event
from services.webhook_signature import get_signature_header, verify_signature

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])


@router.get("/agent/webhook")
async def webhook_status():
    return {
        "status": "ok",
        "message": "ElevenLabs webhook endpoint is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/agent/webhook")
async def receive_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_session),
):
    """Verify, normalize and upsert an ElevenLabs post-call event."""
    # Signature covers the exact bytes received, so read before parsing
    raw_body = await request.body()
    signature = get_signature_header(request.headers)
    if not verify_signature(raw_body, signature, settings.elevenlabs_webhook_secret):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    try:
        event = json.loads(raw_body)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body") from exc

    try:
        record = normalize_webhook_event(event)
    except PayloadShapeError as exc:
        logger.error("Invalid webhook payload: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid webhook payload") from exc

    if record is None:
        return {"ok": True}

    try:
        await upsert_conversation(db, record)
        await log_conversation_saved(db, record, source="webhook")
        await db.commit()
    except (StorageError, SQLAlchemyError) as exc:
        await db.rollback()
        logger.error("Webhook storage failure for %s: %s", record.conversation_id, exc)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error") from exc

    return {"ok": True}
