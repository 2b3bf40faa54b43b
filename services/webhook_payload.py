# services/webhook_payload.py
"""
Normalize ElevenLabs post-call webhook events into conversation records.

The provider payload is inconsistent about where the caller's identity
ends up, so the user id is probed in a fixed priority order:

  1. data.metadata.userId
  2. data.conversation_initiation_client_data.{userId,
     custom_llm_extra_body.userId, metadata.userId, dynamic_variables.userId}
  3. data.user_id

Events without an identity are still kept under the "unknown" user.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from models.conversation import UNKNOWN_USER_ID
from services.errors import PayloadShapeError

logger = logging.getLogger(__name__)

SUPPORTED_EVENT_TYPE = "post_call_transcription"

MAX_SUMMARY_LENGTH = 500
NO_SUMMARY_PLACEHOLDER = "No summary available"
DEFAULT_STATUS = "completed"

_USER_ID_PATHS: tuple[tuple[str, ...], ...] = (
    ("metadata", "userId"),
    ("conversation_initiation_client_data", "userId"),
    ("conversation_initiation_client_data", "custom_llm_extra_body", "userId"),
    ("conversation_initiation_client_data", "metadata", "userId"),
    ("conversation_initiation_client_data", "dynamic_variables", "userId"),
    ("user_id",),
)


@dataclass
class ConversationRecord:
    """Normalized, storage-ready view of one conversation."""
    user_id: str
    conversation_id: str
    agent_id: str
    status: str = DEFAULT_STATUS
    transcript: list = field(default_factory=list)
    analysis: dict = field(default_factory=dict)
    summary: str = NO_SUMMARY_PLACEHOLDER


def _dig(data: Any, path: tuple[str, ...]) -> Any:
    current = data
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _as_identity(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    # Stored verbatim; blank strings count as missing
    if isinstance(value, str) and value.strip():
        return value
    return None


def extract_user_id(data: dict) -> str | None:
    """Return the first non-empty user id in priority order, or None."""
    for path in _USER_ID_PATHS:
        user_id = _as_identity(_dig(data, path))
        if user_id:
            return user_id
    return None


def summarize_transcript(transcript: Any) -> str | None:
    """Join the user's turns, capped at MAX_SUMMARY_LENGTH. None if nothing usable."""
    if not isinstance(transcript, list):
        return None
    messages = [
        entry["message"]
        for entry in transcript
        if isinstance(entry, dict)
        and entry.get("role") == "user"
        and isinstance(entry.get("message"), str)
    ]
    text = " ".join(messages)[:MAX_SUMMARY_LENGTH]
    if not text.strip():
        return None
    return text


def build_summary(analysis: dict, transcript: Any) -> str:
    for key in ("transcript_summary", "summary"):
        provided = analysis.get(key)
        if isinstance(provided, str) and provided.strip():
            return provided[:MAX_SUMMARY_LENGTH]
    return summarize_transcript(transcript) or NO_SUMMARY_PLACEHOLDER


def normalize_webhook_event(event: Any) -> ConversationRecord | None:
    """
    Turn one webhook event into a ConversationRecord.

    Returns None for event types this service does not store.
    Raises PayloadShapeError when the event is missing `data` or
    `data.conversation_id`.
    """
    if not isinstance(event, dict):
        raise PayloadShapeError("Webhook body must be a JSON object")

    event_type = event.get("type")
    if event_type != SUPPORTED_EVENT_TYPE:
        logger.info("Ignoring webhook event type %r", event_type)
        return None

    data = event.get("data")
    if not isinstance(data, dict) or not data:
        raise PayloadShapeError("Webhook payload has no data field")

    conversation_id = _as_identity(data.get("conversation_id"))
    if conversation_id is None:
        raise PayloadShapeError("Webhook payload has no data.conversation_id")

    user_id = extract_user_id(data)
    if user_id is None:
        client_data = data.get("conversation_initiation_client_data")
        logger.warning(
            "No userId in webhook for conversation %s; storing as %r. data keys=%s client_data keys=%s",
            conversation_id,
            UNKNOWN_USER_ID,
            sorted(data.keys()),
            sorted(client_data.keys()) if isinstance(client_data, dict) else None,
        )
        user_id = UNKNOWN_USER_ID

    transcript = data.get("transcript")
    if not isinstance(transcript, list):
        transcript = []
    analysis = data.get("analysis")
    if not isinstance(analysis, dict):
        analysis = {}

    status = data.get("status")
    if not isinstance(status, str) or not status:
        status = DEFAULT_STATUS

    agent_id = data.get("agent_id")

    return ConversationRecord(
        user_id=user_id,
        conversation_id=conversation_id,
        agent_id=agent_id if isinstance(agent_id, str) else "",
        status=status,
        transcript=transcript,
        analysis=analysis,
        summary=build_summary(analysis, transcript),
    )
