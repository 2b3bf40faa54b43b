# api/app/schemas/conversation.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConversationResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: uuid.UUID
    user_id: str
    conversation_id: str
    agent_id: str
    status: str
    transcript: list[Any]
    analysis: dict[str, Any]
    summary: str
    created_at: datetime
    updated_at: datetime


class ConversationListResponse(BaseModel):
    success: bool = True
    conversations: list[ConversationResponse]


class EndConversationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    conversation_id: str | None = None
    agent_id: str | None = None
    transcript: list[Any] | None = None
    summary: str | None = None
    status: str | None = None
