# api/app/schemas/saved_item.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SavedItemResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: uuid.UUID
    user_id: str
    item_type: str
    item_data: dict[str, Any]
    conversation_id: str | None = None
    created_at: datetime


class SavedItemCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    item_type: str | None = None
    item_data: dict[str, Any] | None = None
    conversation_id: str | None = None


class SavedItemResult(BaseModel):
    success: bool = True
    data: SavedItemResponse


class SavedItemListResponse(BaseModel):
    success: bool = True
    data: list[SavedItemResponse]
