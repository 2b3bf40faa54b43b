# models/saved_item.py
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, JSONType, TimestampMixin, UUIDPrimaryKey

ITEM_TYPES = ("activity", "hotel", "restaurant")


class SavedItem(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "saved_items"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    item_type: Mapped[str] = mapped_column(String(50), nullable=False)  # activity | hotel | restaurant
    item_data: Mapped[dict] = mapped_column(JSONType, nullable=False)
    # Conversation the item was recommended from, if any
    conversation_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
