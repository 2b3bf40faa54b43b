# models/conversation.py
from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, JSONType, TimestampMixin, UUIDPrimaryKey

UNKNOWN_USER_ID = "unknown"


class Conversation(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "conversations"

    # Opaque id from the identity provider, or UNKNOWN_USER_ID
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    conversation_id: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    agent_id: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="completed")  # completed | failed | in-progress | ...
    transcript: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    analysis: Mapped[dict] = mapped_column(JSONType, nullable=False, default=dict)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
