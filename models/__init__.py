# models/__init__.py
from models.base import Base
from models.conversation import Conversation
from models.saved_item import SavedItem
from models.event import Event

__all__ = [
    "Base",
    "Conversation",
    "SavedItem",
    "Event",
]
