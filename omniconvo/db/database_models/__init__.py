"""Database models (Data Objects) - map to database tables."""

from .conversation import ConversationDO, CreateConversationInput

__all__ = ["ConversationDO", "CreateConversationInput"]
