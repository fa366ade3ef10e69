"""Repository layer for data access."""

from .conversation import ConversationRepository

__all__ = ["ConversationRepository"]
