"""Conversation database model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class CreateConversationInput:
    """Fields supplied by the caller when a conversation record is created."""

    model: str
    scraped_at: datetime
    source_html_bytes: int
    content_key: str
    views: int = 0


@dataclass
class ConversationDO:
    """Conversation data object - maps to conversations table."""

    id: str
    model: str
    scraped_at: datetime
    created_at: datetime
    source_html_bytes: int
    views: int
    content_key: str
