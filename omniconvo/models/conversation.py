"""Conversation API models."""

from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from ..db.database_models import ConversationDO


class ConversationTurn(BaseModel):
    """One turn of a structured conversation history."""

    role: Literal["human", "assistant"] = Field(description="Who spoke this turn")
    content: StrictStr = Field(description="Turn text")
    timestamp: Optional[StrictStr] = Field(None, description="When the turn was sent (ISO-8601)")


class SaveConversationArguments(BaseModel):
    """Arguments of the save_conversation tool."""

    conversation_text: Optional[StrictStr] = Field(None, description="Full conversation as flat text")
    conversation_history: Optional[List[ConversationTurn]] = Field(None, description="Ordered conversation turns")
    title: Optional[StrictStr] = Field(None, description="Conversation title")

    @model_validator(mode="after")
    def _require_transcript(self) -> "SaveConversationArguments":
        if self.conversation_text is None and self.conversation_history is None:
            raise ValueError("Either conversation_text or conversation_history is required")
        return self


class ConversationRecordResponse(BaseModel):
    """Response model for a stored conversation record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Conversation ID")
    model: str = Field(description="Source AI platform")
    scraped_at: datetime = Field(alias="scrapedAt", description="When the conversation was captured")
    created_at: datetime = Field(alias="createdAt", description="When the record was created")
    source_html_bytes: int = Field(alias="sourceHtmlBytes", description="Byte size of the stored transcript")
    views: int = Field(description="View counter")
    content_key: str = Field(alias="contentKey", description="Storage key of the transcript")

    @classmethod
    def from_do(cls, record: ConversationDO) -> "ConversationRecordResponse":
        return cls(
            id=record.id,
            model=record.model,
            scraped_at=record.scraped_at,
            created_at=record.created_at,
            source_html_bytes=record.source_html_bytes,
            views=record.views,
            content_key=record.content_key,
        )


class ConversationListResponse(BaseModel):
    """Response model for listing conversations."""

    conversations: List[ConversationRecordResponse] = Field(description="Most recent conversations")
    total: int = Field(description="Total number of stored conversations")


class ConversationDetailResponse(BaseModel):
    """Response model for one conversation and its transcript."""

    conversation: ConversationRecordResponse
    content: str = Field(description="Stored transcript")
