"""Pydantic models for API request/response."""

from .conversation import (
    ConversationTurn,
    SaveConversationArguments,
    ConversationRecordResponse,
    ConversationListResponse,
    ConversationDetailResponse,
)
from .jsonrpc import JsonRpcRequest, JsonRpcError, McpMethod

__all__ = [
    "ConversationTurn",
    "SaveConversationArguments",
    "ConversationRecordResponse",
    "ConversationListResponse",
    "ConversationDetailResponse",
    "JsonRpcRequest",
    "JsonRpcError",
    "McpMethod",
]
