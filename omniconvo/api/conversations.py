"""Conversation read API backing the listing and permalink pages."""

from fastapi import APIRouter, HTTPException, Query

from ..errors import StorageError
from ..models.conversation import (
    ConversationRecordResponse,
    ConversationListResponse,
    ConversationDetailResponse,
)
from ..services.runtime import LazyRuntimeInitializer, RuntimeContext

router = APIRouter(prefix="/api/conversation", tags=["Conversations"])

# Runtime (set by main.py)
runtime: LazyRuntimeInitializer = None


async def get_runtime_context() -> RuntimeContext:
    """Return the initialized runtime context."""
    if runtime is None:
        raise HTTPException(status_code=500, detail="Runtime not initialized")
    return await runtime.ensure_initialized()


@router.get("", response_model=ConversationListResponse)
async def list_conversations(
    limit: int = Query(50, ge=1, le=200, description="Maximum number of conversations")
):
    """List the most recent conversations."""
    context = await get_runtime_context()
    records = await context.record_store.list_recent(limit)
    total = await context.record_store.count()

    return ConversationListResponse(
        conversations=[ConversationRecordResponse.from_do(r) for r in records],
        total=total
    )


@router.get("/{conversation_id}", response_model=ConversationDetailResponse)
async def get_conversation(conversation_id: str):
    """Get a conversation with its transcript, counting one view."""
    context = await get_runtime_context()

    record = await context.record_store.get(conversation_id)
    if not record:
        raise HTTPException(status_code=404, detail=f"Conversation not found: {conversation_id}")

    try:
        content = await context.content_store.read_conversation(record.content_key)
    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to load conversation content")

    record = await context.record_store.increment_views(conversation_id) or record

    return ConversationDetailResponse(
        conversation=ConversationRecordResponse.from_do(record),
        content=content
    )
