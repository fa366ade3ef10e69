"""Conversation persistence pipeline."""

import uuid
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from ..db.database_models import CreateConversationInput
from ..models.conversation import ConversationTurn
from ..utils.logger import get_app_logger
from .runtime import LazyRuntimeInitializer
from .transcript import normalize_transcript

PERMALINK_PATH = "conversation"


def build_permalink(base_url: str, record_id: str) -> str:
    return f"{base_url.rstrip('/')}/{PERMALINK_PATH}/{record_id}"


class ConversationPersistence:
    """Stores a transcript, records it, and returns its permalink."""

    def __init__(self, runtime: LazyRuntimeInitializer):
        self.runtime = runtime
        self.logger = get_app_logger()

    async def save_conversation(
        self,
        content: Union[str, Sequence[ConversationTurn]],
        title: Optional[str] = None
    ) -> str:
        """
        Persist a conversation.

        The content is written before the record is created, so a record
        never points at missing content. A failed record insert leaves an
        unreferenced content object behind.

        Args:
            content: Flat transcript text or ordered turns
            title: Optional title prepended to the transcript

        Returns:
            Permalink of the new conversation record

        Raises:
            InvalidTranscriptError: If content is empty
            StorageError: If the content write fails
            RecordStoreError: If the record insert fails
        """
        context = await self.runtime.ensure_initialized()

        if isinstance(content, str):
            transcript = normalize_transcript(text=content, title=title)
        else:
            transcript = normalize_transcript(turns=content, title=title)

        content_id = str(uuid.uuid4())
        content_key = await context.content_store.store_conversation(content_id, transcript)

        record = await context.record_store.create(CreateConversationInput(
            model=context.config.model,
            scraped_at=datetime.now(timezone.utc).replace(tzinfo=None),
            source_html_bytes=len(transcript.encode("utf-8")),
            views=0,
            content_key=content_key,
        ))

        permalink = build_permalink(context.config.base_url, record.id)
        self.logger.info(f"Saved conversation {record.id} ({record.source_html_bytes} bytes)")
        return permalink
