"""Conversation repository for database operations."""

import uuid
from typing import Optional, List
from .base import BaseRepository, utcnow
from ..database_models.conversation import ConversationDO, CreateConversationInput
from ...errors import RecordStoreError

_COLUMNS = "id, model, scraped_at, created_at, source_html_bytes, views, content_key"


def _row_to_do(row) -> ConversationDO:
    return ConversationDO(
        id=row[0],
        model=row[1],
        scraped_at=row[2],
        created_at=row[3],
        source_html_bytes=row[4],
        views=row[5],
        content_key=row[6],
    )


class ConversationRepository(BaseRepository):
    """Repository for conversation record operations."""

    def create(self, data: CreateConversationInput) -> ConversationDO:
        """
        Create a new conversation record.

        The record id and created_at are assigned here.

        Args:
            data: Caller-supplied record fields

        Returns:
            The created ConversationDO

        Raises:
            RecordStoreError: If the insert fails
        """
        record = ConversationDO(
            id=str(uuid.uuid4()),
            model=data.model,
            scraped_at=data.scraped_at,
            created_at=utcnow(),
            source_html_bytes=data.source_html_bytes,
            views=data.views,
            content_key=data.content_key,
        )
        try:
            self.conn.execute(f"""
                INSERT INTO conversations ({_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?)
            """, [
                record.id,
                record.model,
                record.scraped_at,
                record.created_at,
                record.source_html_bytes,
                record.views,
                record.content_key,
            ])
            self.conn.commit()
        except Exception as e:
            self.logger.error(f"Failed to create conversation: {e}")
            raise RecordStoreError("Failed to create conversation record") from e

        self.logger.info(f"Created conversation record: {record.id}")
        return record

    def get(self, conversation_id: str) -> Optional[ConversationDO]:
        """
        Get conversation by ID.

        Args:
            conversation_id: Conversation ID

        Returns:
            ConversationDO instance or None
        """
        try:
            result = self.conn.execute(f"""
                SELECT {_COLUMNS}
                FROM conversations
                WHERE id = ?
            """, [conversation_id]).fetchone()
        except Exception as e:
            self.logger.error(f"Failed to get conversation {conversation_id}: {e}")
            raise RecordStoreError(f"Failed to read conversation record {conversation_id}") from e

        return _row_to_do(result) if result else None

    def list_recent(self, limit: int = 50) -> List[ConversationDO]:
        """
        List the most recently created conversations.

        Args:
            limit: Maximum number of records

        Returns:
            List of ConversationDO instances, newest first
        """
        try:
            results = self.conn.execute(f"""
                SELECT {_COLUMNS}
                FROM conversations
                ORDER BY created_at DESC
                LIMIT ?
            """, [limit]).fetchall()
        except Exception as e:
            self.logger.error(f"Failed to list conversations: {e}")
            raise RecordStoreError("Failed to list conversation records") from e

        return [_row_to_do(row) for row in results]

    def count(self) -> int:
        """Total number of conversation records."""
        try:
            return self.conn.execute("SELECT COUNT(*) FROM conversations").fetchone()[0]
        except Exception as e:
            self.logger.error(f"Failed to count conversations: {e}")
            raise RecordStoreError("Failed to count conversation records") from e

    def increment_views(self, conversation_id: str) -> Optional[ConversationDO]:
        """
        Add one to a conversation's view counter.

        Args:
            conversation_id: Conversation ID

        Returns:
            The updated ConversationDO, or None if the id is unknown
        """
        try:
            self.conn.execute(
                "UPDATE conversations SET views = views + 1 WHERE id = ?",
                [conversation_id]
            )
            self.conn.commit()
        except Exception as e:
            self.logger.error(f"Failed to increment views for {conversation_id}: {e}")
            raise RecordStoreError(f"Failed to update conversation record {conversation_id}") from e

        return self.get(conversation_id)
