"""Conversation record store backed by DuckDB."""

from typing import List, Optional

from ..config import DatabaseConfig
from ..db import DatabaseConnection, ConversationRepository
from ..db.database_models import ConversationDO, CreateConversationInput
from ..errors import RecordStoreError
from ..utils.logger import get_app_logger


class RecordStore:
    """Owns conversation metadata records."""

    def __init__(self):
        self.db: Optional[DatabaseConnection] = None
        self.logger = get_app_logger()

    @property
    def is_configured(self) -> bool:
        return self.db is not None

    def initialize(self, config: DatabaseConfig) -> None:
        """
        Open the database. Calling again is a no-op.

        Args:
            config: Database configuration
        """
        if self.db is not None:
            return
        self.db = DatabaseConnection(config.path)

    @property
    def repository(self) -> ConversationRepository:
        if self.db is None or self.db.conn is None:
            raise RecordStoreError("Record store is not initialized")
        return ConversationRepository(self.db.conn)

    async def create(self, data: CreateConversationInput) -> ConversationDO:
        return self.repository.create(data)

    async def get(self, conversation_id: str) -> Optional[ConversationDO]:
        return self.repository.get(conversation_id)

    async def list_recent(self, limit: int = 50) -> List[ConversationDO]:
        return self.repository.list_recent(limit)

    async def count(self) -> int:
        return self.repository.count()

    async def increment_views(self, conversation_id: str) -> Optional[ConversationDO]:
        return self.repository.increment_views(conversation_id)

    def close(self) -> None:
        if self.db is not None:
            self.db.close()
            self.db = None
