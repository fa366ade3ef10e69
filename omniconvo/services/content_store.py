"""Conversation content storage.

Stores one transcript per object under a sharded key:
  {storage_path}/conversations/{uuid[:2]}/{uuid}.md
Objects are write-once; an existing key is never overwritten.
"""

import os
import uuid
from pathlib import Path
from typing import Optional

import aiofiles

from ..config import StorageConfig
from ..errors import StorageError
from ..utils.logger import get_app_logger

KEY_PREFIX = "conversations"


class ContentStore:
    """File-based storage gateway for transcript content."""

    def __init__(self):
        self.base_path: Optional[Path] = None
        self.logger = get_app_logger()

    @property
    def is_configured(self) -> bool:
        return self.base_path is not None

    def initialize(self, config: StorageConfig) -> None:
        """
        Configure the storage root. Calling again is a no-op.

        Args:
            config: Storage configuration
        """
        if self.base_path is not None:
            return
        base_path = Path(config.base_path)
        base_path.mkdir(parents=True, exist_ok=True)
        self.base_path = base_path
        self.logger.info(f"Content store ready at {base_path}")

    def key_for(self, conversation_id: str) -> str:
        """Derive the content key for a content object id."""
        return f"{KEY_PREFIX}/{conversation_id[:2]}/{conversation_id}.md"

    def _resolve(self, content_key: str) -> Path:
        if self.base_path is None:
            raise StorageError("Content store is not initialized")
        root = self.base_path.resolve()
        path = (root / content_key).resolve()
        if root not in path.parents:
            raise StorageError(f"Content key escapes storage root: {content_key}")
        return path

    async def store_conversation(self, conversation_id: str, content: str) -> str:
        """
        Write a transcript and return its content key.

        The bytes land under a temporary name and are moved into place
        only once fully written, so a key never points at partial content.

        Args:
            conversation_id: Fresh content object id
            content: Transcript text

        Returns:
            Content key to store on the record

        Raises:
            StorageError: If the key exists or the write fails
        """
        content_key = self.key_for(conversation_id)
        path = self._resolve(content_key)
        if path.exists():
            raise StorageError(f"Content key already exists: {content_key}")

        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise StorageError(f"Content for {content_key} is not UTF-8 encodable") from e

        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(tmp_path, mode="wb") as f:
                await f.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            self.logger.error(f"Failed to store content {content_key}: {e}")
            raise StorageError(f"Failed to store content {content_key}") from e
        finally:
            # gone after a successful replace
            tmp_path.unlink(missing_ok=True)

        self.logger.info(f"Stored conversation content: {content_key}")
        return content_key

    async def read_conversation(self, content_key: str) -> str:
        """
        Read a stored transcript.

        Args:
            content_key: Key returned by store_conversation

        Returns:
            Transcript text

        Raises:
            StorageError: If the object is missing or unreadable
        """
        path = self._resolve(content_key)
        try:
            async with aiofiles.open(path, mode="rb") as f:
                data = await f.read()
        except OSError as e:
            self.logger.error(f"Failed to read content {content_key}: {e}")
            raise StorageError(f"Failed to read content {content_key}") from e

        return data.decode("utf-8")
