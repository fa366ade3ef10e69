"""Process runtime: configured capabilities and their one-time setup."""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import AppConfig, load_config
from ..errors import ConfigurationError
from ..utils.logger import get_app_logger
from .content_store import ContentStore
from .record_store import RecordStore


@dataclass
class RuntimeContext:
    """Configured capability handles passed to request handlers."""

    config: AppConfig
    content_store: ContentStore
    record_store: RecordStore


class LazyRuntimeInitializer:
    """
    Configures the content and record stores exactly once per process.

    Concurrent first calls share a single configuration attempt. A failed
    attempt leaves the runtime uninitialized so the next call retries.
    """

    def __init__(
        self,
        config_loader: Callable[[], AppConfig] = load_config,
        content_store: Optional[ContentStore] = None,
        record_store: Optional[RecordStore] = None
    ):
        self.config_loader = config_loader
        self.content_store = content_store or ContentStore()
        self.record_store = record_store or RecordStore()
        self.logger = get_app_logger()
        self._context: Optional[RuntimeContext] = None
        self._lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._context is not None

    @property
    def context(self) -> RuntimeContext:
        if self._context is None:
            raise ConfigurationError("Runtime is not initialized")
        return self._context

    async def ensure_initialized(self) -> RuntimeContext:
        """
        Configure the runtime on first use.

        Returns:
            The runtime context

        Raises:
            Whatever the config loader or a capability raised. The runtime
            stays uninitialized and any opened record store is closed.
            The traceback is left for the caller to log.
        """
        if self._context is not None:
            return self._context

        async with self._lock:
            if self._context is not None:
                return self._context

            try:
                config = self.config_loader()
                self.record_store.initialize(config.database)
                self.content_store.initialize(config.storage)
            except Exception as e:
                # a retry must reopen with whatever config it loads
                self.record_store.close()
                self.logger.error(f"Runtime initialization failed: {e}")
                raise

            self._context = RuntimeContext(
                config=config,
                content_store=self.content_store,
                record_store=self.record_store,
            )
            self.logger.info("Runtime initialized")

        return self._context

    async def close(self) -> None:
        """Release the record store connection."""
        async with self._lock:
            self.record_store.close()
