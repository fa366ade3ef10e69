"""Services package."""

from .content_store import ContentStore
from .record_store import RecordStore
from .runtime import LazyRuntimeInitializer, RuntimeContext
from .persistence import ConversationPersistence

__all__ = [
    "ContentStore",
    "RecordStore",
    "LazyRuntimeInitializer",
    "RuntimeContext",
    "ConversationPersistence",
]
