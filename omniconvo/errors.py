"""Exception types shared across the service."""


class OmniConvoError(Exception):
    """Base class for service errors."""


class ConfigurationError(OmniConvoError):
    """The runtime could not be configured."""


class StorageError(OmniConvoError):
    """Conversation content could not be written or read."""


class RecordStoreError(OmniConvoError):
    """A conversation record could not be created or read."""


class InvalidTranscriptError(OmniConvoError, ValueError):
    """The caller supplied no usable transcript."""
