"""Domain errors — custom exceptions for clipstack.

These exceptions are raised by adapters and domain services and caught by
application or presentation layers. None of them is fatal to the process.
"""


class ClipstackError(Exception):
    """Base exception for all clipstack errors."""


class RegistryLoadError(ClipstackError):
    """Raised when the persisted registry is missing or malformed."""


class RegistryWriteError(ClipstackError):
    """Raised when the registry cannot be written to durable storage."""


class ClipboardError(ClipstackError):
    """Raised when clipboard operations fail."""


class ConfigurationError(ClipstackError):
    """Raised when a setting is invalid or unknown."""


class EntryNotFoundError(ClipstackError):
    """Raised when a history entry cannot be found by index."""
