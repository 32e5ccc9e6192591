"""Key-value storage interface."""

from typing import Protocol


class StorageError(Exception):
    """Raised when the underlying storage cannot be read or written."""

    pass


class KeyValueStore(Protocol):
    """Interface for a local byte-valued key-value store."""

    def get(self, key: str) -> bytes | None:
        """Read the value for a key. Returns None if not set."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Write/overwrite the value for a key."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        ...
