"""Ports - interfaces/protocols for external dependencies."""

from .kv_store import KeyValueStore, StorageError

__all__ = [
    "KeyValueStore",
    "StorageError",
]
