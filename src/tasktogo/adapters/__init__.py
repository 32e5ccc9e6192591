"""Adapters - I/O implementations of ports."""

from .file_store import FileKeyValueStore
from .memory_store import InMemoryKeyValueStore

__all__ = [
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
]
