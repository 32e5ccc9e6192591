"""File-based key-value storage adapter."""

import re
from pathlib import Path

from tasktogo.ports.kv_store import StorageError

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class FileKeyValueStore:
    """
    File-based key-value storage.

    Implements KeyValueStore protocol. Each key gets a JSON file in the
    data directory; writes replace the file atomically.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a key."""
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> bytes | None:
        """Read the value for a key. Returns None if not found."""
        path = self._path_for_key(key)
        try:
            if not path.exists():
                return None
            return path.read_bytes()
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: bytes) -> None:
        """Write/overwrite the value for a key."""
        path = self._path_for_key(key)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(value)
            tmp_path.replace(path)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    def delete(self, key: str) -> None:
        """Remove the file for a key if it exists."""
        path = self._path_for_key(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot delete {path}: {e}") from e
