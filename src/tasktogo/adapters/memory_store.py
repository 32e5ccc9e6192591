"""In-memory key-value storage adapter."""


class InMemoryKeyValueStore:
    """
    Dict-backed key-value storage.

    Implements KeyValueStore protocol. Nothing survives the process; used
    for tests and throwaway sessions. Counts writes so callers can check
    how often state was flushed.
    """

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})
        self.write_count = 0

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)
        self.write_count += 1

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
