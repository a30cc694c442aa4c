"""In-memory key-value backend for tests and ephemeral sessions."""

from hashnotes.core.storage.base import KeyValueBackend


class MemoryBackend(KeyValueBackend):
    """Dict-backed key-value backend. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        """
        Initialize memory backend.

        Args:
            initial: Optional pre-populated key/value pairs
        """
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)
