"""
JSON file key-value backend.

Each key is stored as `<data_dir>/<key>.json`. Writes go to a temporary
file in the same directory and are moved into place with os.replace, so a
crash mid-write never leaves a truncated document behind.
"""

import os
import tempfile
from pathlib import Path

from hashnotes.core.storage.base import KeyValueBackend
from hashnotes.utils.exceptions import StorageError
from hashnotes.utils.logger import get_logger

logger = get_logger(__name__)

_SUFFIX = ".json"


class JsonFileBackend(KeyValueBackend):
    """
    File-per-key backend rooted at a data directory.

    Features:
    - Human-readable JSON documents
    - Atomic replace on write
    - Directory created on first use
    """

    def __init__(self, data_dir: str | Path = "data"):
        """
        Initialize JSON file backend.

        Args:
            data_dir: Directory holding one file per key
        """
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}", context={"key": key})
        return self.data_dir / f"{key}{_SUFFIX}"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}", context={"key": key}) from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}", context={"key": key}) from e

        logger.debug("Wrote {} chars to {}", len(value), path, extra={"key": key})

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}", context={"key": key}) from e

    def keys(self) -> list[str]:
        if not self.data_dir.exists():
            return []
        return sorted(
            path.name[: -len(_SUFFIX)]
            for path in self.data_dir.glob(f"*{_SUFFIX}")
            if not path.name.startswith(".")
        )
