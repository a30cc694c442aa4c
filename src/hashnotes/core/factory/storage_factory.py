"""
Factory for creating persistence backends.
"""

from hashnotes.config import Config
from hashnotes.core.storage.base import KeyValueBackend
from hashnotes.core.storage.file_backend import JsonFileBackend
from hashnotes.core.storage.memory_backend import MemoryBackend
from hashnotes.core.storage.notes_storage import NotesStorage
from hashnotes.utils.exceptions import ConfigurationError


class StorageFactory:
    """Factory for creating storage backends from configuration."""

    @staticmethod
    def create_backend(config: Config) -> KeyValueBackend:
        """
        Create key-value backend from configuration.

        Args:
            config: Main configuration object

        Returns:
            Backend instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        backend = config.storage.backend
        if backend == "file":
            return JsonFileBackend(data_dir=config.storage.data_dir)
        elif backend == "memory":
            return MemoryBackend()
        else:
            raise ConfigurationError(
                f"Unsupported storage backend: {backend}",
                context={"backend": backend},
            )

    @staticmethod
    def create(config: Config) -> NotesStorage:
        """Create notes storage over the configured backend."""
        return NotesStorage(StorageFactory.create_backend(config))
