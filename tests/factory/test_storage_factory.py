"""
Tests for StorageFactory.
"""

import pytest

from hashnotes.config import Config, StorageConfig
from hashnotes.core.factory import StorageFactory
from hashnotes.core.storage import JsonFileBackend, MemoryBackend, NotesStorage
from hashnotes.utils.exceptions import ConfigurationError


@pytest.mark.unit
class TestStorageFactory:
    """Tests for backend selection."""

    def test_file_backend(self, tmp_path):
        config = Config(storage=StorageConfig(backend="file", data_dir=str(tmp_path)))

        backend = StorageFactory.create_backend(config)

        assert isinstance(backend, JsonFileBackend)
        assert backend.data_dir == tmp_path

    def test_memory_backend(self):
        config = Config(storage=StorageConfig(backend="memory"))

        assert isinstance(StorageFactory.create_backend(config), MemoryBackend)

    def test_unsupported_backend(self):
        config = Config(storage=StorageConfig(backend="sqlite"))

        with pytest.raises(ConfigurationError, match="Unsupported storage backend"):
            StorageFactory.create_backend(config)

    def test_create_notes_storage(self):
        storage = StorageFactory.create(Config(storage=StorageConfig(backend="memory")))

        assert isinstance(storage, NotesStorage)
        assert isinstance(storage.backend, MemoryBackend)
