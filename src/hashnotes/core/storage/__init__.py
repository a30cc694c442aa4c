"""
Persistence for HashNotes.

Provides the key-value backend interface, concrete backends and the notes
storage collaborator used by the note store.

Available backends:
- JsonFileBackend: One JSON file per key under a data directory
- MemoryBackend: Process-local dict, for tests and ephemeral sessions
"""

from hashnotes.core.storage.base import KeyValueBackend
from hashnotes.core.storage.file_backend import JsonFileBackend
from hashnotes.core.storage.memory_backend import MemoryBackend
from hashnotes.core.storage.notes_storage import (
    LEGACY_NOTES_KEYS,
    LEGACY_SETTINGS_KEY,
    NOTES_KEY,
    SCHEMA_VERSION,
    SETTINGS_KEY,
    NotesStorage,
)

__all__ = [
    "KeyValueBackend",
    "JsonFileBackend",
    "MemoryBackend",
    "NotesStorage",
    "NOTES_KEY",
    "SETTINGS_KEY",
    "LEGACY_NOTES_KEYS",
    "LEGACY_SETTINGS_KEY",
    "SCHEMA_VERSION",
]
