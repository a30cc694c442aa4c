"""
Factory modules for creating HashNotes components.
"""

from hashnotes.core.factory.storage_factory import StorageFactory

__all__ = [
    "StorageFactory",
]
