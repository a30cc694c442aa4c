"""
Services for HashNotes.

High-level services:
- NoteStore: Owner of notes and settings, mutation protocol
- SearchService: Query parsing, scoring and ranking
- Image helpers: Async conversion of image files to data URLs
- Seed data: Sample notes for a fresh store
"""

from hashnotes.services.images import (
    create_image_asset,
    create_image_assets,
    file_to_data_url,
    is_valid_image_file,
)
from hashnotes.services.note_store import NoteStore
from hashnotes.services.search_service import SearchService, search_notes
from hashnotes.services.seed_data import build_seed_notes

__all__ = [
    "NoteStore",
    "SearchService",
    "search_notes",
    "build_seed_notes",
    "is_valid_image_file",
    "file_to_data_url",
    "create_image_asset",
    "create_image_assets",
]
