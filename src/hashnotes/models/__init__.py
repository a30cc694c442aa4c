"""
Data models for HashNotes.

Core models:
- Note, ImageAsset: The stored entity and its attachments
- NoteDraft, NoteUpdate: Inputs for creating and updating notes
- AppSettings, Theme, SortBy, ViewMode: Persisted application settings
- SearchOptions, SearchResult: Derived search models
"""

from hashnotes.models.note import (
    DEFAULT_NOTE_COLOR,
    ImageAsset,
    Note,
    NoteDraft,
    NoteUpdate,
    now_ms,
)
from hashnotes.models.search import SearchOptions, SearchResult
from hashnotes.models.settings import AppSettings, SortBy, Theme, ViewMode

__all__ = [
    # Note models
    "Note",
    "ImageAsset",
    "NoteDraft",
    "NoteUpdate",
    "DEFAULT_NOTE_COLOR",
    "now_ms",
    # Settings models
    "AppSettings",
    "Theme",
    "SortBy",
    "ViewMode",
    # Search models
    "SearchOptions",
    "SearchResult",
]
