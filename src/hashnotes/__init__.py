"""HashNotes - local hashtag-driven learning notes with weighted search."""

__version__ = "0.1.0"
