"""Core components for HashNotes."""
