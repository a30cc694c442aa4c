"""
ID generation utilities for HashNotes.

Provides consistent ID generation for all entity types:
- Notes: note_xxx
- Images: img_xxx
"""

from uuid import uuid4


def generate_note_id() -> str:
    """
    Generate unique Note ID.

    Returns:
        ID in format "note_xxx" where xxx is 12 hex characters
    """
    return f"note_{uuid4().hex[:12]}"


def generate_image_id() -> str:
    """
    Generate unique ImageAsset ID.

    Returns:
        ID in format "img_xxx" where xxx is 12 hex characters
    """
    return f"img_{uuid4().hex[:12]}"
