"""
Hashtag extraction and normalization.

A hashtag in note text is a '#' at the start of the text or after
whitespace, followed by one or more ASCII letters, digits, '_' or '-'.
Case is preserved.
"""

import re
from collections import Counter
from collections.abc import Iterable

from hashnotes.models.note import Note

HASHTAG_PATTERN = re.compile(r"(?:^|(?<=\s))#[A-Za-z0-9_\-]+")


def extract_hashtags(text: str) -> list[str]:
    """
    Extract distinct hashtags from free text.

    Args:
        text: Text to scan

    Returns:
        Hashtags (with leading '#') in first-occurrence order
    """
    if not text:
        return []
    return list(dict.fromkeys(match.strip() for match in HASHTAG_PATTERN.findall(text)))


def normalize_hashtag(tag: str) -> str:
    """Strip surrounding whitespace and guarantee a leading '#'."""
    tag = tag.strip()
    return tag if tag.startswith("#") else f"#{tag}"


def merge_hashtags(*groups: Iterable[str]) -> list[str]:
    """Order-preserving union of hashtag groups, normalized, empties dropped."""
    merged: dict[str, None] = {}
    for group in groups:
        for tag in group:
            tag = normalize_hashtag(tag)
            if len(tag) > 1:
                merged[tag] = None
    return list(merged)


def get_all_hashtags(notes: Iterable[Note]) -> list[str]:
    """Sorted distinct hashtags used across notes."""
    return sorted({tag for note in notes for tag in note.hashtags})


def count_hashtags(notes: Iterable[Note]) -> dict[str, int]:
    """Map each hashtag to the number of notes carrying it, sorted by tag."""
    counts = Counter(tag for note in notes for tag in set(note.hashtags))
    return dict(sorted(counts.items()))
