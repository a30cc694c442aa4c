"""Display ordering used when no search query is active."""

from collections.abc import Iterable

from hashnotes.models.note import Note
from hashnotes.models.settings import SortBy


def _title_key(note: Note) -> tuple[str, str]:
    # Case-insensitive first ("apple" < "Banana"), raw title breaks ties
    return note.title.casefold(), note.title


def sort_notes(notes: Iterable[Note], sort_by: SortBy | str = SortBy.UPDATED) -> list[Note]:
    """
    Order notes for display: pinned first, then by the configured field.

    Args:
        notes: Notes to order (not modified)
        sort_by: "created" (newest first), "title" (A-Z) or "updated"
            (most recently updated first). Unrecognized values fall back
            to "updated".

    Returns:
        New ordered list
    """
    try:
        sort_by = SortBy(sort_by)
    except ValueError:
        sort_by = SortBy.UPDATED

    if sort_by == SortBy.TITLE:
        ordered = sorted(notes, key=_title_key)
    elif sort_by == SortBy.CREATED:
        ordered = sorted(notes, key=lambda note: note.created_at, reverse=True)
    else:
        ordered = sorted(notes, key=lambda note: note.updated_at, reverse=True)

    # Stable sort keeps the field order inside each pinned partition
    ordered.sort(key=lambda note: not note.pinned)
    return ordered
