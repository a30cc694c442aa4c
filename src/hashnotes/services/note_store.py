"""
Note store - the single owner of notes and settings.

Every mutation is applied atomically under the store lock, persisted
through NotesStorage, and leaves the derived view consistent: the
filtered view is computed on read from (notes, search query, sort
setting), so no mutation can forget to refresh it.

Lifecycle: construct -> load_notes() -> operate -> close().

    with NoteStore.from_config(config) as store:
        store.add_note({"title": "Widget Switcher", "content": "#UI basics"})
        store.search_notes("#UI")
        visible = store.filtered_notes
"""

import threading
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_snake

from hashnotes.config import Config
from hashnotes.core.factory.storage_factory import StorageFactory
from hashnotes.core.search.hashtags import (
    count_hashtags,
    extract_hashtags,
    get_all_hashtags,
    merge_hashtags,
    normalize_hashtag,
)
from hashnotes.core.search.sort_policy import sort_notes
from hashnotes.core.storage.notes_storage import NotesStorage
from hashnotes.models.note import Note, NoteDraft, NoteUpdate, now_ms
from hashnotes.models.search import SearchResult
from hashnotes.models.settings import AppSettings
from hashnotes.services.search_service import SearchService
from hashnotes.services.seed_data import build_seed_notes
from hashnotes.utils.exceptions import NotFoundError, ValidationError
from hashnotes.utils.id_generator import generate_image_id, generate_note_id
from hashnotes.utils.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", NoteDraft, NoteUpdate)

# Fields a partial update may clear by passing None
_NULLABLE_FIELDS = {"definitions"}


def _validate_payload(model: type[ModelT], payload: Any, operation: str) -> ModelT:
    """Validate a caller payload, converting pydantic errors to ValidationError."""
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {operation} payload: {e.error_count()} error(s)",
            context={"operation": operation, "errors": e.errors(include_url=False)},
        ) from e


class NoteStore:
    """
    In-memory note collection with an invariant-preserving mutation API.

    Invariants:
    - note ids are unique
    - each note's hashtags include every #tag found in its content
      (re-extracted on add, update and import)
    - created_at never changes; updated_at >= created_at and is bumped
      on every mutation of the note

    Not-found on update/delete/pin is a silent no-op reported through the
    boolean return value. Malformed add/update payloads raise
    ValidationError. Persistence failures are logged by NotesStorage and
    never raised; the in-memory state stays authoritative, and close()
    retries only writes that failed.
    """

    def __init__(
        self,
        storage: NotesStorage,
        config: Config | None = None,
        clock: Callable[[], int] | None = None,
    ):
        """
        Initialize note store.

        Args:
            storage: Persistence collaborator
            config: Configuration object (defaults if not provided)
            clock: Returns the current time in ms (defaults to wall clock)
        """
        self.storage = storage
        self.config = config or Config()
        self.search_service = SearchService(self.config.search)
        self._clock = clock or now_ms
        # Serializes mutations if the store is shared between threads
        self._lock = threading.RLock()

        self._notes: list[Note] = []
        self._settings = AppSettings()
        self._search_query = ""
        self.is_loading = False
        # Set when in-memory state differs from what storage last accepted
        self._notes_dirty = False
        self._settings_dirty = False

    @classmethod
    def from_config(cls, config: Config) -> "NoteStore":
        """Create a store over the storage backend named in the configuration."""
        return cls(storage=StorageFactory.create(config), config=config)

    def __enter__(self) -> "NoteStore":
        self.load_notes()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ═══════════════════════════════════════════════════════════
    # STATE
    # ═══════════════════════════════════════════════════════════

    @property
    def notes(self) -> list[Note]:
        """Canonical collection, newest additions first."""
        with self._lock:
            return list(self._notes)

    @property
    def settings(self) -> AppSettings:
        with self._lock:
            return self._settings.model_copy()

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def filtered_results(self) -> list[SearchResult]:
        """Ranked results for the active query (every note when it is blank)."""
        with self._lock:
            return self.search_service.search(self._notes, self._search_query)

    @property
    def filtered_notes(self) -> list[Note]:
        """
        View to display: ranked search hits when a query is active,
        otherwise all notes in sort-policy order.
        """
        with self._lock:
            if self._search_query.strip():
                return [
                    result.note
                    for result in self.search_service.search(self._notes, self._search_query)
                ]
            return sort_notes(self._notes, self._settings.sort_by)

    def get_note(self, note_id: str) -> Note | None:
        """Look up a note by id."""
        with self._lock:
            index = self._index_of(note_id)
            return None if index is None else self._notes[index]

    def get_note_or_raise(self, note_id: str) -> Note:
        """
        Look up a note by id.

        Raises:
            NotFoundError: If no note has this id
        """
        note = self.get_note(note_id)
        if note is None:
            raise NotFoundError(f"Note not found: {note_id}", context={"note_id": note_id})
        return note

    def get_notes_with_hashtag(self, tag: str) -> list[Note]:
        """Notes whose hashtags contain the tag, in collection order."""
        tag = normalize_hashtag(tag)
        with self._lock:
            return [note for note in self._notes if note.has_hashtag(tag)]

    def get_all_hashtags(self) -> list[str]:
        """Sorted distinct hashtags across the collection."""
        with self._lock:
            return get_all_hashtags(self._notes)

    def hashtag_counts(self) -> dict[str, int]:
        """Hashtag -> number of notes carrying it."""
        with self._lock:
            return count_hashtags(self._notes)

    # ═══════════════════════════════════════════════════════════
    # NOTE MUTATIONS
    # ═══════════════════════════════════════════════════════════

    def add_note(self, draft: NoteDraft | dict[str, Any]) -> Note:
        """
        Create a note and prepend it to the collection.

        Hashtags are the union of the draft's hashtags and the #tags found
        in its content.

        Args:
            draft: Note fields (everything except id and timestamps)

        Returns:
            The created note

        Raises:
            ValidationError: If the draft has missing or mistyped fields
        """
        draft = _validate_payload(NoteDraft, draft, "add_note")

        with self._lock:
            now = self._clock()
            fields = draft.model_dump(exclude={"hashtags"})
            note = Note(
                **fields,
                id=self._new_note_id(),
                hashtags=merge_hashtags(draft.hashtags, extract_hashtags(draft.content)),
                created_at=now,
                updated_at=now,
            )
            self._notes = [note, *self._notes]
            self._persist_notes()

        logger.info("Note added: {}", note.id, extra={"note_id": note.id, "operation": "add_note"})
        return note

    def update_note(self, note_id: str, updates: NoteUpdate | dict[str, Any]) -> bool:
        """
        Merge updates into an existing note.

        Hashtags become union(updates.hashtags or existing hashtags, #tags in
        the resulting content). id and created_at never change.

        Args:
            note_id: Note to update
            updates: Fields to change

        Returns:
            True if the note existed and was updated, False otherwise

        Raises:
            ValidationError: If a field has the wrong type
        """
        updates = _validate_payload(NoteUpdate, updates, "update_note")
        changes = {
            field: value
            for field, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or field in _NULLABLE_FIELDS
        }

        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                logger.debug(f"Update skipped, note not found: {note_id}")
                return False

            existing = self._notes[index]
            merged = {**existing.model_dump(), **changes}
            base_tags = changes.get("hashtags", existing.hashtags)
            merged["hashtags"] = merge_hashtags(base_tags, extract_hashtags(merged["content"]))
            merged["id"] = existing.id
            merged["created_at"] = existing.created_at
            merged["updated_at"] = self._touch(existing)

            notes = list(self._notes)
            notes[index] = Note.model_validate(merged)
            self._notes = notes
            self._persist_notes()

        logger.info(
            "Note updated: {}",
            note_id,
            extra={"note_id": note_id, "fields": sorted(changes), "operation": "update_note"},
        )
        return True

    def delete_note(self, note_id: str) -> bool:
        """
        Remove a note.

        Returns:
            True if a note was removed, False if none had this id
        """
        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                logger.debug(f"Delete skipped, note not found: {note_id}")
                return False
            self._notes = [note for note in self._notes if note.id != note_id]
            self._persist_notes()

        logger.info("Note deleted: {}", note_id, extra={"note_id": note_id})
        return True

    def duplicate_note(self, note_id: str) -> Note | None:
        """
        Copy a note under a new id, placed right after the source.

        The copy gets fresh timestamps, fresh image ids and a title suffixed
        with the configured duplicate suffix (truncated to the title limit).

        Returns:
            The copy, or None if the source doesn't exist
        """
        suffix = self.config.notes.duplicate_suffix
        max_length = self.config.notes.max_title_length

        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                logger.debug(f"Duplicate skipped, note not found: {note_id}")
                return None

            source = self._notes[index]
            now = self._clock()
            title = source.title[: max(max_length - len(suffix), 0)] + suffix
            copy = Note.model_validate(
                {
                    **source.model_dump(),
                    "id": self._new_note_id(),
                    "title": title[:max_length],
                    "images": [
                        image.model_copy(update={"id": generate_image_id()})
                        for image in source.images
                    ],
                    "created_at": now,
                    "updated_at": now,
                }
            )
            notes = list(self._notes)
            notes.insert(index + 1, copy)
            self._notes = notes
            self._persist_notes()

        logger.info(
            "Note duplicated: {} -> {}",
            note_id,
            copy.id,
            extra={"note_id": note_id, "copy_id": copy.id},
        )
        return copy

    def toggle_pin(self, note_id: str) -> bool:
        """
        Flip a note's pinned flag.

        Returns:
            True if the note existed
        """
        with self._lock:
            note = self.get_note(note_id)
            if note is None:
                return False
            return self.update_note(note_id, {"pinned": not note.pinned})

    # ═══════════════════════════════════════════════════════════
    # HASHTAG MUTATIONS
    # ═══════════════════════════════════════════════════════════

    def rename_hashtag(self, old_tag: str, new_tag: str) -> int:
        """
        Replace a hashtag on every note carrying it.

        The new tag is normalized and de-duplicated against tags the note
        already has. A blank new tag, or one containing whitespace, is
        rejected. Inline #tags in content are left as written.

        Returns:
            Number of notes changed
        """
        old_tag = normalize_hashtag(old_tag)
        new_tag = normalize_hashtag(new_tag)
        if len(new_tag) <= 1 or any(ch.isspace() for ch in new_tag) or old_tag == new_tag:
            return 0

        with self._lock:
            changed = 0
            notes: list[Note] = []
            for note in self._notes:
                if note.has_hashtag(old_tag):
                    tags = merge_hashtags(new_tag if tag == old_tag else tag for tag in note.hashtags)
                    note = note.model_copy(
                        update={"hashtags": tags, "updated_at": self._touch(note)}
                    )
                    changed += 1
                notes.append(note)

            if changed:
                self._notes = notes
                self._persist_notes()

        logger.info("Hashtag renamed: {} -> {} on {} notes", old_tag, new_tag, changed)
        return changed

    def remove_hashtag(self, tag: str, delete_notes: bool = False) -> int:
        """
        Remove a hashtag from the collection.

        Args:
            tag: Hashtag to remove
            delete_notes: Delete every note carrying the tag instead of just
                stripping the tag from it

        Returns:
            Number of notes stripped or deleted
        """
        tag = normalize_hashtag(tag)

        with self._lock:
            affected = sum(1 for note in self._notes if note.has_hashtag(tag))
            if affected:
                if delete_notes:
                    self._notes = [note for note in self._notes if not note.has_hashtag(tag)]
                else:
                    self._notes = [
                        note.model_copy(
                            update={
                                "hashtags": [t for t in note.hashtags if t != tag],
                                "updated_at": self._touch(note),
                            }
                        )
                        if note.has_hashtag(tag)
                        else note
                        for note in self._notes
                    ]
                self._persist_notes()

        action = "deleted" if delete_notes else "stripped from"
        logger.info("Hashtag removed: {} ({} {} notes)", tag, action, affected)
        return affected

    # ═══════════════════════════════════════════════════════════
    # QUERY & SETTINGS
    # ═══════════════════════════════════════════════════════════

    def search_notes(self, query: str) -> list[Note]:
        """
        Set the active search query.

        Returns:
            The resulting filtered view
        """
        with self._lock:
            self._search_query = query
            return self.filtered_notes

    def update_settings(self, changes: dict[str, Any] | None = None, **kwargs: Any) -> AppSettings:
        """
        Merge partial settings over the current ones and persist them.

        Keys may be snake_case or camelCase. Invalid values leave the
        settings unchanged (logged).

        Returns:
            The resulting settings
        """
        partial = {to_snake(key): value for key, value in {**(changes or {}), **kwargs}.items()}

        with self._lock:
            try:
                settings = AppSettings.model_validate({**self._settings.model_dump(), **partial})
            except PydanticValidationError as e:
                logger.warning(f"Ignoring invalid settings update: {e.errors()}")
                return self._settings.model_copy()

            self._settings = settings
            self._persist_settings()

        logger.info("Settings updated", extra={"changes": sorted(partial)})
        return settings.model_copy()

    # ═══════════════════════════════════════════════════════════
    # IMPORT / EXPORT
    # ═══════════════════════════════════════════════════════════

    def import_notes(self, incoming: Iterable[Note]) -> int:
        """
        Append notes whose ids aren't already in the collection.

        Existing notes win on id collisions; within the incoming batch the
        first note with a given id wins. Hashtags are re-extracted from
        content so imported notes keep the hashtag invariant.

        Returns:
            Number of notes added
        """
        with self._lock:
            seen = {note.id for note in self._notes}
            added: list[Note] = []
            for note in incoming:
                if note.id in seen:
                    continue
                seen.add(note.id)
                tags = merge_hashtags(note.hashtags, extract_hashtags(note.content))
                if tags != note.hashtags:
                    note = note.model_copy(update={"hashtags": tags})
                added.append(note)

            if added:
                self._notes = [*self._notes, *added]
                self._persist_notes()

        logger.info(f"Imported {len(added)} notes", extra={"count": len(added)})
        return len(added)

    def import_notes_from_json(self, text: str) -> int:
        """
        Import notes from exported JSON text.

        Returns:
            Number of notes added

        Raises:
            ImportFormatError: If text isn't a JSON array
        """
        return self.import_notes(self.storage.import_notes_from_json(text))

    def export_notes(self) -> list[Note]:
        """Snapshot of the canonical collection."""
        return self.notes

    def export_notes_to_json(self) -> str:
        """Pretty-printed JSON array of every note."""
        return self.storage.export_notes_to_json(self.notes)

    # ═══════════════════════════════════════════════════════════
    # PERSISTENCE
    # ═══════════════════════════════════════════════════════════

    def load_notes(self) -> None:
        """
        Load notes and settings from storage.

        A store that has never persisted notes is seeded with the sample
        set (when seed_on_empty is enabled).
        """
        with self._lock:
            self.is_loading = True
            try:
                self._notes = self.storage.load_notes()
                self._notes_dirty = False
                if (
                    not self._notes
                    and self.config.notes.seed_on_empty
                    and not self.storage.is_initialized()
                ):
                    self._notes = build_seed_notes(self._clock())
                    self._persist_notes()
                    logger.info(f"Initialized with {len(self._notes)} seed notes")

                self._settings = self.storage.load_settings()
                self._settings_dirty = False
            finally:
                self.is_loading = False

        logger.info(f"Loaded {len(self._notes)} notes", extra={"count": len(self._notes)})

    def save_notes(self) -> bool:
        """Persist the collection on demand."""
        with self._lock:
            return self._persist_notes()

    def clear_all(self) -> bool:
        """
        Erase persisted notes and settings and reset the store to empty.

        Returns:
            True if storage was cleared
        """
        with self._lock:
            cleared = self.storage.clear_all()
            self._notes = []
            self._settings = AppSettings()
            self._search_query = ""
            self._notes_dirty = False
            self._settings_dirty = False
        return cleared

    def close(self) -> None:
        """
        Flush unsaved changes to storage.

        Only state whose last write failed is written again; a store that
        was never changed leaves storage untouched.
        """
        with self._lock:
            if self._notes_dirty:
                self._persist_notes()
            if self._settings_dirty:
                self._persist_settings()
        logger.info("Note store closed")

    # ═══════════════════════════════════════════════════════════
    # INTERNALS
    # ═══════════════════════════════════════════════════════════

    def _index_of(self, note_id: str) -> int | None:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None

    def _new_note_id(self) -> str:
        existing = {note.id for note in self._notes}
        note_id = generate_note_id()
        while note_id in existing:
            note_id = generate_note_id()
        return note_id

    def _touch(self, note: Note) -> int:
        """New updated_at for a mutated note, never before its creation."""
        return max(self._clock(), note.created_at)

    def _persist_notes(self) -> bool:
        saved = self.storage.save_notes(self._notes)
        self._notes_dirty = not saved
        return saved

    def _persist_settings(self) -> bool:
        saved = self.storage.save_settings(self._settings)
        self._settings_dirty = not saved
        return saved
