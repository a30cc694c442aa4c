"""
Notes persistence on top of a key-value backend.

Layout:
- "hashnotes.notes":    {"version": 2, "notes": [<note>, ...]}
- "hashnotes.settings": {"theme": ..., "sortBy": ..., "viewMode": ...}

Older installs kept a bare JSON array under "NoteSaved-notes" and/or
"ue-notes.v1" and settings under "ue-notes-settings.v1". migrate() moves
them to the versioned keys once, at startup.

Reads never raise: absent or malformed documents yield empty notes or
default settings. Writes are best effort: failures are logged and reported
as False, never raised.
"""

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hashnotes.core.storage.base import KeyValueBackend
from hashnotes.models.note import Note
from hashnotes.models.settings import AppSettings
from hashnotes.utils.exceptions import ImportFormatError, StorageError
from hashnotes.utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_VERSION = 2

NOTES_KEY = "hashnotes.notes"
SETTINGS_KEY = "hashnotes.settings"

# Checked in priority order
LEGACY_NOTES_KEYS = ("NoteSaved-notes", "ue-notes.v1")
LEGACY_SETTINGS_KEY = "ue-notes-settings.v1"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_note_shape(entry: Any) -> bool:
    """
    Minimal structural check for an imported note entry.

    Requires string id/title/content, list hashtags/keywords/blueprintNodes/
    images, boolean pinned and numeric updatedAt.
    """
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("id"), str)
        and isinstance(entry.get("title"), str)
        and isinstance(entry.get("content"), str)
        and isinstance(entry.get("hashtags"), list)
        and isinstance(entry.get("keywords"), list)
        and isinstance(entry.get("blueprintNodes"), list)
        and isinstance(entry.get("images"), list)
        and isinstance(entry.get("pinned"), bool)
        and _is_number(entry.get("updatedAt"))
    )


def parse_note_entries(entries: list[Any]) -> list[Note]:
    """
    Validate raw note entries, silently dropping malformed ones.

    Args:
        entries: Decoded JSON values

    Returns:
        Notes that passed both the shape check and model validation
    """
    notes: list[Note] = []
    dropped = 0
    for entry in entries:
        if not is_note_shape(entry):
            dropped += 1
            continue
        try:
            notes.append(Note.model_validate(entry))
        except PydanticValidationError:
            dropped += 1

    if dropped:
        logger.debug(f"Dropped {dropped} malformed note entries", extra={"dropped": dropped})
    return notes


class NotesStorage:
    """
    Persistence collaborator for the note store.

    Wraps a KeyValueBackend with the versioned notes/settings documents,
    legacy-key migration and JSON import/export.
    """

    def __init__(self, backend: KeyValueBackend):
        """
        Initialize notes storage.

        Args:
            backend: Key-value backend holding the documents
        """
        self.backend = backend

    # ═══════════════════════════════════════════════════════════
    # MIGRATION
    # ═══════════════════════════════════════════════════════════

    def migrate(self) -> bool:
        """
        Move legacy documents to the versioned keys.

        Runs only when the versioned key is absent. Legacy keys are deleted
        after a successful copy.

        Returns:
            True if anything was migrated
        """
        migrated = False
        try:
            if self.backend.get(NOTES_KEY) is None:
                legacy_notes = self._read_legacy_notes()
                if legacy_notes is not None:
                    self.backend.set(NOTES_KEY, self._notes_document(legacy_notes))
                    migrated = True
                    logger.info(
                        f"Migrated {len(legacy_notes)} notes from legacy storage",
                        extra={"operation": "migrate", "count": len(legacy_notes)},
                    )
            if migrated or self.backend.get(NOTES_KEY) is not None:
                for key in LEGACY_NOTES_KEYS:
                    self.backend.delete(key)

            if self.backend.get(SETTINGS_KEY) is None:
                legacy_settings = self.backend.get(LEGACY_SETTINGS_KEY)
                if legacy_settings is not None:
                    self.backend.set(SETTINGS_KEY, legacy_settings)
                    migrated = True
                    logger.info("Migrated settings from legacy storage")
            if self.backend.get(SETTINGS_KEY) is not None:
                self.backend.delete(LEGACY_SETTINGS_KEY)
        except StorageError as e:
            logger.error(f"Legacy storage migration failed: {e}")
            return False

        return migrated

    def _read_legacy_notes(self) -> list[dict[str, Any]] | None:
        """First legacy array that holds notes, else the first one present."""
        fallback: list[dict[str, Any]] | None = None
        for key in LEGACY_NOTES_KEYS:
            raw = self.backend.get(key)
            if raw is None:
                continue
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning(f"Ignoring malformed legacy key {key}")
                continue
            if not isinstance(parsed, list):
                continue
            if parsed:
                return parsed
            if fallback is None:
                fallback = parsed
        return fallback

    # ═══════════════════════════════════════════════════════════
    # NOTES
    # ═══════════════════════════════════════════════════════════

    @staticmethod
    def _notes_document(entries: list[Any]) -> str:
        return json.dumps({"version": SCHEMA_VERSION, "notes": entries}, ensure_ascii=False)

    def is_initialized(self) -> bool:
        """
        Check whether a notes document has ever been written.

        Unreadable storage counts as initialized so callers never seed over
        data they failed to read.
        """
        self.migrate()
        try:
            return self.backend.get(NOTES_KEY) is not None
        except StorageError as e:
            logger.error(f"Error checking notes storage: {e}")
            return True

    def load_notes(self) -> list[Note]:
        """
        Load persisted notes.

        Returns:
            Notes, or an empty list if absent or malformed
        """
        self.migrate()
        try:
            raw = self.backend.get(NOTES_KEY)
        except StorageError as e:
            logger.error(f"Error loading notes from storage: {e}")
            return []

        if raw is None:
            return []

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Stored notes are not valid JSON: {e}")
            return []

        if isinstance(document, dict):
            if document.get("version") != SCHEMA_VERSION:
                logger.warning(
                    "Unexpected notes schema version: {}",
                    document.get("version"),
                    extra={"expected": SCHEMA_VERSION},
                )
            entries = document.get("notes")
        else:
            entries = document

        if not isinstance(entries, list):
            logger.error("Stored notes document has no notes array")
            return []

        return parse_note_entries(entries)

    def save_notes(self, notes: list[Note]) -> bool:
        """
        Persist notes (best effort).

        Args:
            notes: Full note collection

        Returns:
            True on success, False if the write failed (already logged)
        """
        try:
            self.backend.set(NOTES_KEY, self._notes_document([note.to_dict() for note in notes]))
            return True
        except StorageError as e:
            logger.error(f"Error saving notes to storage: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error saving notes: {e}")
        return False

    # ═══════════════════════════════════════════════════════════
    # SETTINGS
    # ═══════════════════════════════════════════════════════════

    def load_settings(self) -> AppSettings:
        """
        Load persisted settings.

        Returns:
            Stored settings, or defaults if absent or malformed
        """
        self.migrate()
        try:
            raw = self.backend.get(SETTINGS_KEY)
        except StorageError as e:
            logger.error(f"Error loading settings from storage: {e}")
            return AppSettings()

        if raw is None:
            return AppSettings()

        try:
            return AppSettings.model_validate(json.loads(raw))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            logger.error(f"Stored settings are malformed, using defaults: {e}")
            return AppSettings()

    def save_settings(self, settings: AppSettings) -> bool:
        """
        Persist settings (best effort).

        Returns:
            True on success, False if the write failed (already logged)
        """
        try:
            self.backend.set(SETTINGS_KEY, json.dumps(settings.to_dict()))
            return True
        except StorageError as e:
            logger.error(f"Error saving settings to storage: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error saving settings: {e}")
        return False

    # ═══════════════════════════════════════════════════════════
    # IMPORT / EXPORT
    # ═══════════════════════════════════════════════════════════

    @staticmethod
    def export_notes_to_json(notes: list[Note]) -> str:
        """Serialize notes as a pretty-printed JSON array."""
        return json.dumps([note.to_dict() for note in notes], indent=2, ensure_ascii=False)

    @staticmethod
    def import_notes_from_json(text: str) -> list[Note]:
        """
        Parse notes from exported JSON.

        Entries that don't match the minimal note shape are dropped.

        Args:
            text: JSON text

        Returns:
            Well-formed notes

        Raises:
            ImportFormatError: If text isn't JSON or the top level isn't an array
        """
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Error importing notes from JSON: {e}")
            raise ImportFormatError("Invalid JSON format", context={"error": str(e)}) from e

        if not isinstance(parsed, list):
            raise ImportFormatError(
                "Invalid format: expected array of notes",
                context={"type": type(parsed).__name__},
            )

        return parse_note_entries(parsed)

    # ═══════════════════════════════════════════════════════════
    # MAINTENANCE
    # ═══════════════════════════════════════════════════════════

    def clear_all(self) -> bool:
        """
        Erase all persisted notes and settings, legacy keys included.

        Returns:
            True if every key was removed
        """
        try:
            for key in (NOTES_KEY, SETTINGS_KEY, *LEGACY_NOTES_KEYS, LEGACY_SETTINGS_KEY):
                self.backend.delete(key)
        except StorageError as e:
            logger.error(f"Error clearing storage: {e}")
            return False

        logger.info("Cleared all persisted notes and settings")
        return True
