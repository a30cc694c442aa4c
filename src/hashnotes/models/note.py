"""
Note model for learning notes.

Notes are the single entity HashNotes stores. Each carries free text that
may contain inline #hashtags plus curated metadata (keywords, blueprint
node names, a short definition) that search weights above the free text.

Persisted/exported JSON uses camelCase keys (blueprintNodes, createdAt,
updatedAt, dataUrl); Python attributes are snake_case and both spellings
are accepted on input.
"""

import time
from typing import Any

from pydantic import Field, field_validator, model_validator

from hashnotes.models.base import CamelModel

DEFAULT_NOTE_COLOR = "bg-gray-100"


def now_ms() -> int:
    """Current wall-clock time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def _clean_hashtags(tags: list[str]) -> list[str]:
    """Strip, prefix with '#', drop empties and duplicates (order kept)."""
    cleaned: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if not tag.startswith("#"):
            tag = f"#{tag}"
        if len(tag) > 1 and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


class ImageAsset(CamelModel):
    """Image attached to a note. Has no identity outside its parent note."""

    id: str = Field(..., description="Image ID (img_xxx)")
    data_url: str = Field(..., description="Opaque data reference (base64 data URL)")
    alt: str | None = Field(default=None, description="Alt text")
    caption: str | None = Field(default=None, description="Caption")


class Note(CamelModel):
    """
    A learning note.

    Invariants kept by the note store:
    - id is unique in the live collection and never changes
    - hashtags is a superset of the #tags found in content
    - created_at <= updated_at
    """

    # Core identity
    id: str = Field(..., description="Unique note ID (note_xxx)")

    # Content
    title: str = Field(..., description="Note title (1-120 chars, enforced by caller)")
    content: str = Field(default="", description="Free text, may contain inline #tags")

    # Metadata
    hashtags: list[str] = Field(default_factory=list, description="Normalized #tags")
    keywords: list[str] = Field(default_factory=list, description="User keywords")
    blueprint_nodes: list[str] = Field(default_factory=list, description="Blueprint node names")
    definitions: str | None = Field(default=None, description="Short glossary definition")
    images: list[ImageAsset] = Field(default_factory=list, description="Attached images")
    color: str = Field(default=DEFAULT_NOTE_COLOR, description="Display colour token")
    pinned: bool = Field(default=False, description="Pinned notes sort first")

    # Timestamps (ms since epoch)
    created_at: int = Field(default_factory=now_ms, description="Creation timestamp")
    updated_at: int = Field(default_factory=now_ms, description="Last update timestamp")

    @field_validator("hashtags")
    @classmethod
    def _normalize_hashtags(cls, value: list[str]) -> list[str]:
        return _clean_hashtags(value)

    @model_validator(mode="before")
    @classmethod
    def _default_created_at(cls, data: Any) -> Any:
        # Older exports only carry updatedAt
        if isinstance(data, dict):
            has_created = "createdAt" in data or "created_at" in data
            updated = data.get("updatedAt", data.get("updated_at"))
            if not has_created and updated is not None:
                data = {**data, "created_at": updated}
        return data

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Note":
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
        return self

    def has_hashtag(self, tag: str) -> bool:
        """Check whether the note carries the given hashtag."""
        return tag in self.hashtags


class NoteDraft(CamelModel):
    """Input for creating a note: every Note field except id and timestamps."""

    title: str
    content: str = ""
    hashtags: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    blueprint_nodes: list[str] = Field(default_factory=list)
    definitions: str | None = None
    images: list[ImageAsset] = Field(default_factory=list)
    color: str = DEFAULT_NOTE_COLOR
    pinned: bool = False

    @field_validator("hashtags")
    @classmethod
    def _normalize_hashtags(cls, value: list[str]) -> list[str]:
        return _clean_hashtags(value)


class NoteUpdate(CamelModel):
    """
    Partial update for an existing note.

    Only fields explicitly set are applied (model_dump(exclude_unset=True)).
    id, created_at and updated_at are not updatable and are ignored.
    """

    title: str | None = None
    content: str | None = None
    hashtags: list[str] | None = None
    keywords: list[str] | None = None
    blueprint_nodes: list[str] | None = None
    definitions: str | None = None
    images: list[ImageAsset] | None = None
    color: str | None = None
    pinned: bool | None = None

    @field_validator("hashtags")
    @classmethod
    def _normalize_hashtags(cls, value: list[str] | None) -> list[str] | None:
        return None if value is None else _clean_hashtags(value)
