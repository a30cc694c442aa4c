"""Derived, ephemeral search models."""

from pydantic import BaseModel, Field

from hashnotes.models.note import Note


class SearchOptions(BaseModel):
    """Parsed search query."""

    hashtags: list[str] = Field(default_factory=list, description="Normalized #tag filters")
    terms: list[str] = Field(default_factory=list, description="Lower-cased free-text terms")
    exact: bool = Field(default=False, description="Raw query contained a double quote")

    @property
    def is_empty(self) -> bool:
        """True when the query carries neither hashtags nor terms."""
        return not self.hashtags and not self.terms


class SearchResult(BaseModel):
    """A note with its relevance score and the fields that produced it."""

    note: Note
    score: float = Field(..., ge=0.0)
    matched_fields: list[str] = Field(default_factory=list)
