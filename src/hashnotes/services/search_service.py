"""
Search service - parse, score and rank notes for a raw query.

Pure functions over a snapshot of notes; nothing here mutates a note.
"""

from collections.abc import Iterable, Sequence

from hashnotes.config import SearchConfig
from hashnotes.core.search.query_parser import parse_search_query
from hashnotes.core.search.scoring import (
    DEFAULT_FIELD_WEIGHTS,
    MATCH_ALL,
    FieldWeights,
    calculate_search_score,
)
from hashnotes.models.note import Note
from hashnotes.models.search import SearchResult


def rank_key(result: SearchResult) -> tuple[float, bool, int]:
    """Sort key for descending order: score, then pinned, then updated_at."""
    return result.score, result.note.pinned, result.note.updated_at


def search_notes(
    notes: Iterable[Note],
    query: str,
    weights: FieldWeights = DEFAULT_FIELD_WEIGHTS,
) -> list[SearchResult]:
    """
    Search notes with scoring and ranking.

    A blank query returns every note (score 1, matched "all") in the
    original order; sorting that case is left to the sort policy.

    Args:
        notes: Notes to search
        query: Raw query text
        weights: Per-field scoring weights

    Returns:
        Results with score > 0 ordered by score, pinned, updated_at (all
        descending)
    """
    if not query.strip():
        return [SearchResult(note=note, score=1.0, matched_fields=[MATCH_ALL]) for note in notes]

    options = parse_search_query(query)
    results: list[SearchResult] = []
    for note in notes:
        score, matched_fields = calculate_search_score(note, options, weights)
        if score > 0:
            results.append(SearchResult(note=note, score=score, matched_fields=matched_fields))

    results.sort(key=rank_key, reverse=True)
    return results


class SearchService:
    """
    Configured search over note collections.

    Usage:
        service = SearchService(config.search)
        results = service.search(notes, "#UE5 widget")
    """

    def __init__(self, config: SearchConfig | None = None):
        """
        Initialize search service.

        Args:
            config: Optional search configuration. Uses defaults if not provided.
        """
        self.config = config or SearchConfig()
        self.weights = FieldWeights.from_config(self.config)

    def search(self, notes: Sequence[Note], query: str) -> list[SearchResult]:
        """Rank notes for a query, honouring the configured result limit."""
        results = search_notes(notes, query, self.weights)
        if self.config.limit is not None and query.strip():
            return results[: self.config.limit]
        return results
