"""
Field-weighted relevance scoring.

Curated fields (title, keywords, blueprint nodes) weigh more than free
prose, so short precise matches outrank incidental hits in long content.
"""

from dataclasses import dataclass

from hashnotes.config import SearchConfig
from hashnotes.models.note import Note
from hashnotes.models.search import SearchOptions

MATCH_ALL = "all"
HASHTAGS_FIELD = "hashtags"


@dataclass(frozen=True)
class FieldWeights:
    """Score added per hit in each field."""

    hashtag: float = 10.0
    title: float = 8.0
    keywords: float = 6.0
    blueprint_nodes: float = 6.0
    definitions: float = 4.0
    content: float = 2.0
    pinned_bonus: float = 1.0

    @classmethod
    def from_config(cls, config: SearchConfig) -> "FieldWeights":
        """Build weights from search configuration."""
        return cls(
            hashtag=config.hashtag_weight,
            title=config.title_weight,
            keywords=config.keywords_weight,
            blueprint_nodes=config.blueprint_nodes_weight,
            definitions=config.definitions_weight,
            content=config.content_weight,
            pinned_bonus=config.pinned_bonus,
        )


DEFAULT_FIELD_WEIGHTS = FieldWeights()


def _searchable_fields(note: Note, weights: FieldWeights) -> list[tuple[str, str, float]]:
    """(field name, lower-cased text, weight) in scoring order."""
    return [
        ("title", note.title.lower(), weights.title),
        ("keywords", " ".join(note.keywords).lower(), weights.keywords),
        ("blueprintNodes", " ".join(note.blueprint_nodes).lower(), weights.blueprint_nodes),
        ("definitions", (note.definitions or "").lower(), weights.definitions),
        ("content", note.content.lower(), weights.content),
    ]


def calculate_search_score(
    note: Note,
    options: SearchOptions,
    weights: FieldWeights = DEFAULT_FIELD_WEIGHTS,
) -> tuple[float, list[str]]:
    """
    Score a note against parsed search options.

    Args:
        note: Note to score
        options: Parsed query
        weights: Per-field weights

    Returns:
        Tuple of (score, matched field names). A score of 0 means the note
        is rejected.
    """
    if options.is_empty:
        return 1.0, [MATCH_ALL]

    score = 0.0
    matched_fields: list[str] = []

    # Hashtag filters are mandatory: no overlap rejects the note
    if options.hashtags:
        note_tags = set(note.hashtags)
        hashtag_matches = [tag for tag in options.hashtags if tag in note_tags]
        if not hashtag_matches:
            return 0.0, []
        score += len(hashtag_matches) * weights.hashtag
        matched_fields.append(HASHTAGS_FIELD)

    if options.terms:
        fields = _searchable_fields(note, weights)
        has_any_match = False
        for term in options.terms:
            for field, text, weight in fields:
                if term in text:
                    score += weight
                    has_any_match = True
                    if field not in matched_fields:
                        matched_fields.append(field)

        # A term miss only rejects when there was no hashtag filter to pass
        if not has_any_match and not options.hashtags:
            return 0.0, []

    if note.pinned:
        score += weights.pinned_bonus

    return score, matched_fields
