"""
Search and ranking primitives for HashNotes.

- Hashtag extraction/normalization
- Query parsing
- Field-weighted scoring
- Sort policy for the unfiltered view
"""

from hashnotes.core.search.hashtags import (
    count_hashtags,
    extract_hashtags,
    get_all_hashtags,
    merge_hashtags,
    normalize_hashtag,
)
from hashnotes.core.search.query_parser import parse_search_query
from hashnotes.core.search.scoring import (
    DEFAULT_FIELD_WEIGHTS,
    FieldWeights,
    calculate_search_score,
)
from hashnotes.core.search.sort_policy import sort_notes

__all__ = [
    "extract_hashtags",
    "normalize_hashtag",
    "merge_hashtags",
    "get_all_hashtags",
    "count_hashtags",
    "parse_search_query",
    "FieldWeights",
    "DEFAULT_FIELD_WEIGHTS",
    "calculate_search_score",
    "sort_notes",
]
