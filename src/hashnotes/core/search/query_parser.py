"""Split a raw search string into hashtag filters and free-text terms."""

from hashnotes.core.search.hashtags import normalize_hashtag
from hashnotes.models.search import SearchOptions


def parse_search_query(query: str) -> SearchOptions:
    """
    Parse a raw query.

    Tokens starting with '#' become hashtag filters; every other token
    becomes a lower-cased term. `exact` records whether the query contained
    a double quote.

    Args:
        query: Raw query text

    Returns:
        SearchOptions (empty hashtags/terms for a blank query)
    """
    hashtags: list[str] = []
    terms: list[str] = []

    for token in query.split():
        if token.startswith("#"):
            tag = normalize_hashtag(token)
            if tag not in hashtags:
                hashtags.append(tag)
        else:
            terms.append(token.lower())

    return SearchOptions(hashtags=hashtags, terms=terms, exact='"' in query)
