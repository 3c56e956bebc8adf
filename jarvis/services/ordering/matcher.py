"""Fuzzy matching of parsed item names against the menu."""
from typing import Optional, Protocol, Sequence, TypeVar

from jarvis.services.ordering.constants import MIN_OVERLAP_SCORE
from jarvis.services.ordering.models import MatchResult, MatchTier


class NamedItem(Protocol):
    name: str


T = TypeVar("T", bound=NamedItem)


def token_overlap_score(query: str, item_name: str) -> float:
    """
    Share of query tokens that overlap a token of the item name.

    A query token overlaps when some item token contains it or is contained
    by it. The count is divided by the longer of the two token lists.
    """
    query_words = query.lower().split()
    item_words = item_name.lower().split()
    if not query_words or not item_words:
        return 0.0

    overlap = sum(
        1
        for query_word in query_words
        if any(query_word in item_word or item_word in query_word for item_word in item_words)
    )
    return overlap / max(len(query_words), len(item_words))


def _first(items: Sequence[T], predicate) -> Optional[T]:
    return next((item for item in items if predicate(item.name.lower())), None)


def fuzzy_match_item(raw_name: str, menu_items: Sequence[T]) -> MatchResult:
    """
    Match a parsed name against menu items.

    Tiers are tried in order and the first one that finds an item wins:
    exact name, name prefix, name contains query, query contains name, then
    the best token-overlap score (first item on ties) if it reaches the
    threshold.

    Returns:
        MatchResult; ``resolved`` is False when nothing matched
    """
    query = raw_name.lower().strip()
    if not query:
        return MatchResult(query=query)

    tiers = [
        (MatchTier.EXACT, lambda name: name == query),
        (MatchTier.PREFIX, lambda name: name.startswith(query)),
        (MatchTier.CONTAINS, lambda name: query in name),
        (MatchTier.REVERSE_CONTAINS, lambda name: name in query),
    ]
    for tier, predicate in tiers:
        match = _first(menu_items, predicate)
        if match is not None:
            return MatchResult(query=query, item=match, tier=tier)

    best_match = None
    best_score = 0.0
    for item in menu_items:
        score = token_overlap_score(query, item.name)
        if score > best_score:
            best_score = score
            best_match = item

    if best_match is not None and best_score >= MIN_OVERLAP_SCORE:
        return MatchResult(
            query=query, item=best_match, tier=MatchTier.TOKEN_OVERLAP, score=best_score
        )
    return MatchResult(query=query)
