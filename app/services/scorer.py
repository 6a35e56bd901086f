"""
Tag/category overlap scoring.

Each unviewed item earns 2 points per tag it shares with the viewed items and
a flat 1 point if its category matches any viewed category. Items scoring 0
are dropped; ties rank by ascending catalog id.
"""

import logging
from collections.abc import Sequence

from app.domain.errors import EmptyHistoryError, UnknownItemError
from app.domain.models import CatalogItem, ScoredCandidate

logger = logging.getLogger(__name__)

TAG_WEIGHT = 2
CATEGORY_BONUS = 1
DEFAULT_LIMIT = 4


def candidate_score(
    item: CatalogItem,
    viewed_tags: frozenset[str],
    viewed_categories: frozenset[str],
) -> int:
    """Score a single candidate against the viewed tag and category sets."""
    score = TAG_WEIGHT * len(item.tags & viewed_tags)
    if item.category in viewed_categories:
        score += CATEGORY_BONUS
    return score


def score(
    catalog: Sequence[CatalogItem],
    history: Sequence[int],
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredCandidate]:
    """
    Rank unviewed catalog items by overlap with the viewed history.

    Raises:
        EmptyHistoryError: history has no ids.
        UnknownItemError: a history id is not in the catalog.
    """
    if not history:
        raise EmptyHistoryError()

    by_id = {item.id: item for item in catalog}
    viewed: list[CatalogItem] = []
    for item_id in history:
        item = by_id.get(item_id)
        if item is None:
            raise UnknownItemError(item_id)
        viewed.append(item)

    viewed_ids = frozenset(item.id for item in viewed)
    viewed_tags = frozenset().union(*(item.tags for item in viewed))
    viewed_categories = frozenset(item.category for item in viewed)

    candidates = [
        ScoredCandidate(item=item, score=candidate_score(item, viewed_tags, viewed_categories))
        for item in catalog
        if item.id not in viewed_ids
    ]
    ranked = sorted(
        (c for c in candidates if c.score > 0),
        key=lambda c: (-c.score, c.item.id),
    )
    logger.debug(
        "Scored %d candidates from %d viewed items, %d eligible",
        len(candidates), len(viewed), len(ranked),
    )
    return ranked[:limit]
