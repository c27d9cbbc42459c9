from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from ..models import Article
from ..utils.logging import get_logger

logger = get_logger("reflections.processors.dedup")


@dataclass(slots=True)
class DedupStats:
    total: int
    kept: int
    duplicates: int


def dedupe_by_id(articles: Iterable[Article], *, return_stats: bool = False):
    """Collapse articles sharing an ``id``.

    When two fetches return the same article the later record wins, but it
    keeps the position of the first occurrence, so ordering stays stable.

    Returns a list of unique articles by default. If ``return_stats`` is True,
    returns a tuple of (unique_articles, DedupStats).
    """
    by_id: Dict[str, Article] = {}
    total = 0
    for art in articles:
        total += 1
        if art.id in by_id:
            logger.debug("Duplicate article id %s: %s", art.id, art.title)
        by_id[art.id] = art
    unique: List[Article] = list(by_id.values())
    stats = DedupStats(total=total, kept=len(unique), duplicates=total - len(unique))
    return (unique, stats) if return_stats else unique
