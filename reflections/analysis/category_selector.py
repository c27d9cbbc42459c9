from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..models import DEFAULT_CONFIG, CategoryRanking, ScoredArticle, ScoringConfig
from ..processors.classify import CategoryMatcher
from ..processors.dedup import dedupe_by_id
from ..processors.suitability import ArticleLike, as_article
from ..utils.logging import get_logger
from .prioritize import rank_by_suitability, score_all

logger = get_logger("reflections.analysis.category_selector")

ALL_SECTION = "all"


def rank_category(
    articles: Iterable[ArticleLike], category_id: str, *, matcher: CategoryMatcher
) -> List[ScoredArticle]:
    """Articles that fit ``category_id`` and are recommended, best first.

    Ties keep input order.
    """
    items: List[ScoredArticle] = []
    for art in articles:
        article = as_article(art)
        verdict = matcher.score(article, category_id)
        if verdict.category_match and verdict.is_recommended:
            items.append(ScoredArticle(article=article, verdict=verdict))
    items.sort(key=lambda it: it.verdict.score, reverse=True)
    return items


def get_best_articles_by_category(
    articles: Iterable[ArticleLike], *, config: Optional[ScoringConfig] = None
) -> Dict[str, CategoryRanking]:
    cfg = config or DEFAULT_CONFIG
    matcher = CategoryMatcher(cfg)
    pool = [as_article(a) for a in articles]

    result: Dict[str, CategoryRanking] = {}
    for category_id in cfg.category_ids():
        ranked = rank_category(pool, category_id, matcher=matcher)
        result[category_id] = CategoryRanking(
            best=ranked[0] if ranked else None,
            top_three=ranked[:3],
            total=len(ranked),
            category=cfg.categories[category_id].display(),
        )
    return result


def filter_and_categorize_news(
    articles: Iterable[ArticleLike],
    *,
    best_per_category: int = 3,
    max_all: int = 12,
    config: Optional[ScoringConfig] = None,
) -> Dict[str, List[ScoredArticle]]:
    """Split articles into one section per category plus an ``all`` section.

    Sections are filled in category order; an article placed in an earlier
    section is not repeated in a later one, nor in ``all``. ``all`` holds the
    best remaining recommended articles by plain suitability score.
    """
    cfg = config or DEFAULT_CONFIG
    best_per_category = max(0, best_per_category)
    max_all = max(0, max_all)

    unique, stats = dedupe_by_id((as_article(a) for a in articles), return_stats=True)
    matcher = CategoryMatcher(cfg)

    sections: Dict[str, List[ScoredArticle]] = {}
    used_ids: set[str] = set()
    for category_id in cfg.category_ids():
        picked: List[ScoredArticle] = []
        for item in rank_category(unique, category_id, matcher=matcher):
            if len(picked) >= best_per_category:
                break
            if item.id in used_ids:
                continue
            picked.append(item)
            used_ids.add(item.id)
        sections[category_id] = picked

    remaining = [a for a in unique if a.id not in used_ids]
    scored = score_all(remaining, scorer=matcher.scorer)
    sections[ALL_SECTION] = rank_by_suitability(it for it in scored if it.verdict.is_recommended)[:max_all]

    logger.info(
        "Categorized %d articles (%d duplicates dropped): %s",
        stats.kept,
        stats.duplicates,
        ", ".join(f"{k}={len(v)}" for k, v in sections.items()),
    )
    return sections


def categorized_to_dict(sections: Dict[str, List[ScoredArticle]]) -> Dict[str, List[Dict[str, Any]]]:
    return {name: [it.to_dict() for it in items] for name, items in sections.items()}
