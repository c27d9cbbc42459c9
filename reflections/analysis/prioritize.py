from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import DEFAULT_CONFIG, ScoredArticle, ScoringConfig
from ..processors.suitability import ArticleLike, SuitabilityScorer, as_article

# Non-recommended articles below this negative score may still pad a short list
PADDING_MAX_NEGATIVE = 5


def rank_by_suitability(scored: Iterable[ScoredArticle]) -> List[ScoredArticle]:
    # sorted() is stable, so equal scores keep input order
    return sorted(scored, key=lambda it: it.verdict.score, reverse=True)


def score_all(articles: Iterable[ArticleLike], *, scorer: SuitabilityScorer) -> List[ScoredArticle]:
    items: List[ScoredArticle] = []
    for art in articles:
        article = as_article(art)
        items.append(ScoredArticle(article=article, verdict=scorer.score(article)))
    return items


def filter_news(
    articles: Iterable[ArticleLike], limit: int = 10, *, config: Optional[ScoringConfig] = None
) -> List[ScoredArticle]:
    """Best ``limit`` articles by suitability score.

    Recommended articles come first. If there are not enough of them the list
    is topped up with neutral ones (not recommended, but negative score below
    ``PADDING_MAX_NEGATIVE``), ranked the same way.
    """
    limit = max(0, limit)
    scored = score_all(articles, scorer=SuitabilityScorer(config or DEFAULT_CONFIG))

    selected = rank_by_suitability(it for it in scored if it.verdict.is_recommended)[:limit]
    if len(selected) < limit:
        neutral = rank_by_suitability(
            it
            for it in scored
            if not it.verdict.is_recommended and it.verdict.negative_score < PADDING_MAX_NEGATIVE
        )
        selected.extend(neutral[: limit - len(selected)])
    return selected
