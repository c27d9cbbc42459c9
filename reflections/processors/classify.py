from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..models import DEFAULT_CONFIG, CategoryVerdict, QualityIndicators, ScoringConfig
from ..models.catalog import CategoryDefinition
from ..utils.logging import get_logger
from .suitability import ArticleLike, SuitabilityScorer, as_article, keyword_in_text

logger = get_logger("reflections.processors.classify")

TIER_POINTS = (("high", 10), ("medium", 5), ("low", 2))
MAX_REPORTED_KEYWORDS = 5

# Match and best-candidate thresholds
MATCH_MIN_CATEGORY_SCORE = 5
BEST_MIN_TOTAL_SCORE = 20
BEST_MIN_CATEGORY_SCORE = 10

_quoted_re = re.compile(r"[\"'].*?[\"']")
_digits_re = re.compile(r"\d+", re.ASCII)


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(text.encode("utf-16-le")) // 2


def detect_quality(text: str, config: ScoringConfig = DEFAULT_CONFIG) -> QualityIndicators:
    """Story quality heuristics over lower-cased article text."""
    return QualityIndicators(
        has_quotes=_quoted_re.search(text) is not None,
        has_numbers=len(_digits_re.findall(text)) > 2,
        has_proper_length=utf16_length(text) > 200,
        has_emotional_words=any(w in text for w in config.emotional_words),
        has_personal_story=any(w in text for w in config.personal_story_cues),
        has_positive_outcome=any(w in text for w in config.positive_outcome_cues),
    )


def tiered_keyword_score(category: CategoryDefinition, text: str, mode: str = "substring") -> Tuple[int, List[str]]:
    score = 0
    matched: List[str] = []
    for tier, points in TIER_POINTS:
        for keyword in getattr(category.keywords, tier):
            if keyword_in_text(keyword.lower(), text, mode):
                score += points
                matched.append(keyword)
    return score, matched


class CategoryMatcher:
    """Score how well an article fits a configured category."""

    def __init__(self, config: ScoringConfig = DEFAULT_CONFIG, *, scorer: Optional[SuitabilityScorer] = None) -> None:
        self.config = config
        self.scorer = scorer or SuitabilityScorer(config)

    def score(self, article: ArticleLike, category_id: str) -> CategoryVerdict:
        category = self.config.get_category(category_id)
        if category is None:
            logger.debug("Unknown category '%s'; returning empty verdict", category_id)
            return CategoryVerdict.unknown(category_id)

        art = as_article(article)
        text = art.text

        category_score, matched = tiered_keyword_score(category, text, self.config.match_mode)
        indicators = detect_quality(text, self.config)
        quality_score = indicators.bonus()

        suitability = self.scorer.score(art)
        if suitability.is_recommended:
            spiritual_bonus = 10
        elif suitability.score > 0:
            spiritual_bonus = 5
        else:
            spiritual_bonus = 0
        negative_penalty = suitability.negative_score * 3

        total = category_score + quality_score + spiritual_bonus - negative_penalty
        return CategoryVerdict(
            category_id=category_id,
            score=total,
            category_score=category_score,
            quality_score=quality_score,
            spiritual_bonus=spiritual_bonus,
            negative_penalty=negative_penalty,
            category_match=category_score >= MATCH_MIN_CATEGORY_SCORE,
            matched_keywords=tuple(matched[:MAX_REPORTED_KEYWORDS]),
            quality_indicators=indicators,
            suitability=suitability,
            is_best_candidate=(
                total >= BEST_MIN_TOTAL_SCORE
                and category_score >= BEST_MIN_CATEGORY_SCORE
                and suitability.is_recommended
            ),
        )


def score_category_article(
    article: ArticleLike, category_id: str, *, config: Optional[ScoringConfig] = None
) -> CategoryVerdict:
    return CategoryMatcher(config or DEFAULT_CONFIG).score(article, category_id)
