"""Spiritual suitability scoring.

An article earns one point per positive keyword found in its text and loses
``negative_weight`` points per negative keyword. It is recommended only when
the balance is positive and no negative keyword matched at all.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..models import DEFAULT_CONFIG, Article, ScoringConfig, SuitabilityVerdict

ArticleLike = Union[Article, Mapping[str, Any]]

DEFAULT_REASON = "suitable for spiritual reflection"
# Any negative score at or above this disqualifies an article outright
NEGATIVE_CUTOFF = 3


def as_article(article: ArticleLike) -> Article:
    if isinstance(article, Article):
        return article
    return Article.from_mapping(article)


@lru_cache(maxsize=2048)
def _word_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(r"\b" + re.escape(keyword) + r"\b")


def keyword_in_text(keyword: str, text: str, mode: str = "substring") -> bool:
    """Return True if ``keyword`` occurs in already lower-cased ``text``.

    ``substring`` matches inside longer words ("attack" hits "attacker");
    ``word`` requires word boundaries on both sides.
    """
    if mode == "word":
        return _word_pattern(keyword).search(text) is not None
    return keyword in text


def matched_groups(
    table: Mapping[str, Tuple[str, ...]], text: str, mode: str
) -> List[Tuple[str, str]]:
    """(group, keyword) pairs for every keyword of ``table`` present in ``text``, in table order."""
    return [
        (group, keyword)
        for group, keywords in table.items()
        for keyword in keywords
        if keyword_in_text(keyword, text, mode)
    ]


class SuitabilityScorer:
    def __init__(self, config: ScoringConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def score(self, article: ArticleLike) -> SuitabilityVerdict:
        text = as_article(article).text
        mode = self.config.match_mode

        positive_hits = matched_groups(self.config.positive_keywords, text, mode)
        negative_hits = matched_groups(self.config.negative_keywords, text, mode)

        reasons: List[str] = []
        for group, _keyword in positive_hits:
            if group not in reasons:
                reasons.append(group)

        positive_score = len(positive_hits)
        negative_score = len(negative_hits) * self.config.negative_weight
        final_score = positive_score - negative_score
        return SuitabilityVerdict(
            score=final_score,
            positive_score=positive_score,
            negative_score=negative_score,
            reasons=tuple(reasons[: self.config.max_reasons]),
            is_recommended=final_score > 0 and negative_score < NEGATIVE_CUTOFF,
        )

    def describe(self, verdict: SuitabilityVerdict) -> str:
        if not verdict.reasons:
            return DEFAULT_REASON
        descriptions = [self.config.reason_descriptions.get(r) for r in verdict.reasons]
        return ", ".join(d for d in descriptions if d)


def score_article(article: ArticleLike, *, config: Optional[ScoringConfig] = None) -> SuitabilityVerdict:
    return SuitabilityScorer(config or DEFAULT_CONFIG).score(article)


def describe_suitability(verdict: SuitabilityVerdict, *, config: Optional[ScoringConfig] = None) -> str:
    """Human-readable explanation of why an article suits reflection."""
    return SuitabilityScorer(config or DEFAULT_CONFIG).describe(verdict)
