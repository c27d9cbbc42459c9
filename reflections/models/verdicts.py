from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .article import Article

QUALITY_BONUSES = {
    "has_quotes": 3,
    "has_numbers": 2,
    "has_proper_length": 5,
    "has_emotional_words": 5,
    "has_personal_story": 4,
    "has_positive_outcome": 4,
}


@dataclass(frozen=True, slots=True)
class SuitabilityVerdict:
    score: int
    positive_score: int
    negative_score: int
    reasons: Tuple[str, ...]
    is_recommended: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "positiveScore": self.positive_score,
            "negativeScore": self.negative_score,
            "reasons": list(self.reasons),
            "isRecommended": self.is_recommended,
        }


@dataclass(frozen=True, slots=True)
class QualityIndicators:
    has_quotes: bool = False
    has_numbers: bool = False
    has_proper_length: bool = False
    has_emotional_words: bool = False
    has_personal_story: bool = False
    has_positive_outcome: bool = False

    def bonus(self) -> int:
        return sum(points for name, points in QUALITY_BONUSES.items() if getattr(self, name))

    def to_dict(self) -> Dict[str, bool]:
        return {
            "hasQuotes": self.has_quotes,
            "hasNumbers": self.has_numbers,
            "hasProperLength": self.has_proper_length,
            "hasEmotionalWords": self.has_emotional_words,
            "hasPersonalStory": self.has_personal_story,
            "hasPositiveOutcome": self.has_positive_outcome,
        }


@dataclass(frozen=True, slots=True)
class CategoryVerdict:
    """Fit of one article for one category.

    ``score`` is the total (category + quality + spiritual bonus - penalty).
    When ``reason`` is set the verdict is degenerate (unknown category) and
    only ``score`` and ``category_match`` are meaningful.
    """

    category_id: str
    score: int
    category_score: int = 0
    quality_score: int = 0
    spiritual_bonus: int = 0
    negative_penalty: int = 0
    category_match: bool = False
    matched_keywords: Tuple[str, ...] = ()
    quality_indicators: QualityIndicators = field(default_factory=QualityIndicators)
    suitability: Optional[SuitabilityVerdict] = None
    is_best_candidate: bool = False
    reason: Optional[str] = None

    @classmethod
    def unknown(cls, category_id: str) -> "CategoryVerdict":
        return cls(category_id=category_id, score=0, category_match=False, reason="Unknown category")

    @property
    def is_recommended(self) -> bool:
        return self.suitability is not None and self.suitability.is_recommended

    def to_dict(self) -> Dict[str, Any]:
        if self.reason is not None:
            return {"score": self.score, "categoryMatch": self.category_match, "reason": self.reason}
        return {
            "score": self.score,
            "categoryScore": self.category_score,
            "qualityScore": self.quality_score,
            "spiritualBonus": self.spiritual_bonus,
            "negativePenalty": self.negative_penalty,
            "categoryMatch": self.category_match,
            "matchedKeywords": list(self.matched_keywords),
            "qualityIndicators": self.quality_indicators.to_dict(),
            "suitability": self.suitability.to_dict() if self.suitability else None,
            "isBestCandidate": self.is_best_candidate,
        }


Verdict = Union[SuitabilityVerdict, CategoryVerdict]


@dataclass(frozen=True, slots=True)
class ScoredArticle:
    article: Article
    verdict: Verdict

    @property
    def id(self) -> str:
        return self.article.id

    def to_dict(self) -> Dict[str, Any]:
        payload = self.article.to_dict()
        if isinstance(self.verdict, CategoryVerdict):
            payload["categoryScore"] = self.verdict.to_dict()
        else:
            payload["suitability"] = self.verdict.to_dict()
        return payload


@dataclass(slots=True)
class CategoryRanking:
    best: Optional[ScoredArticle]
    top_three: List[ScoredArticle]
    total: int
    category: Dict[str, str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "best": self.best.to_dict() if self.best else None,
            "topThree": [a.to_dict() for a in self.top_three],
            "total": self.total,
            "category": dict(self.category),
        }
