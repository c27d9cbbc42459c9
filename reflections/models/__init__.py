"""Typed models used across the scoring core."""

from .article import Article, create_stable_id
from .catalog import (
    DEFAULT_CONFIG,
    CategoryDefinition,
    Concept,
    KeywordTiers,
    ScoringConfig,
)
from .verdicts import (
    CategoryRanking,
    CategoryVerdict,
    QualityIndicators,
    ScoredArticle,
    SuitabilityVerdict,
)

__all__ = [
    "Article",
    "create_stable_id",
    "DEFAULT_CONFIG",
    "CategoryDefinition",
    "Concept",
    "KeywordTiers",
    "ScoringConfig",
    "CategoryRanking",
    "CategoryVerdict",
    "QualityIndicators",
    "ScoredArticle",
    "SuitabilityVerdict",
]
