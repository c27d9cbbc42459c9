"""Scoring core for the Spiritual Reflections news pipeline.

Articles fetched by the ingestion layer are scored for spiritual
suitability, matched against the landing-page categories, and split into
per-category sections plus an overall list for the display layer.
"""

from .models import Article, DEFAULT_CONFIG, ScoringConfig
from .processors import score_article, score_category_article, describe_suitability
from .analysis import filter_and_categorize_news, filter_news, get_best_articles_by_category

__all__ = [
    "Article",
    "DEFAULT_CONFIG",
    "ScoringConfig",
    "score_article",
    "score_category_article",
    "describe_suitability",
    "filter_and_categorize_news",
    "filter_news",
    "get_best_articles_by_category",
]
