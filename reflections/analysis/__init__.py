"""Ranking and section selection over scored articles."""

from .prioritize import filter_news, rank_by_suitability
from .category_selector import (
    ALL_SECTION,
    categorized_to_dict,
    filter_and_categorize_news,
    get_best_articles_by_category,
    rank_category,
)

__all__ = [
    "filter_news",
    "rank_by_suitability",
    "ALL_SECTION",
    "categorized_to_dict",
    "filter_and_categorize_news",
    "get_best_articles_by_category",
    "rank_category",
]
