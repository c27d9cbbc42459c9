"""Per-article processing: normalization, deduplication, suitability and category scoring."""

from .normalize import clean_html_to_text, normalize_plain_text, normalize_article, batch_normalize
from .dedup import DedupStats, dedupe_by_id
from .suitability import SuitabilityScorer, describe_suitability, keyword_in_text, score_article
from .classify import CategoryMatcher, detect_quality, score_category_article

__all__ = [
    "clean_html_to_text",
    "normalize_plain_text",
    "normalize_article",
    "batch_normalize",
    "DedupStats",
    "dedupe_by_id",
    "SuitabilityScorer",
    "describe_suitability",
    "keyword_in_text",
    "score_article",
    "CategoryMatcher",
    "detect_quality",
    "score_category_article",
]
