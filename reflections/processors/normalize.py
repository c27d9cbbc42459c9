from __future__ import annotations

import html
import re
import unicodedata
from dataclasses import replace
from typing import Iterable, List

from bs4 import BeautifulSoup

from ..models import Article
from ..utils.logging import get_logger

_whitespace_re = re.compile(r"\s+")
_control_chars_re = re.compile(r"[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F]")
# NewsAPI truncates content with a trailer like "... [+1234 chars]"
_truncation_re = re.compile(r"\s*\[\+\d+ chars\]\s*$")

_PUNCT_TRANSLATION = {
    ord("\u2018"): "'",  # left single quote
    ord("\u2019"): "'",  # right single quote
    ord("\u201C"): '"',  # left double quote
    ord("\u201D"): '"',  # right double quote
    ord("\u2013"): "-",  # en dash
    ord("\u2014"): "-",  # em dash
    ord("\u00A0"): " ",  # non-breaking space
}

_logger = get_logger("reflections.processors.normalize")


def clean_html_to_text(raw_html: str | None) -> str:
    """Strip tags and entities from an HTML fragment and collapse whitespace."""
    if not raw_html:
        return ""
    if "<" not in raw_html and "&" not in raw_html:
        return _whitespace_re.sub(" ", raw_html).strip()

    soup = BeautifulSoup(raw_html, "html.parser")
    text = html.unescape(soup.get_text(" "))
    return _whitespace_re.sub(" ", text).strip()


def normalize_plain_text(text: str | None) -> str:
    """Normalize plain text before scoring.

    - Strip BOM and the NewsAPI truncation trailer
    - Straighten curly quotes and dashes so quote detection sees them
    - Unicode normalize (NFKC) and drop control characters
    - Collapse whitespace
    """
    if not text:
        return ""

    if text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")

    text = _truncation_re.sub("", text)
    text = text.translate(_PUNCT_TRANSLATION)
    text = unicodedata.normalize("NFKC", text)
    text = _control_chars_re.sub(" ", text)
    return _whitespace_re.sub(" ", text).strip()


def normalize_article(article: Article) -> Article:
    """Return a copy of ``article`` with cleaned title, description and content."""
    return replace(
        article,
        title=normalize_plain_text(clean_html_to_text(article.title)),
        description=normalize_plain_text(clean_html_to_text(article.description)),
        content=normalize_plain_text(clean_html_to_text(article.content)),
    )


def batch_normalize(articles: Iterable[Article]) -> List[Article]:
    """Normalize a batch of articles.

    Articles that fail normalization are passed through unchanged with a
    warning; scoring copes with raw text.
    """
    normalized: List[Article] = []
    for a in articles:
        try:
            normalized.append(normalize_article(a))
        except Exception as exc:  # noqa: BLE001 - bs4 can choke on malformed markup
            _logger.warning("Failed to normalize article '%s': %s", a.id, exc)
            normalized.append(a)
    return normalized
