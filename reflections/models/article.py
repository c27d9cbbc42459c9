from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def create_stable_id(value: str) -> str:
    """Derive a short deterministic id from a canonical field (url or title).

    Rolling 32-bit string hash over UTF-16 code units, rendered in base 36.
    The same scheme is used by the ingestion layer, so ids computed here
    line up with ids already stored.
    """
    data = (value or "").encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) - h + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return _to_base36(abs(h))


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True, slots=True)
class Article:
    """A news article as handed over by the ingestion layer.

    Only ``id`` and ``title`` are required; the remaining text fields default
    to empty strings so the scorers never have to special-case them.
    """

    id: str
    title: str
    description: str = ""
    content: str = ""
    source: str = ""
    published_at: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None

    @property
    def text(self) -> str:
        """Lower-cased scan text used by every keyword matcher."""
        return f"{self.title} {self.description} {self.content}".lower()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Article":
        """Build an article from a duck-typed mapping (camelCase or snake_case keys)."""
        title = _text(data.get("title"))
        url = _first(data, "url")
        article_id = _first(data, "id")
        if article_id is None or not str(article_id).strip():
            article_id = create_stable_id(url or title)
        source = data.get("source")
        if isinstance(source, Mapping):
            source = source.get("name")
        return cls(
            id=str(article_id),
            title=title,
            description=_text(data.get("description")),
            content=_text(data.get("content")),
            source=_text(source),
            published_at=_first(data, "published_at", "publishedAt"),
            author=data.get("author"),
            url=url,
            image_url=_first(data, "image_url", "imageUrl", "urlToImage"),
            category=data.get("category"),
        )

    @classmethod
    def from_newsapi(
        cls, payload: Mapping[str, Any], *, index: int = 0, category: Optional[str] = None
    ) -> "Article":
        """Map one entry of a NewsAPI ``articles`` array.

        Description and content may carry HTML fragments; they are cleaned to
        plain text. ``content`` falls back to ``description``.
        """
        from ..processors.normalize import clean_html_to_text  # local import to avoid circular import

        title = _text(payload.get("title"))
        url = payload.get("url")
        description = clean_html_to_text(payload.get("description"))
        content = clean_html_to_text(payload.get("content")) or description
        source = payload.get("source") or {}
        source_name = source.get("name") if isinstance(source, Mapping) else source
        fallback = f"{category}-{index}" if category else f"article-{index}"
        return cls(
            id=create_stable_id(url or title or fallback),
            title=title,
            description=description,
            content=content,
            source=_text(source_name) or "Unknown",
            published_at=payload.get("publishedAt"),
            author=payload.get("author"),
            url=url,
            image_url=payload.get("urlToImage"),
            category=category,
        )

    def to_dict(self) -> Dict[str, Any]:
        raw = asdict(self)
        return {
            "id": raw["id"],
            "title": raw["title"],
            "description": raw["description"],
            "content": raw["content"],
            "source": raw["source"],
            "publishedAt": raw["published_at"],
            "author": raw["author"],
            "url": raw["url"],
            "imageUrl": raw["image_url"],
            "category": raw["category"],
        }
