from __future__ import annotations

from typing import List

import pytest

from reflections.models import Article, CategoryDefinition, KeywordTiers, ScoringConfig

SAMPLE_NEWS = [
    {
        "id": "sample-1",
        "title": "Scientists Discover New Evidence of Water on Mars",
        "description": "NASA researchers have found compelling evidence of subsurface water ice on Mars, opening new possibilities for future exploration.",
        "content": "In a groundbreaking discovery, NASA scientists have detected significant deposits of water ice beneath the Martian surface. This finding could revolutionize our understanding of the Red Planet and pave the way for future human missions.",
        "source": "BBC News",
    },
    {
        "id": "sample-2",
        "title": "Global Climate Summit Reaches Historic Agreement",
        "description": "World leaders commit to ambitious carbon reduction targets at the international climate conference.",
        "content": "Leaders from over 190 countries have agreed to unprecedented measures to combat climate change, including significant reductions in carbon emissions over the next decade.",
        "source": "Reuters",
    },
    {
        "id": "sample-3",
        "title": "Breakthrough in Renewable Energy Storage Technology",
        "description": "New battery technology promises to make solar and wind power more reliable and accessible.",
        "content": "Scientists have developed a revolutionary battery technology that can store renewable energy for weeks, potentially solving one of the biggest challenges in the transition to clean energy.",
        "source": "Al Jazeera",
    },
    {
        "id": "sample-5",
        "title": "Space Telescope Captures Stunning Images of Distant Galaxy",
        "description": "The images reveal new details about the formation of stars and planets billions of light years away.",
        "content": "Astronomers have released breathtaking images from the latest space telescope, showing unprecedented details of a galaxy formed just 500 million years after the Big Bang.",
        "source": "BBC News",
    },
    {
        "id": "sample-6",
        "title": "Ocean Conservation Efforts Show Positive Results",
        "description": "Marine protected areas are helping fish populations recover in key regions.",
        "content": "A decade of conservation efforts is finally paying off as marine biologists report significant recovery of fish populations in protected ocean areas around the world.",
        "source": "Reuters",
    },
    {
        "id": "sample-9",
        "title": "Community Gardens Transform Urban Neighborhoods",
        "description": "Urban gardening initiatives bring communities together while improving local food security.",
        "content": "Cities around the world are seeing the transformative power of community gardens, which not only provide fresh produce but also create spaces for neighbors to connect and support each other.",
        "source": "Associated Press",
    },
    {
        "id": "sample-11",
        "title": "Teen Overcomes Disability to Become Paralympic Champion",
        "description": "Against all odds, a young athlete with a rare condition has triumphed at the international games.",
        "content": "Born with a rare genetic condition that doctors said would prevent her from ever walking, Maria has not only learned to walk but has become a Paralympic gold medalist through years of determination and perseverance.",
        "source": "BBC News",
    },
    {
        "id": "sample-12",
        "title": "Community Rebuilds After Natural Disaster Through Unity",
        "description": "Neighbors come together to rebuild homes and lives after devastating earthquake.",
        "content": "In the aftermath of a devastating earthquake, a small community has shown remarkable resilience. Through collective effort and unwavering hope, they have rebuilt not just structures but stronger bonds of human connection.",
        "source": "Reuters",
    },
    {
        "id": "crime-1",
        "title": "Police arrest suspects after bank robbery",
        "description": "Two men were taken to jail following the theft.",
        "content": "",
        "source": "Wire",
    },
]


def make_article(article_id: str, title: str, description: str = "", content: str = "") -> Article:
    return Article(id=article_id, title=title, description=description, content=content)


@pytest.fixture
def sample_articles() -> List[Article]:
    return [Article.from_mapping(item) for item in SAMPLE_NEWS]


@pytest.fixture
def tiny_config() -> ScoringConfig:
    """Two categories and one-word keyword tables; quality cue lists left empty."""
    return ScoringConfig(
        positive_keywords={"good": ("good",)},
        negative_keywords={"bad": ("bad", "worse")},
        categories={
            "a": CategoryDefinition(id="a", name="Apples", keywords=KeywordTiers(high=("apple",))),
            "b": CategoryDefinition(id="b", name="Bananas", keywords=KeywordTiers(high=("banana",))),
        },
    )
