"""Static keyword tables, news categories and reflection concepts.

Everything here is read-only configuration. A ``ScoringConfig`` is built once
(either ``DEFAULT_CONFIG`` or via ``utils.config_loader``) and handed to the
scorers; nothing mutates it afterwards.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Literal, Mapping, Optional, Tuple

MatchMode = Literal["substring", "word"]
MATCH_MODES = ("substring", "word")


@dataclass(frozen=True, slots=True)
class KeywordTiers:
    high: Tuple[str, ...] = ()
    medium: Tuple[str, ...] = ()
    low: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Concept:
    """A Quranic concept a reflection can be anchored on."""

    name: str
    arabic_name: str
    meaning: str
    description: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CategoryDefinition:
    """A landing-page section and the keywords that pull articles into it."""

    id: str
    name: str
    keywords: KeywordTiers
    description: str = ""
    icon: str = ""
    search_queries: Tuple[str, ...] = ()
    concepts: Tuple[str, ...] = ()
    priority: int = 0
    gradient: str = ""
    border_color: str = ""

    def display(self) -> Dict[str, str]:
        return {"name": self.name, "description": self.description, "icon": self.icon}


def _freeze(table: Mapping[str, Iterable[str]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in table.items()})


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    positive_keywords: Mapping[str, Tuple[str, ...]]
    negative_keywords: Mapping[str, Tuple[str, ...]]
    categories: Mapping[str, CategoryDefinition]
    concepts: Mapping[str, Concept] = field(default_factory=lambda: MappingProxyType({}))
    emotional_words: Tuple[str, ...] = ()
    personal_story_cues: Tuple[str, ...] = ()
    positive_outcome_cues: Tuple[str, ...] = ()
    reason_descriptions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    match_mode: MatchMode = "substring"
    negative_weight: int = 3
    max_reasons: int = 3

    def __post_init__(self) -> None:
        if self.match_mode not in MATCH_MODES:
            raise ValueError(f"Unknown match_mode '{self.match_mode}'. Must be one of {MATCH_MODES}")
        # Accept plain dicts/lists from callers and store read-only views
        object.__setattr__(self, "positive_keywords", _freeze(self.positive_keywords))
        object.__setattr__(self, "negative_keywords", _freeze(self.negative_keywords))
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))
        object.__setattr__(self, "concepts", MappingProxyType(dict(self.concepts)))
        object.__setattr__(self, "reason_descriptions", MappingProxyType(dict(self.reason_descriptions)))
        object.__setattr__(self, "emotional_words", tuple(self.emotional_words))
        object.__setattr__(self, "personal_story_cues", tuple(self.personal_story_cues))
        object.__setattr__(self, "positive_outcome_cues", tuple(self.positive_outcome_cues))

    def get_category(self, category_id: str) -> Optional[CategoryDefinition]:
        return self.categories.get(category_id)

    def category_ids(self) -> List[str]:
        return list(self.categories)

    def get_concept(self, name: str) -> Optional[Concept]:
        return self.concepts.get(name)

    def all_concepts(self) -> List[Concept]:
        return list(self.concepts.values())

    def concepts_for_category(self, category_id: str) -> List[Concept]:
        category = self.get_category(category_id)
        if category is None:
            return []
        return [self.concepts[n] for n in category.concepts if n in self.concepts]

    def replace(self, **changes) -> "ScoringConfig":
        return dataclasses.replace(self, **changes)


POSITIVE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    # Nature & creation
    "nature": ("nature", "natural", "wildlife", "forest", "ocean", "mountain", "river", "animal", "plant", "ecosystem"),
    "science": ("discovery", "research", "scientist", "study", "breakthrough", "found", "evidence", "phenomenon"),
    "space": ("space", "universe", "galaxy", "star", "planet", "cosmic", "astronomy", "nasa", "telescope", "mars", "moon"),
    "environment": ("climate", "environment", "conservation", "renewable", "sustainable", "green", "clean", "preservation"),
    "health": ("health", "medical", "cure", "treatment", "healing", "wellness", "recovery", "breakthrough"),
    "technology": ("innovation", "technology", "advancement", "progress", "development", "solution"),
    "community": ("community", "volunteer", "charity", "help", "support", "together", "unity", "peace"),
    "wisdom": ("wisdom", "knowledge", "education", "learning", "understanding", "ancient", "history"),
    "wonder": ("amazing", "remarkable", "extraordinary", "miracle", "wonder", "beautiful", "stunning", "incredible"),
}

NEGATIVE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "violence": ("murder", "killed", "shooting", "attack", "terrorist", "bomb", "explosion", "war", "conflict", "violence"),
    "crime": ("crime", "criminal", "arrest", "prison", "jail", "robbery", "theft", "fraud", "scam"),
    "politics": ("election", "politician", "political", "campaign", "vote", "party", "opposition", "scandal"),
    "celebrity": ("celebrity", "hollywood", "bollywood", "movie star", "singer", "gossip", "divorce", "affair"),
    "negative": ("death toll", "disaster", "tragedy", "crisis", "collapse", "failure", "scandal", "controversy"),
}

REASON_DESCRIPTIONS: Dict[str, str] = {
    "nature": "reflects on God's creation in nature",
    "science": "scientific discovery reveals divine wisdom",
    "space": "cosmic wonders demonstrate Creator's vastness",
    "environment": "reminds us of our duty as stewards of Earth",
    "health": "shows blessings of life and healing",
    "technology": "human ingenuity as a divine gift",
    "community": "demonstrates unity and compassion",
    "wisdom": "connects to timeless knowledge",
    "wonder": "evokes awe at creation's marvels",
}

EMOTIONAL_WORDS = ("amazing", "remarkable", "incredible", "inspiring", "extraordinary", "miracle", "breakthrough")
PERSONAL_STORY_CUES = ("he said", "she said", "told", "explained", "family", "community", "years")
POSITIVE_OUTCOME_CUES = ("success", "achieve", "overcome", "recover", "discover", "found", "reveal", "first")

NEWS_CATEGORIES: Dict[str, CategoryDefinition] = {
    "inspiration": CategoryDefinition(
        id="inspiration",
        name="Inspiration",
        description="Real-life stories of people overcoming challenges creatively",
        icon="\U0001f4aa",
        gradient="from-amber-500/10 to-orange-500/10",
        border_color="border-amber-500/30",
        search_queries=(
            "overcome challenge success story",
            "inspiring recovery story",
            "against all odds triumph",
            "resilience perseverance story",
            "human spirit triumph",
        ),
        keywords=KeywordTiers(
            high=(
                "overcome", "triumph", "resilience", "perseverance", "courage",
                "against all odds", "remarkable story", "inspiring", "never gave up",
            ),
            medium=("survive", "recover", "challenge", "determination", "hope", "success story", "hero", "strength"),
            low=("achievement", "milestone", "breakthrough", "journey", "struggle"),
        ),
        concepts=("Tawakkul", "Sabr", "Shukr"),
        priority=1,
    ),
    "science": CategoryDefinition(
        id="science",
        name="Science",
        description="Discoveries that inspire awe and God's remembrance",
        icon="\U0001f52c",
        gradient="from-blue-500/10 to-purple-500/10",
        border_color="border-blue-500/30",
        search_queries=(
            "scientific discovery breakthrough",
            "space exploration discovery",
            "nature research findings",
            "universe astronomy discovery",
            "amazing scientific finding",
        ),
        keywords=KeywordTiers(
            high=(
                "discovery", "breakthrough", "scientists find", "researchers discover",
                "first time ever", "evidence found", "new species",
            ),
            medium=("research", "study finds", "experiment", "phenomenon", "universe", "galaxy", "nature reveals"),
            low=("technology", "innovation", "advancement", "development", "analysis"),
        ),
        concepts=("Tafakkur", "Ayat", "Khalq"),
        priority=2,
    ),
}

QURANIC_CONCEPTS: Dict[str, Concept] = {
    c.name: c
    for c in (
        Concept("Tawakkul", "توكل", "Trust in God",
                "Complete reliance on Allah while taking appropriate action",
                ("trust", "rely", "faith", "depend", "confidence", "overcome", "hope")),
        Concept("Sabr", "صبر", "Patience & Perseverance",
                "Steadfastness in face of trials",
                ("patience", "endure", "persevere", "steadfast", "wait", "trial", "difficulty")),
        Concept("Shukr", "شكر", "Gratitude",
                "Thankfulness to Allah for all blessings",
                ("grateful", "thankful", "blessing", "gift", "appreciate", "favor")),
        Concept("Tafakkur", "تفكر", "Contemplation",
                "Deep reflection on Allah's creation",
                ("think", "reflect", "ponder", "contemplate", "understand", "discover", "universe", "creation")),
        Concept("Ayat", "آيات", "Signs of God",
                "Recognizing Allah's signs in creation",
                ("sign", "evidence", "proof", "wonder", "miracle", "creation", "nature")),
        Concept("Khalq", "خلق", "Creation",
                "Allah's creative power manifested in the universe",
                ("create", "universe", "nature", "life", "origin", "beginning", "design")),
        Concept("Hidayah", "هداية", "Guidance",
                "Divine guidance toward the right path",
                ("guide", "path", "direction", "lead", "show", "way")),
        Concept("Rizq", "رزق", "Provision",
                "Allah's provision and sustenance",
                ("provision", "sustain", "provide", "gift", "blessing", "resource")),
    )
}

DEFAULT_CONFIG = ScoringConfig(
    positive_keywords=POSITIVE_KEYWORDS,
    negative_keywords=NEGATIVE_KEYWORDS,
    categories=NEWS_CATEGORIES,
    concepts=QURANIC_CONCEPTS,
    emotional_words=EMOTIONAL_WORDS,
    personal_story_cues=PERSONAL_STORY_CUES,
    positive_outcome_cues=POSITIVE_OUTCOME_CUES,
    reason_descriptions=REASON_DESCRIPTIONS,
)
