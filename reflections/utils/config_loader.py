from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import yaml

from ..models.catalog import (
    DEFAULT_CONFIG,
    MATCH_MODES,
    CategoryDefinition,
    Concept,
    KeywordTiers,
    ScoringConfig,
)

REQUIRED_CATEGORY_FIELDS = {"id", "name", "keywords"}
REQUIRED_CONCEPT_FIELDS = {"name", "meaning"}
KEYWORD_TIERS = ("high", "medium", "low")
# Name of the catch-all section produced by the selector
RESERVED_CATEGORY_ID = "all"


class ConfigError(Exception):
    """Raised when the scoring configuration file is invalid or missing required fields."""


def _string_list(value: Any, what: str, *, lower: bool = False) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{what}' must be a list of strings")
    items = (v.strip().lower() if lower else v.strip() for v in value)
    return tuple(v for v in items if v)


def _keyword_table(raw: Any, what: str) -> Dict[str, Tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise ConfigError(f"'{what}' must be a mapping of group name to keyword list")
    return {str(name): _string_list(words, f"{what}.{name}", lower=True) for name, words in raw.items()}


def _coerce_concept(entry: Any) -> Concept:
    if not isinstance(entry, dict):
        raise ConfigError(f"Each concept must be a mapping, got: {type(entry)}")
    missing = REQUIRED_CONCEPT_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required concept fields: {sorted(missing)} in {entry}")
    return Concept(
        name=str(entry["name"]).strip(),
        arabic_name=str(entry.get("arabic_name") or ""),
        meaning=str(entry["meaning"]),
        description=str(entry.get("description") or ""),
        keywords=_string_list(entry.get("keywords"), f"concepts.{entry['name']}.keywords"),
    )


def _validate_category_dict(entry: dict, known_concepts: Iterable[str]) -> None:
    """Validate a single category mapping from YAML.

    Required fields: id (str), name (str), keywords (mapping with optional
    high/medium/low string lists).
    Optional fields: description, icon, search_queries, concepts, priority.
    """
    missing = REQUIRED_CATEGORY_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    cid = str(entry["id"]).strip()
    if not cid:
        raise ConfigError("Category 'id' must be a non-empty string")
    if cid == RESERVED_CATEGORY_ID:
        raise ConfigError(f"Category id '{cid}' is reserved for the overall section")

    keywords = entry["keywords"]
    if not isinstance(keywords, dict):
        raise ConfigError(f"'keywords' of category '{cid}' must be a mapping of tier to list")
    unknown_tiers = set(keywords) - set(KEYWORD_TIERS)
    if unknown_tiers:
        raise ConfigError(f"Unknown keyword tiers {sorted(unknown_tiers)} in category '{cid}'")

    priority = entry.get("priority", 0)
    if not isinstance(priority, int) or isinstance(priority, bool):
        raise ConfigError(f"'priority' of category '{cid}' must be an integer")

    known = set(known_concepts)
    invalid = [str(c) for c in (entry.get("concepts") or []) if str(c) not in known]
    if invalid:
        raise ConfigError(
            f"Unknown concepts in category '{cid}': "
            + ", ".join(sorted(set(invalid)))
            + f". Allowed: {sorted(known)}"
        )


def _coerce_category(entry: dict) -> CategoryDefinition:
    cid = str(entry["id"]).strip()
    keywords = entry["keywords"]
    return CategoryDefinition(
        id=cid,
        name=str(entry["name"]).strip(),
        keywords=KeywordTiers(
            **{tier: _string_list(keywords.get(tier), f"categories.{cid}.keywords.{tier}") for tier in KEYWORD_TIERS}
        ),
        description=str(entry.get("description") or ""),
        icon=str(entry.get("icon") or ""),
        search_queries=_string_list(entry.get("search_queries"), f"categories.{cid}.search_queries"),
        concepts=_string_list(entry.get("concepts"), f"categories.{cid}.concepts"),
        priority=entry.get("priority", 0),
        gradient=str(entry.get("gradient") or ""),
        border_color=str(entry.get("border_color") or ""),
    )


def build_scoring_config(data: Mapping[str, Any], *, base: ScoringConfig = DEFAULT_CONFIG) -> ScoringConfig:
    """Overlay a parsed YAML mapping onto ``base``.

    Top-level keys that are absent keep the value from ``base``. Unknown
    top-level keys are ignored for forward compatibility.
    """
    changes: Dict[str, Any] = {}

    match_mode = data.get("match_mode")
    if match_mode is not None:
        if match_mode not in MATCH_MODES:
            raise ConfigError(f"Invalid match_mode '{match_mode}'. Must be one of {list(MATCH_MODES)}.")
        changes["match_mode"] = match_mode

    for key in ("positive_keywords", "negative_keywords"):
        if data.get(key) is not None:
            changes[key] = _keyword_table(data[key], key)

    for key in ("emotional_words", "personal_story_cues", "positive_outcome_cues"):
        if data.get(key) is not None:
            changes[key] = _string_list(data[key], key, lower=True)

    concepts = dict(base.concepts)
    if data.get("concepts") is not None:
        raw_concepts = data["concepts"]
        if not isinstance(raw_concepts, list):
            raise ConfigError("'concepts' must be a list in the YAML configuration")
        concepts = {}
        for item in raw_concepts:
            concept = _coerce_concept(item)
            concepts[concept.name] = concept
        changes["concepts"] = concepts

    if data.get("categories") is not None:
        raw_categories = data["categories"]
        if not isinstance(raw_categories, list):
            raise ConfigError("'categories' must be a list in the YAML configuration")
        parsed: List[CategoryDefinition] = []
        seen: set[str] = set()
        for item in raw_categories:
            if not isinstance(item, dict):
                raise ConfigError(f"Each category must be a mapping, got: {type(item)}")
            _validate_category_dict(item, concepts)
            category = _coerce_category(item)
            if category.id in seen:
                raise ConfigError(f"Duplicate category id '{category.id}'")
            seen.add(category.id)
            parsed.append(category)
        # stable: equal priorities keep file order
        parsed.sort(key=lambda c: c.priority)
        changes["categories"] = {c.id: c for c in parsed}

    return base.replace(**changes) if changes else base


def load_scoring_config(path: Path | str, *, base: ScoringConfig = DEFAULT_CONFIG) -> ScoringConfig:
    """Load a ``scoring.yaml`` file into a ``ScoringConfig``.

    YAML structure (every key optional):
      - match_mode: 'substring' | 'word'
      - positive_keywords / negative_keywords: mapping group -> list[string]
      - emotional_words / personal_story_cues / positive_outcome_cues: list[string]
      - concepts: list of {name, meaning, arabic_name?, description?, keywords?}
      - categories: list of {id, name, keywords: {high?, medium?, low?},
        description?, icon?, search_queries?, concepts?, priority?}
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top level of the scoring configuration must be a mapping")
    return build_scoring_config(data, base=base)
