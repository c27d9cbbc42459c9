from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


# Defaults resolve at construction time so values loaded from .env apply
@dataclass(slots=True)
class PipelineConfig:
    best_per_category: int = field(default_factory=lambda: _env_int("REFLECTIONS_BEST_PER_CATEGORY", 3))
    max_all: int = field(default_factory=lambda: _env_int("REFLECTIONS_MAX_ALL", 12))
    filter_limit: int = field(default_factory=lambda: _env_int("REFLECTIONS_FILTER_LIMIT", 10))
    scoring_config_path: str = field(default_factory=lambda: os.getenv("REFLECTIONS_SCORING_CONFIG", ""))

    @property
    def has_scoring_config(self) -> bool:
        return bool(self.scoring_config_path.strip())
