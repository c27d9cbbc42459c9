"""Logging and configuration helpers."""

from .config_loader import ConfigError, load_scoring_config
from .logging import configure_logging, get_logger
from .pipeline_config import PipelineConfig

__all__ = [
    "ConfigError",
    "load_scoring_config",
    "configure_logging",
    "get_logger",
    "PipelineConfig",
]
