"""Logging configuration utilities.

The scoring core only ever calls ``get_logger``; hosts (the CLI, or an HTTP
service importing the package) call ``configure_logging`` once at startup.
Settings resolve from arguments first, then ``LOG_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import Literal, Optional

LogOutput = Literal["stdout", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", '
    '"file": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)


@dataclass(slots=True)
class LogSettings:
    level: str | int
    output: str
    file_path: str
    log_format: str


def resolve_log_settings(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
) -> LogSettings:
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if log_format is None:
        log_format = os.environ.get("LOG_FORMAT", "text").lower()
    if output is None:
        output = os.environ.get("LOG_OUTPUT", "stdout").lower()
    if file_path is None:
        file_path = os.environ.get("LOG_FILE_PATH") or "logs/reflections.log"
    return LogSettings(level=level, output=output, file_path=file_path, log_format=log_format)


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
    module: Optional[str] = None,
) -> LogSettings:
    """Configure application logging.

    Parameters
    ----------
    level:
        Logging level as a string (e.g., "INFO") or numeric value.
    output:
        "stdout", "file", or "both". Console records go to stderr so the
        CLI can keep stdout for JSON results.
    file_path:
        Path to the rotating log file if output is "file" or "both".
    log_format:
        "text" or "json".
    module:
        Optional logger name to set the level on as well as the root logger.
    """
    settings = resolve_log_settings(level, output, file_path, log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(_TEXT_FORMAT if settings.log_format == "text" else _JSON_FORMAT)

    if settings.output in ("stdout", "both"):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if settings.output in ("file", "both"):
        log_dir = os.path.dirname(settings.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(settings.file_path, maxBytes=10 * 1024 * 1024, backupCount=5)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if module:
        logging.getLogger(module).setLevel(settings.level)
    return settings


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
