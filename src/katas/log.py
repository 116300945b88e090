"""Logging configuration for the katas package.

Modules log through ``logging.getLogger(__name__)`` and never attach handlers
themselves; applications (or tests) call :func:`setup_logging` once to decide
where records go and how they look.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from .config import Settings

PACKAGE_LOGGER = "katas"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Keys always present: timestamp, level, logger, message, module, function,
    line. Exception details are added under ``exception`` when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_obj, default=str)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Configure the ``katas`` logger hierarchy.

    Replaces any handler previously installed by this function, so calling it
    twice does not duplicate output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON lines instead of human-readable text

    Returns:
        The configured package logger

    Raises:
        ValueError: If ``level`` is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in [h for h in logger.handlers if getattr(h, "_katas_handler", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    handler._katas_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger


def configure_from_settings(settings: Settings) -> logging.Logger:
    """Apply ``Settings.log_level`` / ``Settings.log_json``."""
    return setup_logging(level=settings.log_level, json_format=settings.log_json)


__all__ = ["JSONFormatter", "configure_from_settings", "setup_logging"]
