"""
Structured Logging — JSON Lines for Scoring Events

One handler on the "powerscore" logger tree. JSON lines carry the
record's own creation time plus whitelisted scoring context
(see EXTRA_FIELDS); the text format is for local development.

Usage:
    from powerscore.logging import get_logger
    logger = get_logger("validator")
    logger.info("Validation complete", extra={"total_score": 72, "calibration": "sales"})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER = "powerscore"

EXTRA_FIELDS = (
    "total_score", "calibration", "word_count", "slop_penalty",
    "slop_deduction", "items", "kind", "error", "error_type",
    "duration_ms", "status_code", "method", "path",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


FORMATTERS = {"json": JSONFormatter, "text": TextFormatter}


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    (Re)configure the powerscore logger tree.

    `level` and `fmt` fall back to POWERSCORE_LOG_LEVEL (INFO) and
    POWERSCORE_LOG_FORMAT (json), read at call time. Unknown formats
    fall back to json. Safe to call repeatedly: the previous handler
    is replaced, never stacked.
    """
    level = (level or os.getenv("POWERSCORE_LOG_LEVEL", "INFO")).upper()
    fmt = (fmt or os.getenv("POWERSCORE_LOG_FORMAT", "json")).lower()

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(FORMATTERS.get(fmt, JSONFormatter)())
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
