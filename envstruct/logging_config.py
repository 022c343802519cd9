"""Logging setup for envstruct entry points. Library modules only call logging.getLogger."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

LOG_NAME = "envstruct"
TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes present on every LogRecord. Anything else is considered an extra field.
DEFAULT_LOG_RECORD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """Formatter returning log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="seconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in DEFAULT_LOG_RECORD_ATTRS
        }
        if extras:
            base["extra"] = extras
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``envstruct`` logger. Safe to call more than once.

    ``level`` falls back to ``ENVSTRUCT_LOG_LEVEL`` (default ``INFO``) and ``fmt``
    to ``ENVSTRUCT_LOG_FORMAT`` (``text`` or ``json``, default ``text``).
    """
    level = (level or os.getenv("ENVSTRUCT_LOG_LEVEL") or "INFO").upper()
    fmt = (fmt or os.getenv("ENVSTRUCT_LOG_FORMAT") or "text").lower()

    logger = logging.getLogger(LOG_NAME)
    logger.setLevel(getattr(logging, level, logging.INFO))

    # Clear existing handlers to avoid duplicates on repeated setup
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter
    if fmt == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
