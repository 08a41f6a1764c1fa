"""
Structured Logging

One JSON object per line on stdout. Upstream calls and page failures attach
their context (event, url, status code, book slug) through `extra=`.
"""

import logging
import json
import sys
from datetime import datetime, timezone

# Context keys a record may carry via extra={...}
CONTEXT_FIELDS = ("event", "url", "status_code", "book", "chapter", "duration_ms")

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level_name: str = "INFO") -> None:
    """
    Send every log record to stdout as JSON at the given level ("DEBUG",
    "INFO", ...). The handler is installed once; later calls only change
    the level.
    """
    global _handler
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: '{level_name}'")

    root = logging.getLogger()
    root.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(JSONFormatter())
        root.addHandler(_handler)

    # Connection pool chatter from requests
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
