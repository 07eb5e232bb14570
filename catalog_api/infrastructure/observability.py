"""Catalog Logging — one JSON object per line, keyed by resource and operation.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Catalog context (which resource, which id, which operation, which request)
      is copied from the record's extras only when set
    - LOG_FORMAT=text swaps in a plain single-line format for local runs
    - Calling setup_logging again replaces the catalog handler instead of adding one

Design Decisions:
    - Services pass context through logging's extra= rather than formatting it into
      the message, so log queries can filter on resource/operation directly
"""

import json
import logging
from datetime import datetime, timezone

_CONTEXT_KEYS = (
    "resource", "resource_id", "operation", "error_code", "path", "method",
)
_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """LogRecord → JSON line with catalog context fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in _CONTEXT_KEYS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # ObjectId and other driver values fall back to str()
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    handler.set_name("catalog")
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == "catalog"]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
