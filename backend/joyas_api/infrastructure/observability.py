"""Structured Logging — JSON or text output for the request and query logs.

Invariants:
    - Records carry timestamp (from record creation), level, logger and message
    - Request extras (method, path, query) and error extras (error_code,
      status_code) are emitted only when set on the record
    - setup_logging is idempotent: re-running the lifespan replaces the
      handler instead of stacking a second one

Design Decisions:
    - Stdlib logging with a small JSON formatter, no logging dependency
    - uvicorn's access log is raised to WARNING: RequestLoggingMiddleware
      already writes one line per request
"""

import logging
import json
from datetime import datetime, timezone

HANDLER_NAME = "joyas_api"
REQUEST_FIELDS = ("method", "path", "query")
ERROR_FIELDS = ("error_code", "status_code")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in REQUEST_FIELDS + ERROR_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root handler."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return handler
