"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, error_code, path, resource ids) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control
    - setup_logging called once on startup via lifespan; repeated calls replace
      the handler instead of stacking duplicates
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "user_id", "error_code", "path", "method", "resource_type",
    "resource_id", "job_id", "employee_id", "mutual_id", "message_id",
    "created_count", "skipped_count", "service", "status_code",
    "input_tokens", "output_tokens",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
