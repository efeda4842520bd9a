"""Structured Logging — JSON formatter and setup for CloudWatch-friendly logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (http_method, status_code, post_id, error_kind, operation)
      surfaced when present
    - setup_logging replaces root handlers, so the Lambda runtime's own handler
      does not print every record twice

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once per process (dispatcher factory / FastAPI lifespan)
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "http_method", "status_code", "post_id", "error_kind", "operation",
    "mode", "count",
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


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the process."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
