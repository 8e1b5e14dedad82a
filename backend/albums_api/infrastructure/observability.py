"""Log Output — one JSON object per line, or plain text when LOG_FORMAT=text.

Invariants:
    - Each JSON line carries timestamp, level, logger and message
    - Only the keys in EXTRA_FIELDS are lifted from `extra=`, and only when set
    - At most one handler from this module is attached to the root logger

Design Decisions:
    - The lifespan calls setup_logging on every startup; the previous handler
      is detached first so lines are not duplicated
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "album_id", "method", "path", "status_code", "duration_ms", "error_code",
)

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    logging.root.addHandler(handler)
    _handler = handler
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
