"""Structured Logging - JSON formatter and setup for matching runs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (left_size, strategy, error_code, build counters) surfaced when present
    - JSON format by default, human-readable when log_format is "text"
    - Called without arguments, setup_logging follows HALLMATCH_LOG_LEVEL and
      HALLMATCH_LOG_FORMAT

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is idempotent: calling it twice does not duplicate handlers
"""

import json
import logging
from datetime import datetime, timezone

from hallmatch.config import get_settings

_EXTRA_KEYS = (
    "left_size", "right_size", "strategy", "validator", "error_code",
    "subset", "base0_steps", "base1_steps", "strict_steps", "tight_steps",
    "max_depth", "subsets_probed",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

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
        return json.dumps(log, ensure_ascii=False, default=repr)


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure the hallmatch logger hierarchy. Returns the installed handler.

    level and fmt default to the log_level and log_format settings.
    """
    if level is None or fmt is None:
        settings = get_settings()
        level = level or settings.log_level
        fmt = fmt or settings.log_format
    logger = logging.getLogger("hallmatch")
    for existing in list(logger.handlers):
        if getattr(existing, "_hallmatch_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._hallmatch_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
