"""Structured Logging - formatters for the roster.* loggers.

Invariants:
    - Only the "roster" logger tree is configured; uvicorn keeps its own handlers
    - Roster extras (user_id, error_code, path, violations) appear in both formats
    - setup_logging is idempotent: a second call replaces the handler, never stacks one

Design Decisions:
    - Timestamp from record.created, not format time: queued records keep their real time
    - Text format appends extras as key=value so development logs carry the user id too
"""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "roster"
LOG_FIELDS = ("user_id", "error_code", "path", "violations")


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in LOG_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with roster extras appended."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        return f"{line} [{extras}]" if extras else line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Logger:
    """Attach a single stream handler to the roster logger tree."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger
