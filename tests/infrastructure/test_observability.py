"""Structured Logging tests - roster extras in both formats, idempotent setup."""

import json
import logging

import pytest

from roster.infrastructure.observability import (
    LOGGER_NAME, JSONFormatter, TextFormatter, setup_logging,
)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "roster.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_roster_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_json_formatter_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "roster.test"
    assert out["message"] == "hello"


def test_json_timestamp_comes_from_record_creation():
    record = _record()
    record.created = 0.0
    out = json.loads(JSONFormatter().format(record))
    assert out["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_json_formatter_surfaces_roster_extras_only():
    record = _record(user_id=3, violations=["Age must be between 18 and 200."], other="x")
    out = json.loads(JSONFormatter().format(record))
    assert out["user_id"] == 3
    assert out["violations"] == ["Age must be between 18 and 200."]
    assert "other" not in out


def test_text_formatter_appends_extras():
    line = TextFormatter().format(_record("Created user 3", user_id=3))
    assert line.endswith("Created user 3 [user_id=3]")


def test_text_formatter_without_extras_has_no_brackets():
    assert not TextFormatter().format(_record()).endswith("]")


def test_setup_logging_is_idempotent(restore_roster_logger):
    setup_logging("DEBUG", "text")
    logger = setup_logging("WARNING", "json")
    assert logger is restore_roster_logger
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)
    assert logger.level == logging.WARNING
    assert logger.propagate is False
