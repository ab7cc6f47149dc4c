"""Settings tests - defaults and env overrides."""

import pytest
from pydantic import ValidationError

from roster.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.check_email_unique_on_update is False
    assert settings.templates_dir is None
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CHECK_EMAIL_UNIQUE_ON_UPDATE", "true")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.check_email_unique_on_update is True
    assert settings.log_format == "text"


def test_unknown_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
