# src/termlog/tests/test_config/test_settings.py
import pytest
from pydantic import ValidationError

from termlog.config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("TERMLOG_LOG_COLOR", raising=False)
    settings = Settings()
    assert settings.ENV == "development"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_COLOR is True
    assert settings.LOG_TO_STDOUT is True
    assert settings.LOG_BODY_MAX_BYTES == 65_536


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TERMLOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMLOG_LOG_TO_STDOUT", "0")
    monkeypatch.setenv("TERMLOG_LOG_BODY_MAX_BYTES", "128")
    settings = Settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_TO_STDOUT is False
    assert settings.LOG_BODY_MAX_BYTES == 128


def test_invalid_level_is_rejected(monkeypatch):
    monkeypatch.setenv("TERMLOG_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
    assert get_settings().LOG_COLOR is False  # set by conftest


def test_level_given_as_number():
    assert Settings(LOG_LEVEL=30).LOG_LEVEL == "WARNING"
