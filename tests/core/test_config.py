"""Unit tests for src/core/config.py"""

import logging

import pytest
from pydantic import ValidationError

from src.core.config import Settings, configure_logging


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings.database_url == "sqlite:///checkers.db"
    assert settings.log_level == "INFO"


def test_from_environment() -> None:
    settings = Settings.from_env(
        {
            "CHECKERS_DATABASE_URL": "sqlite:///:memory:",
            "CHECKERS_LOG_LEVEL": "debug",
            "UNRELATED": "ignored",
        }
    )
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.log_level == "DEBUG"


def test_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(Settings(log_level="WARNING"))

    assert len(calls) == 1
    assert calls[0]["level"] == "WARNING"
