"""Unit tests for structlog configuration."""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from argcheck.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    root_level = logging.getLogger().level
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


def test_json_format_renders_json(caplog: pytest.LogCaptureFixture) -> None:
    """JSON format emits one JSON object per event through stdlib logging."""
    configure_logging(level="INFO", fmt="json")
    structlog.get_logger("argcheck.test").info("argument_check_failed", check="not_null")
    messages = [r.getMessage() for r in caplog.records if r.name == "argcheck.test"]
    assert len(messages) == 1
    data = json.loads(messages[0])
    assert data["event"] == "argument_check_failed"
    assert data["check"] == "not_null"
    assert data["level"] == "info"
    assert data["logger"] == "argcheck.test"
    assert "timestamp" in data


def test_level_filters_lower_events(caplog: pytest.LogCaptureFixture) -> None:
    """Events below the configured level are dropped."""
    configure_logging(level="WARNING", fmt="json")
    structlog.get_logger("argcheck.test").info("hidden_event")
    assert "hidden_event" not in caplog.text


def test_console_format_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without overrides the settings decide level and format."""
    monkeypatch.setenv("LOG_LOG_FORMAT", "console")
    monkeypatch.setenv("LOG_LOG_LEVEL", "debug")
    configure_logging()
    assert structlog.is_configured()
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_raises() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(level="LOUD")
