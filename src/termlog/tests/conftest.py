"""
Core pytest configuration for the termlog test suite.

- silences noisy third-party loggers before anything else is imported
- installs the package logging config once per session
- turns ANSI colours off for every test so assertions compare plain text
  (tests that check colours turn them back on explicitly)
- provides a `sink` fixture that records every formatted line
"""

from __future__ import annotations

import logging

# Keep this block before importing termlog / fastapi so collection stays quiet.
NOISY_LOGGERS = (
    "asyncio",
    "httpx",
    "httpcore",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from termlog.config.settings import get_settings
from termlog.core.logging.builder import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Install termlog's logging config for the whole session."""
    setup_logging(get_settings())
    yield


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Disable colours and re-read settings for each test."""
    monkeypatch.setenv("TERMLOG_LOG_COLOR", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class SinkRecorder:
    """Sink that keeps every call's tokens instead of printing them."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, *tokens: str) -> None:
        self.calls.append(tokens)

    def messages(self, title: str | None = None) -> list[list[str]]:
        """Message tokens (everything after timestamp and title), optionally for one title."""
        return [
            list(tokens[2:])
            for tokens in self.calls
            if title is None or tokens[1] == f"{title}:"
        ]


@pytest.fixture
def sink() -> SinkRecorder:
    return SinkRecorder()
