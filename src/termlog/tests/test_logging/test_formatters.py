# src/termlog/tests/test_logging/test_formatters.py
import logging
import sys

from termlog.config.settings import get_settings
from termlog.core.logging.formatters import ColorFormatter
from termlog.core.styles import style


def make_record(level=logging.WARNING, exc_info=None):
    return logging.LogRecord("termlog.test", level, __file__, 10, "hello %s", ("world",), exc_info)


def test_color_formatter_plain_layout():
    out = ColorFormatter().format(make_record())
    timestamp, rest = out.split(" | ", 1)
    assert timestamp
    assert rest == "WARNING  | termlog.test | hello world"


def test_color_formatter_colours_level(monkeypatch):
    monkeypatch.setenv("TERMLOG_LOG_COLOR", "true")
    get_settings.cache_clear()
    out = ColorFormatter().format(make_record(logging.ERROR))
    assert style.red("ERROR   ") in out


def test_color_formatter_includes_traceback():
    try:
        raise ValueError("bad value")
    except ValueError:
        record = make_record(logging.ERROR, exc_info=sys.exc_info())
    out = ColorFormatter().format(record)
    assert out.splitlines()[1] == "Traceback (most recent call last):"
    assert out.endswith("ValueError: bad value")
