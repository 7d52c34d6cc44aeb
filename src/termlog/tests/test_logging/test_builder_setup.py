# src/termlog/tests/test_logging/test_builder_setup.py
import logging
from types import SimpleNamespace

import pytest

from termlog.config.settings import get_settings
from termlog.core.logging.builder import PACKAGE_LOGGER, make_dict_config, setup_logging
from termlog.core.logging.formatters import ColorFormatter
from termlog.core.logging.handlers import get_console_handler


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    # re-bind the console handler to the session stream once capsys is gone
    setup_logging(get_settings())


def make_test_settings(**overrides):
    # Duck-typed settings; only the attributes the builder reads.
    values = {"ENV": "testing", "LOG_LEVEL": "DEBUG", "LOG_TO_STDOUT": True}
    values.update(overrides)
    return SimpleNamespace(**values)


def test_make_dict_config_contains_console_handler():
    cfg = make_dict_config(make_test_settings())
    assert cfg["disable_existing_loggers"] is False
    assert cfg["formatters"]["color"]["()"] is ColorFormatter
    assert cfg["handlers"]["console"]["formatter"] == "color"
    package = cfg["loggers"][PACKAGE_LOGGER]
    assert package["handlers"] == ["console"]
    assert package["level"] == "DEBUG"
    assert package["propagate"] is False


def test_console_handler_stream_follows_settings():
    assert get_console_handler(make_test_settings())["stream"] == "ext://sys.stdout"
    assert get_console_handler(make_test_settings(LOG_TO_STDOUT=False))["stream"] == "ext://sys.stderr"


def test_setup_logging_configures_package_logger():
    setup_logging(make_test_settings(LOG_LEVEL="WARNING"))
    package = logging.getLogger(PACKAGE_LOGGER)
    assert package.level == logging.WARNING
    assert any(isinstance(h.formatter, ColorFormatter) for h in package.handlers)
    # the root logger is left to the host application
    assert not any(isinstance(h.formatter, ColorFormatter) for h in logging.getLogger().handlers)


def test_package_diagnostics_reach_console(capsys):
    setup_logging(make_test_settings())
    logging.getLogger("termlog.core.middleware").debug("installed on %s", "app")
    out = capsys.readouterr().out
    assert "DEBUG" in out
    assert "termlog.core.middleware | installed on app" in out
