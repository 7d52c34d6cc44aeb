# src/termlog/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig for termlog's own loggers.

Only the "termlog" logger hierarchy is configured; the root logger and any
handlers the host application installed are left alone
(disable_existing_loggers=False, propagate=False on "termlog").
"""

from __future__ import annotations

import logging
import logging.config

from termlog.config.settings import Settings

from .formatters import ColorFormatter
from .handlers import get_console_handler

PACKAGE_LOGGER = "termlog"


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping for the package loggers.

    The returned mapping includes:
      - formatters: "color" (ColorFormatter)
      - handlers: "console"
      - loggers: "termlog" at settings.LOG_LEVEL
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "color": {"()": ColorFormatter},
        },
        "handlers": {
            "console": get_console_handler(settings),
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "handlers": ["console"],
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """Apply make_dict_config(settings). Safe to call more than once."""
    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger(__name__).debug("Logging configured for ENV=%s", settings.ENV)
