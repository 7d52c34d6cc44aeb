# src/termlog/core/logging/formatters.py

"""
Formatter for termlog's own diagnostic records (stdlib `logging`).

The semantic loggers in `termlog.core.loggers` write straight to a sink. This
formatter is for everything else the package reports through
`logging.getLogger(__name__)` (middleware installation, body truncation, task
factory installation), and for host applications that want their records to
look like the semantic log lines.

Line shape, mirroring the semantic formatter:

    10/19/26, 14:03:11 | WARNING  | termlog.core.middleware | message

The level name is coloured with the same stylers the semantic table uses, so
colours also switch off with TERMLOG_LOG_COLOR=false.
"""

import logging
from logging import LogRecord

from ..formatter import TIMESTAMP_FORMAT
from ..styles import style


class ColorFormatter(logging.Formatter):
    """
    Human-friendly coloured formatter for console handlers.

    Construction:
      - fmt: accepted for dictConfig compatibility; the line layout is fixed.
      - datefmt: optional date format; defaults to the semantic formatter's
        local date-time format.
    """

    LEVEL_STYLES = {
        "DEBUG": style.gray.italic,
        "INFO": style.white,
        "WARNING": style.yellow,
        "ERROR": style.red,
        "CRITICAL": style.red.bold,
    }

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt or TIMESTAMP_FORMAT)

    def format(self, record: LogRecord) -> str:
        level_style = self.LEVEL_STYLES.get(record.levelname, style)
        timestamp = self.formatTime(record, self.datefmt)

        # Pad before styling so the escape codes do not count towards the width.
        base = (
            f"{style.gray(timestamp + ' |')} "
            f"{level_style(f'{record.levelname:<8}')} | "
            f"{record.name} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base
