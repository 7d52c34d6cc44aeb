# src/termlog/core/formatter.py
"""
The log formatter: turns a title, a LogStyle and one or more message values into
a list of styled tokens and hands them to a sink.

Output shape (one token per element, passed to the sink as separate arguments):

    [gray("10/19/26, 14:03:11 |"), title_style("Info:"), message_style(msg1), ...]

Rules:
  - At least one message is required.
  - If the first message is a string that starts with "<title>: " (case-insensitive),
    that prefix is dropped so `info("Info: started")` does not print the title twice.
  - Strings are emitted as-is; any other value is rendered with `debug_repr`.
  - The message style is applied to each message token independently.

Sinks:
  - console_sink: default; prints the tokens space-separated to stdout (or stderr
    when TERMLOG_LOG_TO_STDOUT=false), like print(*tokens).
  - logging_sink(logger, level): forwards the joined line to a stdlib logger, for
    applications that want semantic log lines to flow through their own handlers.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pprint import pformat
from typing import Any, Callable, Sequence

from termlog.config.settings import get_settings
from .styles import DEFAULT_MESSAGE_STYLE, DEFAULT_TITLE_STYLE, LogStyle, style

Sink = Callable[..., None]

TIMESTAMP_FORMAT = "%x, %X"


def debug_repr(value: Any) -> str:
    """Human-readable representation of an arbitrary value (nested structures included)."""
    return pformat(value)


def console_sink(*tokens: str) -> None:
    stream = sys.stdout if get_settings().LOG_TO_STDOUT else sys.stderr
    print(*tokens, file=stream)


def logging_sink(logger: logging.Logger, level: int = logging.INFO) -> Sink:
    """
    Build a sink that writes each formatted line to `logger` at `level`.

    The tokens are joined with single spaces, matching what console_sink prints.
    """

    def sink(*tokens: str) -> None:
        logger.log(level, " ".join(tokens))

    return sink


def strip_title(title: str, message: Any) -> Any:
    """Drop a leading "<title>: " from a string message, ignoring case."""
    prefix = f"{title.lower()}: "
    if isinstance(message, str) and message.lower().startswith(prefix):
        return message[len(title) + 2:]
    return message


def format_tokens(
    title: str,
    log_style: LogStyle | None,
    messages: Sequence[Any],
    now: datetime | None = None,
) -> list[str]:
    """
    Build the styled tokens for one log line without emitting them.

    Raises:
        TypeError: if `messages` is empty.
    """
    if not messages:
        raise TypeError("log() requires at least one message")

    log_style = log_style or LogStyle()
    title_style = log_style.title or DEFAULT_TITLE_STYLE
    message_style = log_style.message or DEFAULT_MESSAGE_STYLE
    now = now or datetime.now()

    messages = [strip_title(title, messages[0]), *messages[1:]]

    return [
        style.gray(f"{now.strftime(TIMESTAMP_FORMAT)} |"),
        title_style(f"{title}:"),
        *(
            message_style(message if isinstance(message, str) else debug_repr(message))
            for message in messages
        ),
    ]


def log(title: str, log_style: LogStyle | None, sink: Sink | None, *messages: Any) -> None:
    """
    Format `messages` under `title` and write them through `sink`.

    Args:
        title: Title shown after the timestamp, e.g. "Info".
        log_style: Title/message stylers; None means the defaults (gray / white).
        sink: Output callable receiving the tokens as separate arguments;
              None means console_sink.
        *messages: One or more values to log.
    """
    tokens = format_tokens(title, log_style, messages)
    (sink or console_sink)(*tokens)


__all__ = [
    "Sink",
    "debug_repr",
    "console_sink",
    "logging_sink",
    "strip_title",
    "format_tokens",
    "log",
]
