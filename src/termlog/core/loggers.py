# src/termlog/core/loggers.py
"""
Semantic loggers.

SEMANTIC_LOGGERS is a read-only table of name -> (title, LogStyle). `dispatch`
is the single function that turns a name plus messages into a formatter call;
the module-level callables (`info`, `warn`, `error`, ...) are thin
`SemanticLogger` handles that route through it.

    from termlog.core import loggers

    loggers.info("Server listening on", 8000)
    loggers.error(RuntimeError("boom"))
    loggers.important(loggers.setup, "Database ready")
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from termlog.exceptions import UnknownLoggerError
from .formatter import Sink, log
from .styles import LogStyle, style


@dataclass(frozen=True)
class SemanticLoggerEntry:
    name: str
    title: str
    style: LogStyle


def _entry(name: str, heading: str, **styles: Any) -> tuple[str, SemanticLoggerEntry]:
    return name, SemanticLoggerEntry(name=name, title=heading, style=LogStyle(**styles))


SEMANTIC_LOGGERS: Mapping[str, SemanticLoggerEntry] = MappingProxyType(dict([
    # General
    _entry("info", "Info", title=style.white),
    _entry("verbose", "Verbose", title=style.gray.italic, message=style.gray.italic),
    _entry("warn", "Warning", title=style.yellow, message=style.white.italic),
    _entry("error", "Error", title=style.red.bold, message=style.red),
    # Semantic
    _entry("setup", "Setup"),
    _entry("create", "Create", title=style.green),
    _entry("not_found", "Not Found", title=style.red),
    _entry("incoming_request", "Incoming Request", title=style.magenta),
    _entry("outgoing_response", "Outgoing Response", title=style.cyan),
    _entry("success", "Success", title=style.green),
    _entry("failure", "Failure", title=style.red),
    _entry("event", "Event", title=style.blue),
]))


def dispatch(name: str, *messages: Any, sink: Sink | None = None) -> None:
    """Log `messages` with the title and style registered under `name`."""
    try:
        entry = SEMANTIC_LOGGERS[name]
    except KeyError:
        raise UnknownLoggerError(name) from None
    log(entry.title, entry.style, sink, *messages)


class SemanticLogger:
    """Callable handle for one table entry: `SemanticLogger("info")("hello")`."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        if name not in SEMANTIC_LOGGERS:
            raise UnknownLoggerError(name)
        self.name = name

    def __call__(self, *messages: Any, sink: Sink | None = None) -> None:
        dispatch(self.name, *messages, sink=sink)

    def __repr__(self) -> str:
        return f"SemanticLogger({self.name!r})"


def get_logger(name: str) -> SemanticLogger:
    return SemanticLogger(name)


info = SemanticLogger("info")
verbose = SemanticLogger("verbose")
warn = SemanticLogger("warn")
error = SemanticLogger("error")
setup = SemanticLogger("setup")
create = SemanticLogger("create")
not_found = SemanticLogger("not_found")
incoming_request = SemanticLogger("incoming_request")
outgoing_response = SemanticLogger("outgoing_response")
success = SemanticLogger("success")
failure = SemanticLogger("failure")
event = SemanticLogger("event")


def important(logger: Callable[[str], Any], message: str) -> None:
    """Log `message` inside a three-line box drawn with `logger`."""
    border = "-" * (len(message) + 2)
    logger(f"/{border}\\")
    logger(f"| {message} |")
    logger(f"\\{border}/")


__all__ = [
    "SemanticLoggerEntry",
    "SEMANTIC_LOGGERS",
    "SemanticLogger",
    "dispatch",
    "get_logger",
    "important",
    "info",
    "verbose",
    "warn",
    "error",
    "setup",
    "create",
    "not_found",
    "incoming_request",
    "outgoing_response",
    "success",
    "failure",
    "event",
]
