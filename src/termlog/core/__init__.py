from . import loggers
from .styles import LogStyle, Style, style
from .formatter import console_sink, debug_repr, format_tokens, log, logging_sink
from .loggers import SEMANTIC_LOGGERS, SemanticLogger, dispatch, get_logger, important
from .middleware import (
    ErroredRequestsMiddleware,
    InboundRequestsMiddleware,
    OutboundResponsesMiddleware,
    install_http_logging,
    not_found_handler,
)
from .awaitables import InstrumentedTask, install_task_methods, is_attempting_to, log_error, log_result

__all__ = [
    "loggers",
    "LogStyle",
    "Style",
    "style",
    "console_sink",
    "debug_repr",
    "format_tokens",
    "log",
    "logging_sink",
    "SEMANTIC_LOGGERS",
    "SemanticLogger",
    "dispatch",
    "get_logger",
    "important",
    "ErroredRequestsMiddleware",
    "InboundRequestsMiddleware",
    "OutboundResponsesMiddleware",
    "install_http_logging",
    "not_found_handler",
    "InstrumentedTask",
    "install_task_methods",
    "is_attempting_to",
    "log_error",
    "log_result",
]
