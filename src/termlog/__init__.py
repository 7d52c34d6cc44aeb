# src/termlog/
# ├─ config/        # Settings (pydantic-settings), get_settings()
# ├─ core/          # styles, formatter, semantic loggers, HTTP observers, awaitable helpers
# │  └─ logging/    # dictConfig builder + ColorFormatter for the package's own loggers
# ├─ exceptions/    # TermlogError and friends
# └─ validators/    # small settings validators

from importlib import metadata as importlib_metadata

from .core import *  # noqa: F403
from .core import __all__ as _core_all
from .core.loggers import (
    create,
    error,
    event,
    failure,
    incoming_request,
    info,
    not_found,
    outgoing_response,
    setup,
    success,
    verbose,
    warn,
)
from .core.logging import setup_logging

try:
    __version__ = importlib_metadata.version("termlog")
except importlib_metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    *_core_all,
    "create",
    "error",
    "event",
    "failure",
    "incoming_request",
    "info",
    "not_found",
    "outgoing_response",
    "setup",
    "success",
    "verbose",
    "warn",
    "setup_logging",
    "__version__",
]
