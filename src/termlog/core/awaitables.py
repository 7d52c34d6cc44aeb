# src/termlog/core/awaitables.py
"""
Logging helpers for in-flight asynchronous results.

Free functions take the awaitable explicitly and return a coroutine that
resolves (or raises) exactly like the original:

    user = await log_result(fetch_user(42), loggers.event, "Fetched user")
    await log_error(save(user), loggers.error, "Could not save user")
    await is_attempting_to(connect_db(), "connect to the database")

For call chains on tasks, `install_task_methods()` makes the running loop create
InstrumentedTask objects, which carry the same helpers as methods:

    install_task_methods()
    task = asyncio.ensure_future(connect_db())
    await task.log(loggers.setup, "Database connected").log_error(loggers.error, "No database")

Only the given loop's task factory changes; asyncio.Task and other loops are
left alone.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

from . import loggers
from .formatter import debug_repr

logger = logging.getLogger(__name__)

T = TypeVar("T")
LoggerFn = Callable[[str], Any]


async def log_result(awaitable: Awaitable[T], log: LoggerFn, message: str) -> T:
    """Await `awaitable`, then call `log(message)`; the result is returned unchanged."""
    value = await awaitable
    log(message)
    return value


async def log_error(awaitable: Awaitable[T], log: LoggerFn, message: str) -> T:
    """
    Await `awaitable`; if it raises, call `log` with the message and the error
    and re-raise the same exception.

    Cancellation is not an error here and passes through without logging.
    """
    try:
        return await awaitable
    except Exception as exc:
        log(f"{message}\nError: {debug_repr(exc)}")
        raise


async def is_attempting_to(awaitable: Awaitable[T], action: str) -> T:
    """Report `action` as a Success or Failure depending on how `awaitable` settles."""
    return await log_error(log_result(awaitable, loggers.success, action), loggers.failure, action)


class InstrumentedTask(asyncio.Task):
    """asyncio.Task with chainable logging helpers; each returns a new task."""

    def log(self, log: LoggerFn, message: str) -> "asyncio.Task[Any]":
        return asyncio.ensure_future(log_result(self, log, message))

    def log_error(self, log: LoggerFn, message: str) -> "asyncio.Task[Any]":
        return asyncio.ensure_future(log_error(self, log, message))

    def is_attempting_to(self, action: str) -> "asyncio.Task[Any]":
        return asyncio.ensure_future(is_attempting_to(self, action))


def _instrumented_task_factory(loop: asyncio.AbstractEventLoop, coro, **kwargs) -> InstrumentedTask:
    return InstrumentedTask(coro, loop=loop, **kwargs)


def install_task_methods(loop: asyncio.AbstractEventLoop | None = None) -> bool:
    """
    Make `loop` (default: the running loop) create InstrumentedTask objects.

    Without `loop` it must be called from inside a coroutine (typically the first
    line of `main()`), otherwise asyncio raises RuntimeError. Code that starts
    outside the loop can pass one explicitly:

        loop = asyncio.new_event_loop()
        install_task_methods(loop)
        loop.run_until_complete(main())

    Install it before the tasks that should carry the helpers are created.
    Calling it again just sets the same factory.

    Returns:
        True, once the factory is installed.
    """
    loop = loop or asyncio.get_running_loop()
    loop.set_task_factory(_instrumented_task_factory)
    logger.debug("Instrumented task factory installed on %r", loop)
    return True


__all__ = [
    "log_result",
    "log_error",
    "is_attempting_to",
    "InstrumentedTask",
    "install_task_methods",
]
