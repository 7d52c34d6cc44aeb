# src/termlog/core/middleware.py
"""
HTTP request/response observers for FastAPI / Starlette.

Four pieces, each of which only observes and never changes what the client gets:

  - InboundRequestsMiddleware: one "Incoming Request" line per HTTP request.
  - OutboundResponsesMiddleware: one "Outgoing Response" line per response, with
    the body attached when the status is below 400.
  - ErroredRequestsMiddleware: logs the traceback of an unhandled exception via
    the "Error" logger and re-raises it unchanged.
  - not_found_handler: 404 exception handler that logs the unmatched path and
    then defers to FastAPI's default handler.

Register them all at once:

    app = FastAPI()
    install_http_logging(app)

or individually with `app.add_middleware(...)` / `app.add_exception_handler(404, ...)`.

How the response observer works
-------------------------------
Pure ASGI middleware (not BaseHTTPMiddleware) so the response body can be seen
without buffering the whole response for the client. For every request a new
ResponseObserver wraps the `send` callable:

  1. `http.response.start` -> remember the status code and content type.
  2. `http.response.body`  -> buffer the chunk (up to LOG_BODY_MAX_BYTES).
  3. last body chunk (`more_body` false) -> log once, then stop observing.
     `http.response.pathsend` and a final `http.response.zerocopysend` also end
     the response; they carry no body, so only the status line is logged.

Every message is forwarded to the real `send` as-is. The observer is created per
request, so nothing is shared between concurrent requests.
"""

from __future__ import annotations

import json
import logging
import traceback
from typing import Any

from fastapi.exception_handlers import http_exception_handler
from starlette.applications import Starlette
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from termlog.config.settings import get_settings
from . import loggers
from .formatter import Sink
from .styles import style

logger = logging.getLogger(__name__)


def original_url(request: Request) -> str:
    """Request path plus query string, as the client sent it."""
    url = request.url
    return f"{url.path}?{url.query}" if url.query else url.path


def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def describe_request(request: Request, direction: str) -> str:
    """e.g. "HTTP 1.1 GET /users?page=2 from http://127.0.0.1/" (version/method/url styled)."""
    version = style.cyan(f"HTTP {request.scope.get('http_version', '1.1')}")
    method = style.magenta(request.method)
    url = style.green(original_url(request))
    return f"{version} {method} {url} {direction} http://{client_address(request)}/"


def decode_body(body: bytes, content_type: str | None, truncated: bool = False) -> Any:
    """
    Turn a response body into something readable for the log line.

    JSON bodies become Python values (rendered by the formatter's debug_repr);
    everything else is decoded as UTF-8 text.
    """
    text = body.decode("utf-8", errors="replace")
    if truncated:
        return f"{text}..."
    if content_type and content_type.startswith("application/json"):
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


class InboundRequestsMiddleware:
    def __init__(self, app: ASGIApp, sink: Sink | None = None) -> None:
        self.app = app
        self.sink = sink

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            request = Request(scope)
            loggers.incoming_request(describe_request(request, "from"), sink=self.sink)
        await self.app(scope, receive, send)


class ResponseObserver:
    """
    Wraps one request's ASGI `send` and reports the response exactly once.

    Args:
        request: the request being answered (used for the log line).
        send: the downstream ASGI send callable; every message is forwarded to it.
        sink: optional sink for the "Outgoing Response" logger.
        max_body_bytes: how much of the body to keep for the log line.
    """

    def __init__(self, request: Request, send: Send, sink: Sink | None = None,
                 max_body_bytes: int = 65_536) -> None:
        self.request = request
        self.send = send
        self.sink = sink
        self.max_body_bytes = max_body_bytes
        self.status_code: int | None = None
        self.content_type: str | None = None
        self.body = bytearray()
        self.truncated = False
        self.reported = False

    async def __call__(self, message: Message) -> None:
        if not self.reported:
            self.observe(message)
        await self.send(message)

    def observe(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            self.status_code = message["status"]
            self.content_type = Headers(raw=message.get("headers", [])).get("content-type")
        elif message["type"] == "http.response.body":
            self.buffer(message.get("body", b""))
            if not message.get("more_body", False):
                self.report()
        elif message["type"] == "http.response.pathsend":
            self.report()
        elif message["type"] == "http.response.zerocopysend" and not message.get("more_body", False):
            self.report()

    def buffer(self, chunk: bytes) -> None:
        room = self.max_body_bytes - len(self.body)
        if len(chunk) > room:
            self.truncated = True
            chunk = chunk[:max(room, 0)]
        self.body.extend(chunk)

    def report(self) -> None:
        self.reported = True
        line = f"{describe_request(self.request, 'to')}, status: {self.status_code}"
        if self.status_code is not None and self.status_code < 400 and self.body:
            if self.truncated:
                logger.debug("Response body for %s truncated to %d bytes",
                             original_url(self.request), self.max_body_bytes)
            data = decode_body(bytes(self.body), self.content_type, self.truncated)
            loggers.outgoing_response(f"{line}, data:", data, sink=self.sink)
        else:
            loggers.outgoing_response(line, sink=self.sink)


class OutboundResponsesMiddleware:
    def __init__(self, app: ASGIApp, sink: Sink | None = None,
                 max_body_bytes: int | None = None) -> None:
        self.app = app
        self.sink = sink
        self.max_body_bytes = (
            max_body_bytes if max_body_bytes is not None else get_settings().LOG_BODY_MAX_BYTES
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        observer = ResponseObserver(Request(scope), send, self.sink, self.max_body_bytes)
        await self.app(scope, receive, observer)


class ErroredRequestsMiddleware:
    def __init__(self, app: ASGIApp, sink: Sink | None = None) -> None:
        self.app = app
        self.sink = sink

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await self.app(scope, receive, send)
        except Exception:
            loggers.error(traceback.format_exc().rstrip(), sink=self.sink)
            raise


def make_not_found_handler(sink: Sink | None = None):
    async def not_found_handler(request: Request, exc: HTTPException) -> Response:
        """Log unmatched paths, then answer with FastAPI's usual 404 payload."""
        # Routing sets "endpoint" on a match; a route raising 404 itself is not logged.
        if "endpoint" not in request.scope:
            loggers.not_found(f"Inbound request to {original_url(request)}", sink=sink)
        return await http_exception_handler(request, exc)

    return not_found_handler


not_found_handler = make_not_found_handler()


def install_http_logging(app: Starlette, sink: Sink | None = None) -> Starlette:
    """
    Register all observers on a FastAPI / Starlette app and return the app.

    Must be called before the app starts serving (Starlette refuses new
    middleware once the stack is built). The last middleware added is the
    outermost, so requests are logged before anything else runs.
    """
    app.add_middleware(ErroredRequestsMiddleware, sink=sink)
    app.add_middleware(OutboundResponsesMiddleware, sink=sink)
    app.add_middleware(InboundRequestsMiddleware, sink=sink)
    app.add_exception_handler(404, make_not_found_handler(sink))
    logger.debug("HTTP logging installed on %r", app)
    return app


__all__ = [
    "InboundRequestsMiddleware",
    "OutboundResponsesMiddleware",
    "ErroredRequestsMiddleware",
    "ResponseObserver",
    "not_found_handler",
    "make_not_found_handler",
    "install_http_logging",
    "original_url",
    "client_address",
    "describe_request",
    "decode_body",
]
