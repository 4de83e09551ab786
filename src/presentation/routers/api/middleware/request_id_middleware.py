"""Request correlation middleware.

Every request gets a fresh UUIDv7. The id is:

- stored in a ContextVar (``get_request_id()`` for code outside handlers)
- stored on ``request.state.request_id`` for dependencies and handlers
- bound into structlog contextvars so every log line carries it
- returned to the client in the ``X-Request-ID`` response header

Client-supplied ids are ignored so a caller cannot forge correlation ids
in server logs. The middleware carries no authorization semantics.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from uuid_extensions import uuid7

from src.core.config import settings

request_id_context: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Return the id of the request being served, None outside a request."""
    return request_id_context.get()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assigns a correlation id to each request."""

    def __init__(self, app: ASGIApp, header_name: str | None = None) -> None:
        super().__init__(app)
        self.header_name = header_name or settings.request_id_header

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Attach a new request id, call the app, echo the id back.

        Args:
            request: Incoming request.
            call_next: Next handler.

        Returns:
            Response with the request id header set.
        """
        request_id = str(uuid7())
        request.state.request_id = request_id
        token = request_id_context.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
            response.headers[self.header_name] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_context.reset(token)
