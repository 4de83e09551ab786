"""Structured logging port.

Every component that emits diagnostics (permission matrix, access pipeline,
exception handlers) depends on this protocol rather than on structlog.
Calls take a short event name plus key-value context:

    logger.warning("access_denied", request_id=rid, stage="membership")

Credentials never appear in context. The console adapter redacts the usual
suspects (authorization, token, password) as a second line of defence.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Backend-agnostic structured logger."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation.

        Args:
            message: Event name.
            error: Exception that caused the failure. Only its type name is
                recorded; the message text may echo client input.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with ``context`` attached to every event.

        The receiver is left unchanged. Typical use is binding request_id
        and user_id once per request.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for :meth:`bind`."""
        ...
