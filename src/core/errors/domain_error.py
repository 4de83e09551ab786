"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every failure the access pipeline can
produce. Errors flow through the system as data (Result types), not
exceptions; the presentation layer wraps them in RequestRejectedError only
at the HTTP boundary.

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum). Discriminates the variant.
        message: Human-readable message, for logs only.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
