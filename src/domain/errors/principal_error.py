"""Principal resolution errors."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PrincipalError(DomainError):
    """Credential was valid but names no existing user.

    Attributes:
        code: PRINCIPAL_NOT_FOUND.
        message: Human-readable message.
        details: Additional context.
    """

    pass
