"""Permission errors for the authorization stage."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessDeniedError(DomainError):
    """Principal lacks the permission for the requested operation.

    Attributes:
        code: PERMISSION_DENIED (matrix said no) or NOT_OWNER (neither owner
            nor holder of the "any" permission).
        message: Human-readable message.
        details: Additional context (role, permission).
    """

    pass
