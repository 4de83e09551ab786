"""Storage constraint conflicts surfaced by the persistence layer."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageConflictError(DomainError):
    """Write rejected by a database constraint.

    Attributes:
        code: UNIQUE_VIOLATION or FOREIGN_KEY_VIOLATION.
        message: Human-readable message.
        details: Additional context (constraint name when known).
    """

    pass
