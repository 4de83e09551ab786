"""Error classes shared by every layer.

Error Types:
- FieldError: One structural problem with one input field
- ValidationError: Input fails structural validation (aggregates all fields)
- InternalError: Anything the taxonomy does not otherwise name

Usage:
    from src.core.errors import FieldError, ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_IDENTIFIER,
        message="Project id must be numeric",
        fields=(FieldError(field="project_id", code="invalid_identifier",
                           message="must be a positive integer"),),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldError:
    """Single field-level validation problem.

    Attributes:
        field: Dotted path of the offending field (e.g. "body.content").
        code: Machine-readable reason (e.g. "string_too_short").
        message: Human-readable explanation.
    """

    field: str
    code: str
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: VALIDATION_FAILED or INVALID_IDENTIFIER.
        message: Human-readable message.
        fields: Every field error found, never just the first.
        details: Additional context.
    """

    fields: tuple[FieldError, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Unexpected failure with no more specific kind.

    Attributes:
        code: INTERNAL_ERROR.
        message: Human-readable message (never shown to clients).
        details: Additional context.
    """

    pass
