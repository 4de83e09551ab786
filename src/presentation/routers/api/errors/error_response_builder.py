"""Error taxonomy normalizer.

Maps every DomainError to an HTTP status, a stable public code and a fixed
public message. Discrimination is by error type plus ErrorCode tag, never by
message text, and internal messages never reach the client.

Failure kind -> status, code:

    missing or malformed credential   401 missing_or_malformed_credential
    expired credential                401 token_expired
    invalid or unparseable credential 401 invalid_token
    principal not found               401 principal_not_found
    not a member or participant,
    denied, not owner                 403 access_denied
    project, chat or resource missing 404 not_found
    validation, invalid identifier    400 validation_error
    unique-constraint conflict        409 unique_violation
    foreign-key conflict              400 foreign_key_violation
    anything else                     500 internal_server_error

Exports:
    NormalizedError: Status, code, message, details and headers
    ErrorResponseBuilder: DomainError -> JSONResponse
"""

from dataclasses import dataclass, field

from fastapi import status
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.domain.errors import (
    AccessDeniedError,
    CredentialError,
    PrincipalError,
    ScopeError,
    StorageConflictError,
)
from src.presentation.routers.api.errors.error_response import (
    ErrorDetail,
    ErrorResponse,
)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class NormalizedError:
    """Public view of a failure.

    Attributes:
        status: HTTP status code.
        code: Stable public code.
        message: Fixed public message for the kind.
        details: Field errors (validation only).
        headers: Extra response headers (WWW-Authenticate on 401).
    """

    status: int
    code: str
    message: str
    details: tuple[ErrorDetail, ...] = ()
    headers: dict[str, str] = field(default_factory=dict)

    def to_response(self) -> ErrorResponse:
        """Body model for this error."""
        return ErrorResponse(
            error=self.message,
            code=self.code,
            details=list(self.details) or None,
        )


def _unauthorized(code: str, message: str) -> NormalizedError:
    return NormalizedError(
        status=status.HTTP_401_UNAUTHORIZED,
        code=code,
        message=message,
        headers=dict(_BEARER_CHALLENGE),
    )


ACCESS_DENIED = NormalizedError(
    status=status.HTTP_403_FORBIDDEN,
    code="access_denied",
    message="Access denied",
)
NOT_FOUND = NormalizedError(
    status=status.HTTP_404_NOT_FOUND,
    code="not_found",
    message="Resource not found",
)
INTERNAL_SERVER_ERROR = NormalizedError(
    status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    code="internal_server_error",
    message="Internal server error",
)


def validation_failed(details: tuple[ErrorDetail, ...]) -> NormalizedError:
    """400 validation_error carrying every field error."""
    return NormalizedError(
        status=status.HTTP_400_BAD_REQUEST,
        code="validation_error",
        message="Validation failed",
        details=details,
    )


def normalize(error: DomainError) -> NormalizedError:
    """Map a domain error to its public status and code.

    Args:
        error: Any DomainError produced by a stage, handler or repository.

    Returns:
        NormalizedError. Unknown kinds map to 500.
    """
    match error:
        case CredentialError(code=ErrorCode.MISSING_OR_MALFORMED_CREDENTIAL):
            return _unauthorized(
                "missing_or_malformed_credential",
                "Missing or malformed bearer credential",
            )
        case CredentialError(code=ErrorCode.TOKEN_EXPIRED):
            return _unauthorized("token_expired", "Credential has expired")
        case CredentialError():
            return _unauthorized("invalid_token", "Invalid credential")
        case PrincipalError():
            return _unauthorized("principal_not_found", "Principal not found")
        case ScopeError(
            code=ErrorCode.NOT_PROJECT_MEMBER | ErrorCode.NOT_CHAT_PARTICIPANT
        ):
            return ACCESS_DENIED
        case ScopeError():
            return NOT_FOUND
        case AccessDeniedError():
            return ACCESS_DENIED
        case ValidationError(fields=fields):
            return validation_failed(
                tuple(
                    ErrorDetail(field=f.field, code=f.code, message=f.message)
                    for f in fields
                )
            )
        case StorageConflictError(code=ErrorCode.UNIQUE_VIOLATION):
            return NormalizedError(
                status=status.HTTP_409_CONFLICT,
                code="unique_violation",
                message="Resource already exists",
            )
        case StorageConflictError(code=ErrorCode.FOREIGN_KEY_VIOLATION):
            return NormalizedError(
                status=status.HTTP_400_BAD_REQUEST,
                code="foreign_key_violation",
                message="Referenced resource does not exist",
            )
        case _:
            return INTERNAL_SERVER_ERROR


class ErrorResponseBuilder:
    """Build JSON error responses from normalized errors.

    Example:
        >>> response = ErrorResponseBuilder.build(
        ...     normalize(error), request_id="0190a4c2-..."
        ... )
    """

    @staticmethod
    def build(
        normalized: NormalizedError,
        request_id: str | None = None,
        header_name: str = "X-Request-ID",
    ) -> JSONResponse:
        """Render a NormalizedError.

        Args:
            normalized: Status, code and body content.
            request_id: Correlation id echoed in ``header_name`` when given.
            header_name: Name of the request id header.

        Returns:
            JSONResponse with the error body and headers.
        """
        headers = dict(normalized.headers)
        if request_id:
            headers[header_name] = request_id
        return JSONResponse(
            status_code=normalized.status,
            content=normalized.to_response().model_dump(exclude_none=True),
            headers=headers,
        )
