"""Credential errors for the authentication stage.

Codes:
    MISSING_OR_MALFORMED_CREDENTIAL: No Authorization header, or not
        exactly "Bearer <token>".
    TOKEN_EXPIRED: Signature valid but the credential is past its expiry.
    TOKEN_INVALID: Bad signature, unparseable token, or unusable subject.

Usage:
    from src.domain.errors import CredentialError
    from src.core.enums import ErrorCode

    return Failure(error=CredentialError(
        code=ErrorCode.TOKEN_EXPIRED,
        message="Credential has expired",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialError(DomainError):
    """Bearer credential could not be accepted.

    Attributes:
        code: One of the credential ErrorCodes.
        message: Human-readable message (never includes the token).
        details: Additional context.
    """

    pass
