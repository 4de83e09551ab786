"""JWT token service (adapter).

This service implements the TokenVerificationProtocol using PyJWT with
HMAC-SHA256 and a shared secret.

Architecture:
    - Implements TokenVerificationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Verification outcomes:
    - Expired signature           -> TOKEN_EXPIRED
    - Any other decode failure    -> TOKEN_INVALID
    - "sub" missing or not an int -> TOKEN_INVALID

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - "exp" and "sub" claims required
    - Unique JWT ID (jti) on every minted token
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import CredentialError
from src.domain.value_objects import CredentialClaims


def _parse_subject(sub: Any) -> int | None:
    """Parse the "sub" claim into a positive user id, None if unusable."""
    if isinstance(sub, bool):
        return None
    if isinstance(sub, int):
        return sub if sub > 0 else None
    if isinstance(sub, str) and sub.isascii() and sub.isdigit():
        value = int(sub)
        return value if value > 0 else None
    return None


class JWTService:
    """JWT access token verification (and minting) service.

    Usage:
        # Via dependency injection
        from src.core.container import get_token_service

        token_service = get_token_service()

        result = token_service.verify(token)
        match result:
            case Success(value=claims):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 1440,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            expiration_minutes: Token lifetime in minutes (default: 24h).
            algorithm: Signing algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key.encode()) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    def generate_access_token(
        self,
        user_id: int,
        email: str | None = None,
        role: str | None = None,
    ) -> str:
        """Generate JWT access token.

        Args:
            user_id: User's unique identifier.
            email: Optional email claim.
            role: Optional role claim (informational only).

        Returns:
            JWT access token string.
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload: dict[str, Any] = {
            "sub": str(user_id),  # Subject (user ID); RFC 7519 wants a string
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        if email is not None:
            payload["email"] = email
        if role is not None:
            payload["role"] = role

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def verify(self, token: str) -> Result[CredentialClaims, CredentialError]:
        """Verify signature and expiry, then extract claims.

        Args:
            token: Raw credential string.

        Returns:
            Success(CredentialClaims) if valid.
            Failure(CredentialError) with TOKEN_EXPIRED or TOKEN_INVALID.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=CredentialError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Credential has expired",
                )
            )
        except InvalidTokenError:
            # Bad signature, malformed, wrong algorithm, missing claims
            return Failure(
                error=CredentialError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Credential could not be verified",
                )
            )

        subject_id = _parse_subject(payload.get("sub"))
        if subject_id is None:
            return Failure(
                error=CredentialError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Credential subject is not a valid user id",
                )
            )

        return Success(
            value=CredentialClaims(
                subject_id=subject_id,
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        )
