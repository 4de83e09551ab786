"""Token verification protocol for domain layer.

This protocol defines the interface for verifying bearer credentials and,
for fixtures and operational scripts, minting them. Issuance strategy
(login, refresh) is out of this service's scope.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
    - No framework dependencies in domain
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import CredentialError
from src.domain.value_objects import CredentialClaims


class TokenVerificationProtocol(Protocol):
    """Bearer credential verification interface.

    Implementations:
        - JWTService: PyJWT, HS256 with shared secret (production)

    Usage:
        result = token_service.verify(token)
        match result:
            case Success(value=claims):
                user_id = claims.subject_id
            case Failure(error=error):
                # error.code is TOKEN_EXPIRED or TOKEN_INVALID
                ...
    """

    def verify(self, token: str) -> Result[CredentialClaims, CredentialError]:
        """Verify signature and expiry, then extract the subject.

        Args:
            token: Raw credential (without the "Bearer " prefix).

        Returns:
            Success(CredentialClaims) if the credential is valid.
            Failure(CredentialError) with TOKEN_EXPIRED for an expired
            credential, TOKEN_INVALID for every other defect.
        """
        ...

    def generate_access_token(
        self,
        user_id: int,
        email: str | None = None,
        role: str | None = None,
    ) -> str:
        """Mint a signed credential for a user.

        Args:
            user_id: Subject user id.
            email: Optional email claim.
            role: Optional role claim (informational).

        Returns:
            Encoded credential string.
        """
        ...
