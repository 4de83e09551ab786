"""Principal resolution (authentication gate).

Turns the raw Authorization header into a Principal. Each step is a hard
stop, and the first failure is returned unchanged:

    1. Header present and exactly "Bearer <token>"
       else MISSING_OR_MALFORMED_CREDENTIAL
    2. Signature and expiry verified
       else TOKEN_EXPIRED / TOKEN_INVALID
    3. Subject names an existing user
       else PRINCIPAL_NOT_FOUND

The role on the Principal comes from the user record. Token claims are
never trusted for authorization.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import CredentialError, PrincipalError
from src.domain.protocols import TokenVerificationProtocol, UserRepository
from src.domain.value_objects import Principal

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> Result[str, CredentialError]:
    """Extract the credential from an Authorization header value.

    The scheme is matched case-insensitively. Exactly one space separates
    scheme and token; anything else is malformed.

    Args:
        authorization: Raw header value, None if absent.

    Returns:
        Success(token) or Failure(CredentialError) with
        MISSING_OR_MALFORMED_CREDENTIAL.
    """
    if not authorization:
        return Failure(
            error=CredentialError(
                code=ErrorCode.MISSING_OR_MALFORMED_CREDENTIAL,
                message="Authorization header is missing",
            )
        )

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME or not parts[1]:
        return Failure(
            error=CredentialError(
                code=ErrorCode.MISSING_OR_MALFORMED_CREDENTIAL,
                message="Authorization header must be 'Bearer <token>'",
            )
        )

    return Success(value=parts[1])


class PrincipalResolver:
    """Resolves the authenticated principal for a request.

    Dependencies (injected via constructor):
        - TokenVerificationProtocol: signature and expiry checks
        - UserRepository: user lookup by subject id
    """

    def __init__(
        self,
        token_service: TokenVerificationProtocol,
        user_repo: UserRepository,
    ) -> None:
        """Initialize resolver with dependencies.

        Args:
            token_service: Credential verifier.
            user_repo: Repository for user lookup.
        """
        self._token_service = token_service
        self._user_repo = user_repo

    async def resolve(
        self, authorization: str | None
    ) -> Result[Principal, DomainError]:
        """Authenticate a request.

        Args:
            authorization: Raw Authorization header value, None if absent.

        Returns:
            Success(Principal): Credential valid and user exists.
            Failure(CredentialError | PrincipalError): First failing step.
        """
        token_result = extract_bearer_token(authorization)
        if isinstance(token_result, Failure):
            return token_result

        claims_result = self._token_service.verify(token_result.value)
        if isinstance(claims_result, Failure):
            return claims_result

        user_id = claims_result.value.subject_id
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return Failure(
                error=PrincipalError(
                    code=ErrorCode.PRINCIPAL_NOT_FOUND,
                    message="User for credential not found",
                    details={"user_id": str(user_id)},
                )
            )

        return Success(value=Principal(user_id=user.id, role=user.role))
