"""Machine-readable error codes for the access pipeline.

Error codes are the tags that discriminate failures. The presentation layer
maps (error type, code) pairs to HTTP status and public code; messages are
for logs only and never part of the contract.

Categories:
- Credential errors (MISSING_OR_MALFORMED_CREDENTIAL, TOKEN_*)
- Principal errors (PRINCIPAL_NOT_FOUND)
- Scope errors (PROJECT_NOT_FOUND, NOT_PROJECT_MEMBER, CHAT_NOT_FOUND,
  NOT_CHAT_PARTICIPANT, RESOURCE_NOT_FOUND)
- Permission errors (PERMISSION_DENIED, NOT_OWNER)
- Validation errors (VALIDATION_FAILED, INVALID_IDENTIFIER)
- Storage conflicts (UNIQUE_VIOLATION, FOREIGN_KEY_VIOLATION)
- Everything else (INTERNAL_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Internal error codes (machine-readable).

    These are NOT the public codes sent to clients; see
    ErrorResponseBuilder for the public mapping.
    """

    # Credential errors
    MISSING_OR_MALFORMED_CREDENTIAL = "missing_or_malformed_credential"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"

    # Principal errors
    PRINCIPAL_NOT_FOUND = "principal_not_found"

    # Scope errors
    PROJECT_NOT_FOUND = "project_not_found"
    NOT_PROJECT_MEMBER = "not_project_member"
    CHAT_NOT_FOUND = "chat_not_found"
    NOT_CHAT_PARTICIPANT = "not_chat_participant"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Permission errors
    PERMISSION_DENIED = "permission_denied"
    NOT_OWNER = "not_owner"

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_IDENTIFIER = "invalid_identifier"

    # Storage conflicts
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"

    # Catch-all
    INTERNAL_ERROR = "internal_error"
