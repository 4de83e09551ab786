"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import CredentialError, ScopeError
"""

from src.domain.errors.access_denied_error import AccessDeniedError
from src.domain.errors.credential_error import CredentialError
from src.domain.errors.principal_error import PrincipalError
from src.domain.errors.scope_error import ScopeError
from src.domain.errors.storage_conflict_error import StorageConflictError

__all__ = [
    "AccessDeniedError",
    "CredentialError",
    "PrincipalError",
    "ScopeError",
    "StorageConflictError",
]
