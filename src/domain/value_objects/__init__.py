"""Domain value objects.

Immutable, per-request values that flow through the access pipeline.
"""

from src.domain.value_objects.authorization_decision import AuthorizationDecision
from src.domain.value_objects.credential_claims import CredentialClaims
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.resolved_scope import ResolvedScope, ResourceRef

__all__ = [
    "AuthorizationDecision",
    "CredentialClaims",
    "Principal",
    "ResolvedScope",
    "ResourceRef",
]
