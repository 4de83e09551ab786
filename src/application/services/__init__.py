"""Application services for the access pipeline."""

from src.application.services.access_pipeline import (
    AccessContext,
    AccessPipeline,
    Stage,
)
from src.application.services.access_stages import (
    AccessPipelineFactory,
    OwnershipRule,
    ScopeSource,
)
from src.application.services.ownership_authorizer import OwnershipAuthorizer
from src.application.services.principal_resolver import PrincipalResolver
from src.application.services.scope_verifier import ScopeVerifier

__all__ = [
    "AccessContext",
    "AccessPipeline",
    "AccessPipelineFactory",
    "OwnershipAuthorizer",
    "OwnershipRule",
    "PrincipalResolver",
    "ScopeVerifier",
    "ScopeSource",
    "Stage",
]
