"""Authorization dependency factories.

The permission matrix is an app-scoped singleton built once (eagerly in
the FastAPI lifespan, or on first use) and never mutated. The pipeline
services are request-scoped because they share the request's repositories.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.infrastructure import get_logger, get_token_service
from src.core.container.repositories import (
    get_chat_repository,
    get_project_repository,
    get_resource_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.services import (
        AccessPipelineFactory,
        OwnershipAuthorizer,
        PrincipalResolver,
        ScopeVerifier,
    )
    from src.domain.protocols import (
        ChatRepository,
        PermissionMatrixProtocol,
        ProjectRepository,
        ResourceRepository,
        TokenVerificationProtocol,
        UserRepository,
    )


# ============================================================================
# Permission Matrix (App-Scoped)
# ============================================================================


@lru_cache()
def get_permission_matrix() -> "PermissionMatrixProtocol":
    """Get the permission matrix singleton (app-scoped).

    Compiles the static role-permission table into a Casbin enforcer.

    Returns:
        CasbinPermissionMatrix implementing PermissionMatrixProtocol.
    """
    from src.infrastructure.authorization.casbin_permission_matrix import (
        CasbinPermissionMatrix,
    )

    return CasbinPermissionMatrix(logger=get_logger())


# ============================================================================
# Pipeline Services (Request-Scoped)
# ============================================================================


async def get_principal_resolver(
    user_repo: "UserRepository" = Depends(get_user_repository),
    token_service: "TokenVerificationProtocol" = Depends(get_token_service),
) -> "PrincipalResolver":
    """Get principal resolver (request-scoped).

    Args:
        user_repo: Request-scoped user repository.
        token_service: App-scoped credential verifier.

    Returns:
        PrincipalResolver instance.
    """
    from src.application.services import PrincipalResolver

    return PrincipalResolver(token_service=token_service, user_repo=user_repo)


async def get_scope_verifier(
    project_repo: "ProjectRepository" = Depends(get_project_repository),
    chat_repo: "ChatRepository" = Depends(get_chat_repository),
    resource_repo: "ResourceRepository" = Depends(get_resource_repository),
) -> "ScopeVerifier":
    """Get scope verifier (request-scoped).

    Args:
        project_repo: Request-scoped project repository.
        chat_repo: Request-scoped direct chat repository.
        resource_repo: Request-scoped resource repository.

    Returns:
        ScopeVerifier instance.
    """
    from src.application.services import ScopeVerifier

    return ScopeVerifier(
        project_repo=project_repo, chat_repo=chat_repo, resource_repo=resource_repo
    )


def get_ownership_authorizer(
    matrix: "PermissionMatrixProtocol" = Depends(get_permission_matrix),
) -> "OwnershipAuthorizer":
    """Get ownership authorizer bound to the app-scoped matrix.

    Returns:
        OwnershipAuthorizer instance.
    """
    from src.application.services import OwnershipAuthorizer

    return OwnershipAuthorizer(matrix=matrix)


async def get_access_pipeline_factory(
    resolver: "PrincipalResolver" = Depends(get_principal_resolver),
    verifier: "ScopeVerifier" = Depends(get_scope_verifier),
    authorizer: "OwnershipAuthorizer" = Depends(get_ownership_authorizer),
    matrix: "PermissionMatrixProtocol" = Depends(get_permission_matrix),
) -> "AccessPipelineFactory":
    """Get the access pipeline factory (request-scoped).

    Returns:
        AccessPipelineFactory wired with the request's services.
    """
    from src.application.services import AccessPipelineFactory

    return AccessPipelineFactory(
        resolver=resolver,
        verifier=verifier,
        authorizer=authorizer,
        matrix=matrix,
        logger=get_logger(),
    )
