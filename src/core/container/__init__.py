"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_permission_matrix, ...

The container is organized into modules by concern:
- infrastructure: Core services (db, logging, token verification)
- repositories: Repository factories
- authorization: Permission matrix and access pipeline services
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_chat_repository,
    get_project_repository,
    get_resource_repository,
    get_user_repository,
)

# Authorization
from src.core.container.authorization import (
    get_access_pipeline_factory,
    get_ownership_authorizer,
    get_permission_matrix,
    get_principal_resolver,
    get_scope_verifier,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_token_service",
    # Repositories
    "get_chat_repository",
    "get_project_repository",
    "get_resource_repository",
    "get_user_repository",
    # Authorization
    "get_access_pipeline_factory",
    "get_ownership_authorizer",
    "get_permission_matrix",
    "get_principal_resolver",
    "get_scope_verifier",
]
