"""Route generator for the API route registry.

Converts declarative RouteMetadata entries into FastAPI routes at startup.
Protected routes get ``require_access(...)`` as a route-level dependency,
which FastAPI resolves before the handler's own parameters, so a handler
body never runs without a verified AccessContext.

Usage:
    router = APIRouter(prefix=settings.api_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.domain.enums import Permission
from src.presentation.routers.api.errors import ErrorResponse
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_access,
)
from src.presentation.routers.api.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    ErrorSpec,
    RouteMetadata,
)

# Responses every protected route can produce
_PIPELINE_ERRORS = (
    ErrorSpec(status=400, description="Malformed identifier or body"),
    ErrorSpec(status=401, description="Missing, expired or invalid credential"),
    ErrorSpec(status=403, description="Access denied"),
    ErrorSpec(status=404, description="Project or resource not found"),
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: APIRouter to register routes on.
        registry: RouteMetadata entries.

    Raises:
        ValueError: If a policy names an unknown permission key.
    """
    for metadata in registry:
        _check_policy(metadata)

        errors = list(metadata.errors or ())
        if metadata.access_policy.level is AccessLevel.PROTECTED:
            errors = list(_PIPELINE_ERRORS) + errors

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(errors) if errors else None,
            dependencies=_build_dependencies(metadata.access_policy),
        )


def _check_policy(metadata: RouteMetadata) -> None:
    """Fail at startup when a route references a key the matrix lacks."""
    known = set(Permission.values())
    for key in metadata.access_policy.permission_keys():
        if key not in known:
            msg = (
                f"{metadata.method.value} {metadata.path}: "
                f"unknown permission key '{key}'"
            )
            raise ValueError(msg)


def _build_dependencies(policy: AccessPolicy) -> list[Any]:
    """Build FastAPI dependencies from an access policy.

    Policy mapping:
        PUBLIC: No dependencies
        PROTECTED: Depends(require_access(...)) with the policy's requirements
    """
    match policy.level:
        case AccessLevel.PUBLIC:
            return []

        case AccessLevel.PROTECTED:
            return [
                Depends(
                    require_access(
                        permission=policy.permission,
                        any_of=policy.any_of,
                        all_of=policy.all_of,
                        ownership=policy.ownership,
                    )
                )
            ]

        case _:
            # Unknown level - fail closed
            msg = f"Unknown access level: {policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI responses dict (one entry per status)."""
    return {
        error.status: {"description": error.description, "model": ErrorResponse}
        for error in errors
    }
