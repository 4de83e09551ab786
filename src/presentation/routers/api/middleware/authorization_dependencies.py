"""Access pipeline dependencies.

``require_access`` turns a route's access policy into a FastAPI dependency
that runs the full pipeline before the handler:

    authenticate -> resolve_scope -> membership -> participant
        -> resource_scope -> permission | any_of | all_of | ownership

Routes never wire stages themselves. On failure the dependency raises
RequestRejectedError and the exception handlers decide the status code.
On success the AccessContext is stored on ``request.state.access`` and
returned.

Usage:
    @router.put("/projects/{project_id}/tasks/{task_id}/comments/{comment_id}")
    async def edit_comment(
        access: AccessContext = Depends(
            require_access(
                ownership=OwnershipRule(ResourceType.COMMENT, "comments:edit_any")
            )
        ),
    ):
        ...
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Annotated

from fastapi import Depends, Request

from src.application.errors import RequestRejectedError
from src.application.services import (
    AccessContext,
    AccessPipelineFactory,
    OwnershipRule,
)
from src.core.container import get_access_pipeline_factory
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.scope_resolution import resolve_scope


def require_access(
    *,
    permission: str | None = None,
    any_of: Sequence[str] | None = None,
    all_of: Sequence[str] | None = None,
    ownership: OwnershipRule | None = None,
) -> Callable[..., Awaitable[AccessContext]]:
    """Create a dependency that runs the access pipeline for a route.

    With no arguments the route only requires an authenticated principal
    (plus membership, participant and resource scope for whatever its
    path names).

    Args:
        permission: Single required permission key.
        any_of: Keys of which at least one is required.
        all_of: Keys that are all required.
        ownership: Ownership requirement on a verified resource.

    Returns:
        Dependency returning the verified AccessContext.

    Raises:
        RequestRejectedError: First failing stage's error.
    """

    async def access_checker(
        request: Request,
        factory: Annotated[
            AccessPipelineFactory, Depends(get_access_pipeline_factory)
        ],
    ) -> AccessContext:
        route = request.scope.get("route")
        pipeline = factory.build(
            scope=resolve_scope(request.path_params, getattr(route, "path", None)),
            permission=permission,
            any_of=any_of,
            all_of=all_of,
            ownership=ownership,
        )
        context = AccessContext(
            authorization=request.headers.get("Authorization"),
            request_id=getattr(request.state, "request_id", None),
        )

        match await pipeline.run(context):
            case Success(value=verified):
                request.state.access = verified
                return verified
            case Failure(error=error):
                raise RequestRejectedError(error)

    return access_checker
