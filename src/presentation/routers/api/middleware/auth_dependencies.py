"""Dependencies exposing the verified access context to handlers.

Routes generated from the registry run ``require_access`` as a route-level
dependency, which FastAPI resolves before the handler's own parameters.
Handlers then read the result with these helpers instead of re-running any
check:

    async def get_task(access: CurrentAccess) -> AccessResponse:
        task = access.resource(ResourceType.TASK)
"""

from typing import Annotated

from fastapi import Depends, Request

from src.application.errors import RequestRejectedError
from src.application.services import AccessContext
from src.core.enums import ErrorCode
from src.core.errors import InternalError
from src.domain.value_objects import Principal


def get_access_context(request: Request) -> AccessContext:
    """Return the AccessContext stored by the access pipeline.

    Raises:
        RequestRejectedError: INTERNAL_ERROR when the route was registered
            without an access policy (fail closed).
    """
    access = getattr(request.state, "access", None)
    if not isinstance(access, AccessContext) or access.principal is None:
        raise RequestRejectedError(
            InternalError(
                code=ErrorCode.INTERNAL_ERROR,
                message="Handler reached without a verified access context",
            )
        )
    return access


def get_current_principal(
    access: Annotated[AccessContext, Depends(get_access_context)],
) -> Principal:
    """Return the authenticated principal of the request."""
    assert access.principal is not None  # checked by get_access_context
    return access.principal


CurrentAccess = Annotated[AccessContext, Depends(get_access_context)]
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
