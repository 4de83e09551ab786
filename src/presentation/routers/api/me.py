"""Handlers about the caller."""

from typing import Annotated

from fastapi import Depends

from src.core.container import get_permission_matrix
from src.domain.protocols import PermissionMatrixProtocol
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.schemas.access_schemas import PermissionsResponse


async def get_my_permissions(
    principal: CurrentPrincipal,
    matrix: Annotated[PermissionMatrixProtocol, Depends(get_permission_matrix)],
) -> PermissionsResponse:
    """GET /api/me/permissions -> 200 OK

    Full permission row of the caller's global role, for clients that
    mirror the matrix in their UI.
    """
    return PermissionsResponse.from_row(
        principal.user_id,
        principal.role,
        matrix.get_role_permissions(principal.role),
    )
