"""User administration handlers (system:manage_users)."""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.collaboration_schemas import UserUpdateRequest


async def list_users(access: CurrentAccess) -> AccessResponse:
    """GET /api/users -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_user(access: CurrentAccess) -> AccessResponse:
    """GET /api/users/{user_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def update_user(data: UserUpdateRequest, access: CurrentAccess) -> AccessResponse:
    """PUT /api/users/{user_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_user(access: CurrentAccess) -> Response:
    """DELETE /api/users/{user_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def get_system_settings(access: CurrentAccess) -> AccessResponse:
    """GET /api/system/settings -> 200 OK"""
    return AccessResponse.from_context(access)
