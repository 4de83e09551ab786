"""Notification handlers.

Notifications are scoped to their recipient: the scope stage asserts the
caller as parent, so someone else's notification is 404.
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse


async def list_notifications(access: CurrentAccess) -> AccessResponse:
    """GET /api/notifications -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_notification(access: CurrentAccess) -> AccessResponse:
    """GET /api/notifications/{notification_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def mark_notification_read(access: CurrentAccess) -> AccessResponse:
    """PUT /api/notifications/{notification_id}/read -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_notification(access: CurrentAccess) -> Response:
    """DELETE /api/notifications/{notification_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
