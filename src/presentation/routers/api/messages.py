"""Project chat handlers.

Only the author of a message may edit or delete it; there is no
"any" permission for chat messages.
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.collaboration_schemas import MessageRequest


async def list_messages(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/chat -> 200 OK"""
    return AccessResponse.from_context(access)


async def send_message(data: MessageRequest, access: CurrentAccess) -> AccessResponse:
    """POST /api/projects/{project_id}/chat -> 201 Created"""
    return AccessResponse.from_context(access)


async def get_message(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/chat/{message_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def update_message(data: MessageRequest, access: CurrentAccess) -> AccessResponse:
    """PUT /api/projects/{project_id}/chat/{message_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_message(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id}/chat/{message_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
