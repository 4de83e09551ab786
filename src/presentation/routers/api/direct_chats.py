"""Direct chat handlers.

Chats live outside projects. Every /chats/{chat_id} route verifies that the
caller takes part in the chat before anything else; a message addressed
through another chat is reported as not found. Only the sender may delete
a direct message.
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.collaboration_schemas import DirectChatStartRequest, MessageRequest


async def start_chat(
    data: DirectChatStartRequest, access: CurrentAccess
) -> AccessResponse:
    """POST /api/chats -> 200 OK"""
    return AccessResponse.from_context(access)


async def list_chats(access: CurrentAccess) -> AccessResponse:
    """GET /api/chats -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_chat(access: CurrentAccess) -> AccessResponse:
    """GET /api/chats/{chat_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def list_direct_messages(access: CurrentAccess) -> AccessResponse:
    """GET /api/chats/{chat_id}/messages -> 200 OK"""
    return AccessResponse.from_context(access)


async def send_direct_message(
    data: MessageRequest, access: CurrentAccess
) -> AccessResponse:
    """POST /api/chats/{chat_id}/messages -> 201 Created"""
    return AccessResponse.from_context(access)


async def delete_direct_message(access: CurrentAccess) -> Response:
    """DELETE /api/chats/{chat_id}/messages/{message_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
