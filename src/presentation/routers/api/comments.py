"""Task comment handlers.

Scope chain: project membership, task in project, comment in task.
Editing and deleting follow the ownership rule: the author always passes,
anyone else needs comments:edit_any / comments:delete_any.
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.task_schemas import CommentRatingRequest, CommentRequest


async def list_comments(access: CurrentAccess) -> AccessResponse:
    """GET .../tasks/{task_id}/comments -> 200 OK"""
    return AccessResponse.from_context(access)


async def create_comment(data: CommentRequest, access: CurrentAccess) -> AccessResponse:
    """POST .../tasks/{task_id}/comments -> 201 Created"""
    return AccessResponse.from_context(access)


async def get_comment(access: CurrentAccess) -> AccessResponse:
    """GET .../comments/{comment_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def update_comment(data: CommentRequest, access: CurrentAccess) -> AccessResponse:
    """PUT .../comments/{comment_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_comment(access: CurrentAccess) -> Response:
    """DELETE .../comments/{comment_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def rate_comment(
    data: CommentRatingRequest, access: CurrentAccess
) -> AccessResponse:
    """POST .../comments/{comment_id}/rating -> 200 OK"""
    return AccessResponse.from_context(access)
