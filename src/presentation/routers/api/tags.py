"""Project tag and task-tag link handlers.

Tags have no owner; changing or deleting one needs tasks:edit_any. Linking a
tag to a task edits the task, so the task creator or tasks:edit_any decides.
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.task_schemas import TagRequest


async def list_tags(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/tags -> 200 OK"""
    return AccessResponse.from_context(access)


async def create_tag(data: TagRequest, access: CurrentAccess) -> AccessResponse:
    """POST /api/projects/{project_id}/tags -> 201 Created"""
    return AccessResponse.from_context(access)


async def update_tag(data: TagRequest, access: CurrentAccess) -> AccessResponse:
    """PUT /api/projects/{project_id}/tags/{tag_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_tag(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id}/tags/{tag_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_task_tags(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/tasks/{task_id}/tags -> 200 OK"""
    return AccessResponse.from_context(access)


async def add_tag_to_task(access: CurrentAccess) -> AccessResponse:
    """POST /api/projects/{project_id}/tasks/{task_id}/tags/{tag_id} -> 201

    Task and tag must both belong to the project in the path.
    """
    return AccessResponse.from_context(access)


async def remove_tag_from_task(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id}/tasks/{task_id}/tags/{tag_id} -> 204"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
