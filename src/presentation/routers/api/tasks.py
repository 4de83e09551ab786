"""Task resource handlers.

Every route here is nested under /projects/{project_id}/tasks, so the
pipeline verifies membership first and then that the task belongs to the
project (a task of another project is 404, never 403).

Handlers:
    list_tasks, create_task, get_task, update_task, update_task_status,
    delete_task
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.task_schemas import (
    TaskCreateRequest,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)


async def list_tasks(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/tasks -> 200 OK"""
    return AccessResponse.from_context(access)


async def create_task(data: TaskCreateRequest, access: CurrentAccess) -> AccessResponse:
    """POST /api/projects/{project_id}/tasks -> 201 Created"""
    return AccessResponse.from_context(access)


async def get_task(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/tasks/{task_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def update_task(data: TaskUpdateRequest, access: CurrentAccess) -> AccessResponse:
    """PUT /api/projects/{project_id}/tasks/{task_id} -> 200 OK

    The creator may always edit; anyone else needs tasks:edit_any.
    """
    return AccessResponse.from_context(access)


async def update_task_status(
    data: TaskStatusUpdateRequest, access: CurrentAccess
) -> AccessResponse:
    """PATCH /api/projects/{project_id}/tasks/{task_id}/status -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_task(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id}/tasks/{task_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
