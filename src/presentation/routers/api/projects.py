"""Projects resource handlers.

Handler functions for project and project-member endpoints. Routes are
registered via ROUTE_REGISTRY in routes/registry.py, which also declares
the access policy of each one. Handlers run only after the access pipeline
verified the caller; project business logic lives in the project service.

Handlers:
    create_project - Create a project (projects:create)
    list_projects - Projects of the caller (authenticated)
    get_project - Project details (member + projects:view)
    update_project - Edit project (member + projects:edit)
    delete_project - Delete project (member + projects:delete)
    list_members - Project members (member + projects:view)
    add_member - Add member (member + projects:add_members)
    remove_member - Remove member (member + projects:remove_members)
"""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.project_schemas import (
    MemberAddRequest,
    ProjectCreateRequest,
    ProjectUpdateRequest,
)


async def create_project(
    data: ProjectCreateRequest, access: CurrentAccess
) -> AccessResponse:
    """POST /api/projects -> 201 Created"""
    return AccessResponse.from_context(access)


async def list_projects(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_project(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id} -> 200 OK

    Non-members get 403 even though the project exists; a missing project
    is 404.
    """
    return AccessResponse.from_context(access)


async def update_project(
    data: ProjectUpdateRequest, access: CurrentAccess
) -> AccessResponse:
    """PUT /api/projects/{project_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def delete_project(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_members(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/members -> 200 OK"""
    return AccessResponse.from_context(access)


async def add_member(data: MemberAddRequest, access: CurrentAccess) -> AccessResponse:
    """POST /api/projects/{project_id}/members -> 201 Created"""
    return AccessResponse.from_context(access)


async def remove_member(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id}/members/{user_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
