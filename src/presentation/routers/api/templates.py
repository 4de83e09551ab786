"""Project template handlers."""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.collaboration_schemas import TemplateCreateRequest


async def list_templates(access: CurrentAccess) -> AccessResponse:
    """GET /api/templates -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_template(access: CurrentAccess) -> AccessResponse:
    """GET /api/templates/{template_id} -> 200 OK"""
    return AccessResponse.from_context(access)


async def create_template_from_project(
    data: TemplateCreateRequest, access: CurrentAccess
) -> AccessResponse:
    """POST /api/templates/from-project/{project_id} -> 201 Created

    The caller must be a member of the source project.
    """
    return AccessResponse.from_context(access)


async def create_project_from_template(access: CurrentAccess) -> AccessResponse:
    """POST /api/templates/{template_id}/projects -> 201 Created"""
    return AccessResponse.from_context(access)


async def delete_template(access: CurrentAccess) -> Response:
    """DELETE /api/templates/{template_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
