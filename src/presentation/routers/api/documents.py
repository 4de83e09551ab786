"""Project document, version and task-document link handlers."""

from fastapi import Response, status

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse
from src.schemas.collaboration_schemas import DocumentUploadRequest


async def list_documents(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/documents -> 200 OK"""
    return AccessResponse.from_context(access)


async def upload_document(
    data: DocumentUploadRequest, access: CurrentAccess
) -> AccessResponse:
    """POST /api/projects/{project_id}/documents -> 201 Created"""
    return AccessResponse.from_context(access)


async def get_document(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/documents/{document_id} -> 200 OK

    A document of another project is reported as not found.
    """
    return AccessResponse.from_context(access)


async def delete_document(access: CurrentAccess) -> Response:
    """DELETE /api/projects/{project_id}/documents/{document_id} -> 204"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def upload_document_version(
    data: DocumentUploadRequest, access: CurrentAccess
) -> AccessResponse:
    """POST /api/projects/{project_id}/documents/{document_id}/versions -> 201"""
    return AccessResponse.from_context(access)


async def get_document_version(access: CurrentAccess) -> AccessResponse:
    """GET .../documents/{document_id}/versions/{version_number} -> 200 OK"""
    return AccessResponse.from_context(access)


async def list_task_documents(access: CurrentAccess) -> AccessResponse:
    """GET /api/projects/{project_id}/tasks/{task_id}/documents -> 200 OK"""
    return AccessResponse.from_context(access)


async def link_document_to_task(access: CurrentAccess) -> AccessResponse:
    """POST .../tasks/{task_id}/documents/{document_id} -> 201 Created

    Task and document must both belong to the project in the path.
    """
    return AccessResponse.from_context(access)


async def unlink_document_from_task(access: CurrentAccess) -> Response:
    """DELETE .../tasks/{task_id}/documents/{document_id} -> 204 No Content"""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
