"""Dashboard handlers.

Basic dashboards are available to every role with dashboard:basic; the
advanced dashboard needs dashboard:advanced.
"""

from src.presentation.routers.api.middleware.auth_dependencies import CurrentAccess
from src.schemas.access_schemas import AccessResponse


async def get_overall_dashboard(access: CurrentAccess) -> AccessResponse:
    """GET /api/dashboard/overall -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_project_statistics(access: CurrentAccess) -> AccessResponse:
    """GET /api/dashboard/projects/{project_id}/statistics -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_advanced_metrics(access: CurrentAccess) -> AccessResponse:
    """GET /api/advanced-dashboard/metrics -> 200 OK"""
    return AccessResponse.from_context(access)


async def get_project_analytics(access: CurrentAccess) -> AccessResponse:
    """GET /api/advanced-dashboard/projects/{project_id}/analytics -> 200 OK"""
    return AccessResponse.from_context(access)
