"""System router for endpoints outside the access pipeline.

Health is intentionally unauthenticated and side-effect free so load
balancers can poll it.
"""

from fastapi import APIRouter

from src.core.config import settings
from src.schemas.access_schemas import HealthResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    return HealthResponse(status="healthy", version=settings.app_version)
