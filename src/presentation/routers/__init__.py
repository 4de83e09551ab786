"""HTTP routers.

api_router carries every registry route under ``settings.api_prefix``;
system_router (health) is mounted under the same prefix but never runs the
access pipeline.
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
from src.presentation.routers.system import system_router

api_router = APIRouter(prefix=settings.api_prefix)
register_routes_from_registry(api_router, ROUTE_REGISTRY)
api_router.include_router(system_router)

__all__ = ["api_router", "system_router"]
