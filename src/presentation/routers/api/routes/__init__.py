"""API route registry package.

Modules:
    metadata: Core types (RouteMetadata, AccessPolicy, HTTPMethod, ...)
    registry: ROUTE_REGISTRY - list of all route specifications
    generator: register_routes_from_registry() - generate FastAPI routes
"""

from src.presentation.routers.api.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)

__all__ = [
    "AccessLevel",
    "AccessPolicy",
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
]
