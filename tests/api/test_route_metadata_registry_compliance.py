"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the Route Metadata Registry remains the single source of truth
by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Every protected route runs the access pipeline
   and names its scope parents by their own placeholders
4. Every permission key a policy names exists in the matrix

If these tests fail, it means the registry has drifted from actual implementation.
"""

import pytest
from fastapi import APIRouter
from fastapi.routing import APIRoute

from src.application.services import OwnershipRule
from src.core.config import settings
from src.domain.enums import Permission, ResourceType
from src.presentation.routers import api_router
from src.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY

IGNORED_METHODS = {"HEAD", "OPTIONS"}
SYSTEM_PATHS = {f"{settings.api_prefix}/health"}


def _api_routes() -> list[APIRoute]:
    return [
        route
        for route in api_router.routes
        if isinstance(route, APIRoute) and route.path not in SYSTEM_PATHS
    ]


async def _noop() -> None:
    return None


# =============================================================================
# Test Class 1: Route Completeness
# =============================================================================


@pytest.mark.api
class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_all_routes_are_registered(self):
        """Every FastAPI route must have a registry entry, and vice versa."""
        actual_routes = {
            f"{method} {route.path}"
            for route in _api_routes()
            for method in route.methods
            if method not in IGNORED_METHODS
        }
        expected_routes = {
            f"{entry.method.value} {settings.api_prefix}{entry.path}"
            for entry in ROUTE_REGISTRY
        }

        assert not actual_routes - expected_routes, (
            f"Routes exist in FastAPI but not in ROUTE_REGISTRY: "
            f"{actual_routes - expected_routes}"
        )
        assert not expected_routes - actual_routes, (
            f"Routes exist in ROUTE_REGISTRY but not in FastAPI: "
            f"{expected_routes - actual_routes}"
        )

    def test_no_duplicate_entries(self):
        keys = [(entry.method, entry.path) for entry in ROUTE_REGISTRY]

        assert len(keys) == len(set(keys))

    def test_operation_ids_are_unique(self):
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert all(operation_ids)
        assert len(operation_ids) == len(set(operation_ids))

    def test_all_routes_have_tags(self):
        for entry in ROUTE_REGISTRY:
            assert entry.tags, f"{entry.method.value} {entry.path} has no tags"


# =============================================================================
# Test Class 2: Access Policies
# =============================================================================


@pytest.mark.api
class TestAccessPolicyCompliance:
    """Every registry route is protected by the pipeline."""

    def test_every_registry_route_is_protected(self):
        """Only health (outside the registry) skips the pipeline."""
        for entry in ROUTE_REGISTRY:
            assert entry.access_policy.level is AccessLevel.PROTECTED, (
                f"{entry.method.value} {entry.path} must be PROTECTED"
            )

    def test_protected_routes_have_access_dependency(self):
        for route in _api_routes():
            names = [dep.dependency.__name__ for dep in route.dependencies]
            assert "access_checker" in names, (
                f"{route.path} has no require_access dependency"
            )

    def test_policy_keys_exist_in_matrix(self):
        known = set(Permission.values())
        for entry in ROUTE_REGISTRY:
            unknown = set(entry.access_policy.permission_keys()) - known
            assert not unknown, f"{entry.path} references {unknown}"

    def test_ownership_routes_name_a_nested_resource(self):
        """An ownership rule needs its resource identifier in the path."""
        placeholders = {
            ResourceType.TASK: "{task_id}",
            ResourceType.COMMENT: "{comment_id}",
            ResourceType.DOCUMENT: "{document_id}",
            ResourceType.MESSAGE: "{message_id}",
            ResourceType.DIRECT_MESSAGE: "{message_id}",
            ResourceType.NOTIFICATION: "{notification_id}",
            ResourceType.TAG: "{tag_id}",
        }
        for entry in ROUTE_REGISTRY:
            rule = entry.access_policy.ownership
            if rule is not None:
                assert placeholders[rule.resource_type] in entry.path

    @pytest.mark.parametrize(
        "segment,placeholder",
        [("/projects/", "{project_id}"), ("/chats/", "{chat_id}")],
    )
    def test_scope_parents_use_their_own_placeholder(self, segment, placeholder):
        """Scope resolution reads parents by parameter name only."""
        for entry in ROUTE_REGISTRY:
            assert "{id}" not in entry.path
            if segment + "{" in entry.path:
                assert segment + placeholder in entry.path, entry.path


# =============================================================================
# Test Class 3: Generator
# =============================================================================


@pytest.mark.api
class TestGenerator:
    def test_unknown_permission_key_fails_at_startup(self):
        bad = RouteMetadata(
            method=HTTPMethod.GET,
            path="/broken",
            handler=_noop,
            resource="broken",
            tags=["Broken"],
            summary="Broken",
            operation_id="broken",
            access_policy=AccessPolicy(permission="tasks:teleport"),
        )

        with pytest.raises(ValueError, match="tasks:teleport"):
            register_routes_from_registry(APIRouter(), [bad])

    def test_unknown_ownership_permission_fails_at_startup(self):
        bad = RouteMetadata(
            method=HTTPMethod.PUT,
            path="/projects/{project_id}/tasks/{task_id}",
            handler=_noop,
            resource="tasks",
            tags=["Tasks"],
            summary="Broken",
            operation_id="broken_ownership",
            access_policy=AccessPolicy(
                ownership=OwnershipRule(ResourceType.TASK, "tasks:edit_everything")
            ),
        )

        with pytest.raises(ValueError, match="tasks:edit_everything"):
            register_routes_from_registry(APIRouter(), [bad])

    def test_public_route_has_no_dependencies(self):
        router = APIRouter()
        public = RouteMetadata(
            method=HTTPMethod.GET,
            path="/ping",
            handler=_noop,
            resource="system",
            tags=["System"],
            summary="Ping",
            operation_id="ping",
            access_policy=AccessPolicy(level=AccessLevel.PUBLIC),
        )

        register_routes_from_registry(router, [public])

        (route,) = router.routes
        assert route.dependencies == []

    def test_protected_route_documents_pipeline_errors(self):
        for route in _api_routes():
            assert {400, 401, 403, 404} <= set(route.responses)
