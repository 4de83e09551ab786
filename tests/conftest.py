"""Pytest configuration for the access pipeline test suite.

This configuration ensures:
1. Settings load without a real environment (in-memory SQLite, test secret)
2. Async tests are marked automatically
3. Shared builders for principals, users and resources
"""

import inspect
import os

import pytest

# Settings are read at import time of src.core.config; set before any import
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from src.domain.entities import (  # noqa: E402
    ChatParticipation,
    OwnedResource,
    Project,
    ProjectMembership,
    User,
)
from src.domain.enums import ResourceType  # noqa: E402
from src.domain.value_objects import Principal  # noqa: E402


def make_user(user_id: int = 1, role: str = "developer") -> User:
    """Build a User entity for tests."""
    return User(id=user_id, email=f"user{user_id}@example.com", role=role)


def make_principal(user_id: int = 1, role: str = "developer") -> Principal:
    """Build a Principal for tests."""
    return Principal(user_id=user_id, role=role)


def make_project(project_id: int = 7, created_by: int | None = 1) -> Project:
    """Build a Project entity for tests."""
    return Project(id=project_id, name=f"Project {project_id}", created_by=created_by)


def make_membership(
    project_id: int = 7, user_id: int = 1, project_role: str | None = "executor"
) -> ProjectMembership:
    """Build a ProjectMembership for tests."""
    return ProjectMembership(
        project_id=project_id, user_id=user_id, project_role=project_role
    )


def make_participation(chat_id: int = 70, user_id: int = 1) -> ChatParticipation:
    """Build a ChatParticipation for tests."""
    return ChatParticipation(chat_id=chat_id, user_id=user_id)


def make_resource(
    resource_type: ResourceType = ResourceType.TASK,
    resource_id: int = 42,
    owner_id: int | None = 1,
    parent_id: int = 7,
) -> OwnedResource:
    """Build an OwnedResource as returned by the resource repository."""
    return OwnedResource(
        resource_type=resource_type,
        resource_id=resource_id,
        owner_id=owner_id,
        parent_id=parent_id,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
