"""Fixtures for HTTP tests through the real FastAPI app.

The repository factories are overridden with AsyncMocks backed by an
in-memory dataset, so every pipeline stage runs for real (JWT verification,
Casbin matrix, scope and ownership checks) without a database.

Dataset:
    users: 1 developer, 2 tutor, 3 supervisor, 4 project_manager,
           5 admin, 6 developer (member of project 8 only)
    projects: 7 (members 1-5), 8 (member 6)
    tasks: 42 in project 7 (by 1), 43 in project 8 (by 6)
    comments: 5 on task 42 (by 1)
    messages: 50 in project 7 (by 2)
    tags: 80 in project 7, 81 in project 8
    documents: 90 in project 7
    notifications: 60 for user 1, 61 for user 2
    chats: 70 (participants 1, 2), 72 (participant 6)
    direct messages: 71 in chat 70 (by 1), 73 in chat 72 (by 6)
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.core.container import (
    get_chat_repository,
    get_project_repository,
    get_resource_repository,
    get_token_service,
    get_user_repository,
)
from src.domain.enums import ResourceType
from src.main import app
from tests.conftest import (
    make_membership,
    make_participation,
    make_project,
    make_resource,
    make_user,
)

ROLES = {
    1: "developer",
    2: "tutor",
    3: "supervisor",
    4: "project_manager",
    5: "admin",
    6: "developer",
}


@dataclass
class Dataset:
    """Rows the fake repositories serve."""

    users: dict = field(
        default_factory=lambda: {
            user_id: make_user(user_id, role) for user_id, role in ROLES.items()
        }
    )
    projects: dict = field(
        default_factory=lambda: {7: make_project(7), 8: make_project(8, created_by=6)}
    )
    memberships: dict = field(
        default_factory=lambda: {
            **{(7, user_id): make_membership(7, user_id) for user_id in range(1, 6)},
            (8, 6): make_membership(8, 6),
        }
    )
    chats: dict = field(
        default_factory=lambda: {
            (70, 1): make_participation(70, 1),
            (70, 2): make_participation(70, 2),
            (72, 6): make_participation(72, 6),
        }
    )
    resources: dict = field(
        default_factory=lambda: {
            (ResourceType.TASK, 42): make_resource(ResourceType.TASK, 42, 1, 7),
            (ResourceType.TASK, 43): make_resource(ResourceType.TASK, 43, 6, 8),
            (ResourceType.COMMENT, 5): make_resource(ResourceType.COMMENT, 5, 1, 42),
            (ResourceType.MESSAGE, 50): make_resource(ResourceType.MESSAGE, 50, 2, 7),
            (ResourceType.TAG, 80): make_resource(ResourceType.TAG, 80, None, 7),
            (ResourceType.TAG, 81): make_resource(ResourceType.TAG, 81, None, 8),
            (ResourceType.DOCUMENT, 90): make_resource(
                ResourceType.DOCUMENT, 90, 1, 7
            ),
            (ResourceType.DIRECT_MESSAGE, 71): make_resource(
                ResourceType.DIRECT_MESSAGE, 71, 1, 70
            ),
            (ResourceType.DIRECT_MESSAGE, 73): make_resource(
                ResourceType.DIRECT_MESSAGE, 73, 6, 72
            ),
            (ResourceType.NOTIFICATION, 60): make_resource(
                ResourceType.NOTIFICATION, 60, 1, 1
            ),
            (ResourceType.NOTIFICATION, 61): make_resource(
                ResourceType.NOTIFICATION, 61, 2, 2
            ),
        }
    )


@dataclass
class FakeRepositories:
    """AsyncMock repositories; await counts verify stage ordering."""

    users: AsyncMock
    projects: AsyncMock
    chats: AsyncMock
    resources: AsyncMock
    data: Dataset

    def lookups(self) -> int:
        """Number of membership, participation and resource lookups performed."""
        return (
            self.projects.find_by_id.await_count
            + self.projects.find_membership.await_count
            + self.chats.exists.await_count
            + self.chats.find_participation.await_count
            + self.resources.find_owner_and_parent.await_count
        )


@pytest.fixture
def repos() -> FakeRepositories:
    data = Dataset()

    users = AsyncMock()
    users.find_by_id.side_effect = lambda user_id: data.users.get(user_id)

    projects = AsyncMock()
    projects.find_by_id.side_effect = lambda project_id: data.projects.get(project_id)
    projects.find_membership.side_effect = lambda project_id, user_id: (
        data.memberships.get((project_id, user_id))
    )

    chats = AsyncMock()
    chats.exists.side_effect = lambda chat_id: any(
        key[0] == chat_id for key in data.chats
    )
    chats.find_participation.side_effect = lambda chat_id, user_id: (
        data.chats.get((chat_id, user_id))
    )

    resources = AsyncMock()
    resources.find_owner_and_parent.side_effect = lambda resource_type, resource_id: (
        data.resources.get((resource_type, resource_id))
    )

    return FakeRepositories(
        users=users,
        projects=projects,
        chats=chats,
        resources=resources,
        data=data,
    )


@pytest.fixture
def client(repos) -> Iterator[TestClient]:
    """TestClient with repository factories overridden."""
    app.dependency_overrides[get_user_repository] = lambda: repos.users
    app.dependency_overrides[get_project_repository] = lambda: repos.projects
    app.dependency_overrides[get_chat_repository] = lambda: repos.chats
    app.dependency_overrides[get_resource_repository] = lambda: repos.resources

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()


def auth_headers(user_id: int) -> dict[str, str]:
    """Authorization header with a valid token for user_id."""
    token = get_token_service().generate_access_token(user_id=user_id)
    return {"Authorization": f"Bearer {token}"}
