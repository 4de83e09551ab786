"""Tests for src/application/services/scope_verifier.py.

Verifies tenant isolation:
- missing project and non-member are distinct failures
- missing chat and non-participant are distinct failures
- a resource under another parent fails exactly like a missing resource
- resources are checked outermost first and stop at the first miss

Reference:
    - src/application/services/scope_verifier.py
"""

from unittest.mock import AsyncMock

import pytest

from src.application.services.scope_verifier import ScopeVerifier
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import ParentType, ResourceType
from src.domain.errors import ScopeError
from src.domain.value_objects import ResourceRef
from tests.conftest import (
    make_membership,
    make_participation,
    make_principal,
    make_project,
    make_resource,
)


@pytest.fixture
def mock_project_repo() -> AsyncMock:
    """Mock ProjectRepository: project 7 exists, user 1 is a member."""
    repo = AsyncMock()
    repo.find_by_id.return_value = make_project(project_id=7)
    repo.find_membership.return_value = make_membership(project_id=7, user_id=1)
    return repo


@pytest.fixture
def mock_chat_repo() -> AsyncMock:
    """Mock ChatRepository: chat 70 exists, user 1 takes part."""
    repo = AsyncMock()
    repo.exists.return_value = True
    repo.find_participation.return_value = make_participation(chat_id=70, user_id=1)
    return repo


@pytest.fixture
def mock_resource_repo() -> AsyncMock:
    """Mock ResourceRepository."""
    return AsyncMock()


@pytest.fixture
def verifier(mock_project_repo, mock_chat_repo, mock_resource_repo) -> ScopeVerifier:
    """Create ScopeVerifier with mocked dependencies."""
    return ScopeVerifier(
        project_repo=mock_project_repo,
        chat_repo=mock_chat_repo,
        resource_repo=mock_resource_repo,
    )


@pytest.fixture
def principal():
    return make_principal(user_id=1)


def task_ref(task_id: int = 42, project_id: int = 7) -> ResourceRef:
    return ResourceRef(ResourceType.TASK, task_id, ParentType.PROJECT, project_id)


@pytest.mark.unit
class TestVerifyMembership:
    """Project existence and membership."""

    async def test_member(self, verifier, principal, mock_project_repo):
        result = await verifier.verify_membership(7, principal)

        assert isinstance(result, Success)
        assert result.value.project_id == 7
        mock_project_repo.find_membership.assert_awaited_once_with(7, 1)

    async def test_missing_project(self, verifier, principal, mock_project_repo):
        mock_project_repo.find_by_id.return_value = None

        result = await verifier.verify_membership(7, principal)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ScopeError)
        assert result.error.code == ErrorCode.PROJECT_NOT_FOUND
        mock_project_repo.find_membership.assert_not_awaited()

    async def test_not_a_member(self, verifier, principal, mock_project_repo):
        mock_project_repo.find_membership.return_value = None

        result = await verifier.verify_membership(7, principal)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_PROJECT_MEMBER

    async def test_project_role_does_not_matter(
        self, verifier, principal, mock_project_repo
    ):
        """Any membership row passes, whatever its project role."""
        mock_project_repo.find_membership.return_value = make_membership(
            project_id=7, user_id=1, project_role=None
        )

        result = await verifier.verify_membership(7, principal)

        assert isinstance(result, Success)


@pytest.mark.unit
class TestVerifyResource:
    """Resource-in-parent claims."""

    async def test_resource_under_parent(self, verifier, mock_resource_repo):
        mock_resource_repo.find_owner_and_parent.return_value = make_resource(
            ResourceType.TASK, 42, owner_id=3, parent_id=7
        )

        result = await verifier.verify_resource(task_ref())

        assert isinstance(result, Success)
        assert result.value.owner_id == 3
        mock_resource_repo.find_owner_and_parent.assert_awaited_once_with(
            ResourceType.TASK, 42
        )

    async def test_missing_resource(self, verifier, mock_resource_repo):
        mock_resource_repo.find_owner_and_parent.return_value = None

        result = await verifier.verify_resource(task_ref())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND

    async def test_foreign_resource_is_indistinguishable_from_missing(
        self, verifier, mock_resource_repo
    ):
        """Task 42 exists but lives in project 8."""
        mock_resource_repo.find_owner_and_parent.return_value = None
        missing = await verifier.verify_resource(task_ref())

        mock_resource_repo.find_owner_and_parent.return_value = make_resource(
            ResourceType.TASK, 42, owner_id=3, parent_id=8
        )
        foreign = await verifier.verify_resource(task_ref())

        assert isinstance(missing, Failure)
        assert isinstance(foreign, Failure)
        assert foreign.error == missing.error

    async def test_comment_under_other_task(self, verifier, mock_resource_repo):
        mock_resource_repo.find_owner_and_parent.return_value = make_resource(
            ResourceType.COMMENT, 5, owner_id=1, parent_id=43
        )
        ref = ResourceRef(ResourceType.COMMENT, 5, ParentType.TASK, 42)

        result = await verifier.verify_resource(ref)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND

    async def test_chain_stops_at_first_miss(self, verifier, mock_resource_repo):
        mock_resource_repo.find_owner_and_parent.return_value = None
        refs = [task_ref(), ResourceRef(ResourceType.COMMENT, 5, ParentType.TASK, 42)]

        result = await verifier.verify_resources(refs)

        assert isinstance(result, Failure)
        assert mock_resource_repo.find_owner_and_parent.await_count == 1

    async def test_chain_keeps_order(self, verifier, mock_resource_repo):
        task = make_resource(ResourceType.TASK, 42, owner_id=3, parent_id=7)
        comment = make_resource(ResourceType.COMMENT, 5, owner_id=1, parent_id=42)
        mock_resource_repo.find_owner_and_parent.side_effect = [task, comment]
        refs = [task_ref(), ResourceRef(ResourceType.COMMENT, 5, ParentType.TASK, 42)]

        result = await verifier.verify_resources(refs)

        assert isinstance(result, Success)
        assert result.value == (task, comment)

    async def test_parent_kind_mismatch_never_queries(
        self, verifier, mock_resource_repo
    ):
        """A comment claimed under a project is not found, without a lookup."""
        ref = ResourceRef(ResourceType.COMMENT, 5, ParentType.PROJECT, 7)

        result = await verifier.verify_resource(ref)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        mock_resource_repo.find_owner_and_parent.assert_not_awaited()

    async def test_siblings_checked_against_same_project(
        self, verifier, mock_resource_repo
    ):
        """Task in project 7, tag in project 8: the tag is not found."""
        mock_resource_repo.find_owner_and_parent.side_effect = [
            make_resource(ResourceType.TASK, 42, owner_id=3, parent_id=7),
            make_resource(ResourceType.TAG, 80, owner_id=None, parent_id=8),
        ]
        refs = [task_ref(), ResourceRef(ResourceType.TAG, 80, ParentType.PROJECT, 7)]

        result = await verifier.verify_resources(refs)

        assert isinstance(result, Failure)
        assert result.error.details["resource_type"] == "tag"


@pytest.mark.unit
class TestVerifyParticipant:
    """Direct chat existence and participation."""

    async def test_participant(self, verifier, principal, mock_chat_repo):
        result = await verifier.verify_participant(70, principal)

        assert isinstance(result, Success)
        assert result.value.chat_id == 70
        mock_chat_repo.find_participation.assert_awaited_once_with(70, 1)

    async def test_missing_chat(self, verifier, principal, mock_chat_repo):
        mock_chat_repo.exists.return_value = False

        result = await verifier.verify_participant(70, principal)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ScopeError)
        assert result.error.code == ErrorCode.CHAT_NOT_FOUND
        mock_chat_repo.find_participation.assert_not_awaited()

    async def test_not_a_participant(self, verifier, principal, mock_chat_repo):
        mock_chat_repo.find_participation.return_value = None

        result = await verifier.verify_participant(70, principal)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_CHAT_PARTICIPANT

    async def test_message_of_other_chat(self, verifier, mock_resource_repo):
        mock_resource_repo.find_owner_and_parent.return_value = make_resource(
            ResourceType.DIRECT_MESSAGE, 71, owner_id=1, parent_id=99
        )
        ref = ResourceRef(ResourceType.DIRECT_MESSAGE, 71, ParentType.CHAT, 70)

        result = await verifier.verify_resource(ref)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
