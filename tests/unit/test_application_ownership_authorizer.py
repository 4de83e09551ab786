"""Tests for src/application/services/ownership_authorizer.py.

Verifies the self-ownership bypass and the permission-matrix fallback,
including id normalization across int and string representations.

Reference:
    - src/application/services/ownership_authorizer.py
"""

from unittest.mock import MagicMock

import pytest

from src.application.services.ownership_authorizer import (
    OwnershipAuthorizer,
    is_same_user,
    normalize_id,
)
from src.domain.enums import DenialReason, Permission, ResourceType, UserRole
from src.domain.role_permissions import ROLE_PERMISSIONS
from src.infrastructure.authorization.casbin_permission_matrix import (
    CasbinPermissionMatrix,
)
from tests.conftest import make_principal, make_resource


@pytest.fixture(scope="module")
def matrix() -> CasbinPermissionMatrix:
    """Real matrix; the authorizer only reads it."""
    return CasbinPermissionMatrix(logger=MagicMock())


@pytest.fixture
def authorizer(matrix) -> OwnershipAuthorizer:
    """OwnershipAuthorizer bound to the real matrix."""
    return OwnershipAuthorizer(matrix=matrix)


@pytest.mark.unit
class TestNormalizeId:
    """normalize_id / is_same_user."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (7, 7),
            ("7", 7),
            (" 7 ", 7),
            ("007", 7),
            (None, None),
            (True, None),
            ("seven", None),
            ("7.0", None),
            ("-7", None),
            (7.0, None),
            ("٧", None),  # Arabic-Indic digit seven
        ],
    )
    def test_normalize_id(self, value, expected):
        assert normalize_id(value) == expected

    def test_string_and_int_ids_match(self):
        assert is_same_user("7", 7) is True
        assert is_same_user(7, "7") is True

    def test_none_never_matches(self):
        assert is_same_user(None, None) is False
        assert is_same_user(None, 7) is False

    def test_different_ids(self):
        assert is_same_user(7, 9) is False


@pytest.mark.unit
class TestCanEditResource:
    """Scenarios on a comment owned by user 7."""

    def test_owner_bypasses_missing_permission(self, authorizer):
        """Developer lacks comments:edit_any but owns the comment."""
        assert (
            authorizer.can_edit_resource(
                role="developer",
                resource_owner_id=7,
                current_user_id=7,
                any_permission="comments:edit_any",
            )
            is True
        )

    def test_supervisor_cannot_edit_others_comment(self, authorizer):
        assert (
            authorizer.can_edit_resource(
                role="supervisor",
                resource_owner_id=7,
                current_user_id=9,
                any_permission="comments:edit_any",
            )
            is False
        )

    def test_project_manager_can_edit_others_comment(self, authorizer):
        assert (
            authorizer.can_edit_resource(
                role="project_manager",
                resource_owner_id=7,
                current_user_id=9,
                any_permission="comments:edit_any",
            )
            is True
        )

    def test_owner_matches_across_serialization(self, authorizer):
        """A string owner id from storage still matches an int principal id."""
        assert authorizer.can_edit_resource("developer", "7", 7, "comments:edit_any")

    @pytest.mark.parametrize("role", UserRole.values() + ["intern", None])
    @pytest.mark.parametrize("key", ["comments:edit_any", "nope:nope", None])
    def test_self_always_wins(self, authorizer, role, key):
        assert authorizer.can_edit_resource(role, 7, 7, key) is True

    @pytest.mark.parametrize("role", UserRole.values())
    @pytest.mark.parametrize(
        "key",
        [
            Permission.COMMENTS_EDIT_ANY.value,
            Permission.COMMENTS_DELETE_ANY.value,
            Permission.TASKS_EDIT_ANY.value,
        ],
    )
    def test_non_owner_gets_exactly_the_matrix_answer(self, authorizer, role, key):
        assert (
            authorizer.can_edit_resource(role, 7, 9, key)
            is ROLE_PERMISSIONS[role][key]
        )

    def test_owner_only_resource_denies_non_owner(self, authorizer):
        """No any_permission means no fallback, even for admin."""
        assert authorizer.can_edit_resource("admin", 7, 9, None) is False

    def test_ownerless_resource_denies_without_permission(self, authorizer):
        can_edit = authorizer.can_edit_resource
        assert can_edit("developer", None, 9, "tasks:edit_any") is False
        assert can_edit("supervisor", None, 9, "tasks:edit_any") is True

    def test_matrix_not_consulted_for_owner(self):
        matrix = MagicMock()
        authorizer = OwnershipAuthorizer(matrix=matrix)

        assert authorizer.can_edit_resource("developer", 7, 7, "comments:edit_any")
        matrix.has_permission.assert_not_called()


@pytest.mark.unit
class TestAuthorize:
    """Decision objects for verified resources."""

    def test_owner_is_allowed(self, authorizer):
        decision = authorizer.authorize(
            make_principal(user_id=7, role="developer"),
            make_resource(ResourceType.COMMENT, 5, owner_id=7, parent_id=42),
            "comments:edit_any",
        )

        assert decision.allowed is True
        assert decision.reason is None

    def test_non_owner_without_permission_is_denied(self, authorizer):
        decision = authorizer.authorize(
            make_principal(user_id=9, role="supervisor"),
            make_resource(ResourceType.COMMENT, 5, owner_id=7, parent_id=42),
            "comments:edit_any",
        )

        assert decision.allowed is False
        assert decision.reason is DenialReason.NOT_OWNER
