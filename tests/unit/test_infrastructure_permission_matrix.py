"""Tests for the static role-permission table and its Casbin matrix.

Covers:
- Table completeness (every role has every key)
- Lookups are total and fail-closed (unknown role/key, None, wrong types)
- Quantifier boundaries: has_any([]) is False, has_all([]) is True
- Known role scenarios (tutor vs developer, supervisor vs project_manager)
- The table cannot be mutated after import

Reference:
    - src/domain/role_permissions.py
    - src/infrastructure/authorization/casbin_permission_matrix.py
"""

from unittest.mock import MagicMock

import pytest

from src.domain.enums import Permission, UserRole
from src.domain.role_permissions import ROLE_PERMISSIONS
from src.infrastructure.authorization.casbin_permission_matrix import (
    CasbinPermissionMatrix,
)

ALL_ROLES = UserRole.values()
ALL_KEYS = Permission.values()


@pytest.fixture(scope="module")
def matrix() -> CasbinPermissionMatrix:
    """Matrix compiled from the real table (built once, read-only)."""
    return CasbinPermissionMatrix(logger=MagicMock())


@pytest.mark.unit
class TestRolePermissionTable:
    """Shape of the static table."""

    def test_every_role_has_a_row(self):
        assert set(ROLE_PERMISSIONS) == set(ALL_ROLES)

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_every_row_is_complete(self, role):
        """No key is implied by absence."""
        assert set(ROLE_PERMISSIONS[role]) == set(ALL_KEYS)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS["developer"]["tasks:delete"] = True  # type: ignore[index]
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS["intern"] = {}  # type: ignore[index]

    def test_admin_lacks_advanced_dashboard(self):
        assert ROLE_PERMISSIONS["admin"]["dashboard:advanced"] is False
        assert ROLE_PERMISSIONS["project_manager"]["dashboard:advanced"] is True

    def test_only_admin_manages_system(self):
        for role in ALL_ROLES:
            expected = role == UserRole.ADMIN.value
            assert ROLE_PERMISSIONS[role]["system:manage_users"] is expected
            assert ROLE_PERMISSIONS[role]["system:settings"] is expected


@pytest.mark.unit
class TestHasPermission:
    """Single-key lookups."""

    @pytest.mark.parametrize("role", ALL_ROLES)
    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_matches_table_for_every_pair(self, matrix, role, key):
        """Casbin answer equals the table entry for every (role, key)."""
        assert matrix.has_permission(role, key) is ROLE_PERMISSIONS[role][key]

    def test_tutor_cannot_create_tasks(self, matrix):
        assert matrix.has_permission("tutor", "tasks:create") is False

    def test_developer_can_create_tasks(self, matrix):
        assert matrix.has_permission("developer", "tasks:create") is True

    def test_accepts_enum_members(self, matrix):
        assert matrix.has_permission(UserRole.TUTOR, Permission.COMMENTS_RATE) is True

    @pytest.mark.parametrize(
        "role,key",
        [
            ("intern", "tasks:view"),
            ("developer", "tasks:fly"),
            ("developer", "tasks"),
            ("developer", ":view"),
            ("developer", ""),
            ("", "tasks:view"),
            (None, "tasks:view"),
            ("developer", None),
            (42, "tasks:view"),
            ("DEVELOPER", "tasks:view"),
        ],
    )
    def test_unknown_or_malformed_input_is_denied(self, matrix, role, key):
        assert matrix.has_permission(role, key) is False

    def test_enforcer_error_fails_closed(self):
        logger = MagicMock()
        failing = CasbinPermissionMatrix(logger=logger)
        failing._enforcer = MagicMock()
        failing._enforcer.enforce.side_effect = RuntimeError("engine down")

        assert failing.has_permission("admin", "tasks:view") is False
        logger.error.assert_called_once()
        assert logger.error.call_args.args[0] == "permission_check_error"


@pytest.mark.unit
class TestQuantifiers:
    """has_any / has_all semantics, including empty lists."""

    @pytest.mark.parametrize("role", ALL_ROLES + ["intern"])
    def test_has_any_empty_is_false(self, matrix, role):
        assert matrix.has_any_permission(role, []) is False

    @pytest.mark.parametrize("role", ALL_ROLES + ["intern"])
    def test_has_all_empty_is_true(self, matrix, role):
        assert matrix.has_all_permissions(role, []) is True

    @pytest.mark.parametrize("role", ALL_ROLES + [None])
    def test_none_key_list_counts_as_empty(self, matrix, role):
        assert matrix.has_any_permission(role, None) is False
        assert matrix.has_all_permissions(role, None) is True

    def test_non_iterable_key_list_counts_as_empty(self, matrix):
        assert matrix.has_any_permission("admin", 42) is False

    def test_bare_string_is_one_key(self, matrix):
        assert matrix.has_any_permission("admin", "system:settings") is True
        assert matrix.has_all_permissions("developer", "system:settings") is False

    def test_has_any_one_granted(self, matrix):
        keys = ["dashboard:basic", "dashboard:advanced"]
        assert matrix.has_any_permission("developer", keys) is True
        assert matrix.has_any_permission("admin", keys) is True

    def test_has_any_none_granted(self, matrix):
        assert (
            matrix.has_any_permission("tutor", ["tasks:create", "tasks:delete"])
            is False
        )

    def test_has_all_requires_every_key(self, matrix):
        keys = ["templates:use", "projects:create"]
        assert matrix.has_all_permissions("team_leader", keys) is True
        assert matrix.has_all_permissions("developer", keys) is False

    def test_unknown_key_in_list(self, matrix):
        assert matrix.has_any_permission("admin", ["nope:nope"]) is False
        assert matrix.has_all_permissions("admin", ["tasks:view", "nope:nope"]) is False


@pytest.mark.unit
class TestRoleRows:
    """Row export used by /me/permissions."""

    def test_row_matches_table(self, matrix):
        row = matrix.get_role_permissions("supervisor")
        assert dict(row) == dict(ROLE_PERMISSIONS["supervisor"])

    def test_row_is_read_only(self, matrix):
        row = matrix.get_role_permissions("developer")
        with pytest.raises(TypeError):
            row["tasks:delete"] = True  # type: ignore[index]
        assert matrix.has_permission("developer", "tasks:delete") is False

    @pytest.mark.parametrize("role", ["intern", None, 3])
    def test_unknown_role_row_is_empty(self, matrix, role):
        assert dict(matrix.get_role_permissions(role)) == {}

    def test_roles_and_keys(self, matrix):
        assert set(matrix.roles()) == set(ALL_ROLES)
        assert set(matrix.keys()) == set(ALL_KEYS)


@pytest.mark.unit
class TestCustomTable:
    """Matrix built from an injected table."""

    def test_missing_key_in_row_is_false(self):
        table = {"reviewer": {"tasks:view": True}}
        custom = CasbinPermissionMatrix(logger=MagicMock(), table=table)

        assert custom.has_permission("reviewer", "tasks:view") is True
        assert custom.has_permission("reviewer", "tasks:create") is False

    def test_false_entries_produce_no_policy(self):
        table = {"reviewer": {"tasks:view": False}}
        custom = CasbinPermissionMatrix(logger=MagicMock(), table=table)

        assert custom.has_permission("reviewer", "tasks:view") is False

    def test_logs_initialization(self):
        logger = MagicMock()
        CasbinPermissionMatrix(logger=logger, table={"r": {"a:b": True}})

        logger.info.assert_called_once_with(
            "permission_matrix_initialized", roles=1, policies=1
        )
