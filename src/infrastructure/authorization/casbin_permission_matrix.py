"""Casbin implementation of PermissionMatrixProtocol.

The static role-permission table (src/domain/role_permissions.py) is
compiled into Casbin "p" policies once, at construction, and enforced by a
synchronous Casbin Enforcer with no persistence adapter. Only granted
entries become policies, so anything absent from the table is denied.

Following hexagonal architecture:
- Infrastructure implements domain protocol (PermissionMatrixProtocol)
- Domain doesn't know about Casbin
- The table, not Casbin, is the source of truth

Policy shape:
    p, <role>, <resource>, <action>
    e.g. p, supervisor, tasks, edit_any
"""

import os
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

import casbin

from src.domain.role_permissions import ROLE_PERMISSIONS

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


MODEL_PATH = os.path.join(os.path.dirname(__file__), "model.conf")

_EMPTY_ROW: Mapping[str, bool] = MappingProxyType({})


def _plain(value: object) -> object:
    """Unwrap Enum members so table lookups use the raw string."""
    return value.value if isinstance(value, Enum) else value


def _split_key(permission: str) -> tuple[str, str] | None:
    """Split "resource:action" into its halves, None if malformed."""
    resource, sep, action = permission.partition(":")
    if not sep or not resource or not action:
        return None
    return resource, action


def _keys(permissions: object) -> Iterable[object]:
    """Key list to iterate; None and non-iterables count as empty."""
    if isinstance(permissions, str):
        return (permissions,)
    if not isinstance(permissions, Iterable):
        return ()
    return permissions


class CasbinPermissionMatrix:
    """Read-only permission matrix backed by a Casbin enforcer.

    Every lookup is total and fail-closed: None or non-string inputs,
    unknown roles or keys, and enforcer exceptions all return False.

    Attributes:
        _table: Role -> key -> bool table the policies were generated from.
        _enforcer: Casbin Enforcer holding one policy per granted entry.
        _logger: Structured logger.
    """

    def __init__(
        self,
        logger: "LoggerProtocol",
        table: Mapping[str, Mapping[str, bool]] = ROLE_PERMISSIONS,
        model_path: str = MODEL_PATH,
    ) -> None:
        """Build the enforcer and load policies from the table.

        Args:
            logger: Structured logger.
            table: Role -> permission key -> granted.
            model_path: Casbin model file.
        """
        self._table = table
        self._logger = logger
        self._enforcer = casbin.Enforcer(model_path)

        policies: list[list[str]] = []
        for role, row in table.items():
            for key, granted in row.items():
                parts = _split_key(key)
                if granted and parts is not None:
                    policies.append([role, parts[0], parts[1]])
        if policies:
            self._enforcer.add_policies(policies)

        self._logger.info(
            "permission_matrix_initialized",
            roles=len(table),
            policies=len(policies),
        )

    def has_permission(self, role: str | None, permission: str | None) -> bool:
        """Check a single permission key for a role.

        Args:
            role: Global role string.
            permission: "resource:action" key.

        Returns:
            bool: True only if the table grants the key to the role.
        """
        role, permission = _plain(role), _plain(permission)
        if not isinstance(role, str) or not isinstance(permission, str):
            return False
        if not role or role not in self._table:
            return False
        parts = _split_key(permission)
        if parts is None:
            return False

        try:
            return bool(self._enforcer.enforce(role, parts[0], parts[1]))
        except Exception as e:
            # Fail closed on engine errors
            self._logger.error(
                "permission_check_error",
                error=e,
                role=role,
                permission=permission,
            )
            return False

    def has_any_permission(
        self, role: str | None, permissions: Iterable[str] | None
    ) -> bool:
        """True if at least one key is granted (False for an empty list)."""
        return any(self.has_permission(role, key) for key in _keys(permissions))

    def has_all_permissions(
        self, role: str | None, permissions: Iterable[str] | None
    ) -> bool:
        """True if every key is granted (True for an empty list)."""
        return all(self.has_permission(role, key) for key in _keys(permissions))

    def get_role_permissions(self, role: str | None) -> Mapping[str, bool]:
        """Full read-only permission row for a role.

        Args:
            role: Global role string.

        Returns:
            Mapping[str, bool]: Every key with its value, or an empty
            mapping for unknown roles.
        """
        role = _plain(role)
        if not isinstance(role, str):
            return _EMPTY_ROW
        row = self._table.get(role)
        if row is None:
            return _EMPTY_ROW
        return MappingProxyType(dict(row))

    def roles(self) -> tuple[str, ...]:
        """Roles known to the matrix."""
        return tuple(self._table)

    def keys(self) -> tuple[str, ...]:
        """Permission keys known to the matrix (union over all roles)."""
        seen: dict[str, None] = {}
        for row in self._table.values():
            for key in row:
                seen.setdefault(key, None)
        return tuple(seen)
