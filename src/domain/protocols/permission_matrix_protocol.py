"""Permission matrix protocol (port) for role-based checks.

Following hexagonal architecture:
- Domain defines the PORT (this protocol) and the static table
- Infrastructure provides the ADAPTER (CasbinPermissionMatrix)
- Application layer uses the protocol (doesn't know about Casbin)

Every method is total: unknown roles, unknown keys, None inputs and engine
failures all read as "not granted". Nothing here raises.
"""

from collections.abc import Iterable, Mapping
from typing import Protocol


class PermissionMatrixProtocol(Protocol):
    """Read-only role -> permission lookups."""

    def has_permission(self, role: str | None, permission: str | None) -> bool:
        """Check a single permission key for a role.

        Args:
            role: Global role string.
            permission: "resource:action" key.

        Returns:
            bool: True only if the table grants the key to the role.
        """
        ...

    def has_any_permission(
        self, role: str | None, permissions: Iterable[str] | None
    ) -> bool:
        """True if at least one key is granted (False for an empty list)."""
        ...

    def has_all_permissions(
        self, role: str | None, permissions: Iterable[str] | None
    ) -> bool:
        """True if every key is granted (True for an empty list)."""
        ...

    def get_role_permissions(self, role: str | None) -> Mapping[str, bool]:
        """Full read-only permission row for a role (empty if unknown)."""
        ...

    def roles(self) -> tuple[str, ...]:
        """Roles known to the matrix."""
        ...

    def keys(self) -> tuple[str, ...]:
        """Permission keys known to the matrix."""
        ...
