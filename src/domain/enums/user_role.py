"""Global user roles for permission lookups.

Every user carries exactly one global role. Roles are a closed set but NOT a
hierarchy: a role's capability is whatever the permission matrix grants it,
nothing is inherited from another role.

Reference:
    - src/domain/role_permissions.py

Usage:
    from src.domain.enums import UserRole

    if user.role in UserRole.values():
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Global roles assigned to users.

    String Enum:
        Inherits from str so members compare equal to stored role strings
        and can be used directly as Casbin policy subjects.
    """

    DEVELOPER = "developer"
    """Works on tasks; may edit own tasks and comments."""

    SUPERVISOR = "supervisor"
    """Developer capabilities plus editing any task."""

    TUTOR = "tutor"
    """Read-mostly mentor; may comment on and rate tasks."""

    TEAM_LEADER = "team_leader"
    """Creates projects, manages tasks and documents."""

    PROJECT_MANAGER = "project_manager"
    """Full project control, including the advanced dashboard."""

    ADMIN = "admin"
    """System administration (users and settings)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: Role values in declaration order.
        """
        return [role.value for role in cls]
