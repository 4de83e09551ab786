"""UserRepository protocol for principal resolution.

The pipeline reads exactly one thing about a user: whether the record exists
and which global role it carries. Roles are never taken from token claims.
"""

from typing import Protocol

from src.domain.entities import User


class UserRepository(Protocol):
    """Lookup port used by PrincipalResolver."""

    async def find_by_id(self, user_id: int) -> User | None:
        """Return the user, or None when no record has this id."""
        ...
