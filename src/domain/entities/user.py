"""User domain entity.

Only the attributes the access pipeline reads are modelled: identity and the
global role used for every permission lookup.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Registered user.

    Attributes:
        id: Unique user identifier.
        email: Login email.
        role: Global role string (see UserRole). Stored values are trusted
            as-is; an unknown role simply has no permissions.
        name: Display name.
    """

    id: int
    email: str
    role: str
    name: str = ""
