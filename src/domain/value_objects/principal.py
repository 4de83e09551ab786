"""Authenticated principal value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """Who is making the request, established once per request.

    Created by PrincipalResolver after the credential is verified and the
    user record is loaded. Later stages trust it and never re-verify.

    Attributes:
        user_id: Authenticated user id.
        role: Global role taken from the user record (not from the token).
    """

    user_id: int
    role: str
