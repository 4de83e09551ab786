"""Project membership entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectMembership:
    """Link between a user and a project.

    The project_role is display metadata only. Permission lookups always use
    the user's global role, never this value.

    Attributes:
        project_id: Project the user belongs to.
        user_id: Member user id.
        project_role: Role label inside the project (informational).
    """

    project_id: int
    user_id: int
    project_role: str | None = None
