"""ProjectRepository protocol for project and membership lookups."""

from typing import Protocol

from src.domain.entities import Project, ProjectMembership


class ProjectRepository(Protocol):
    """Project repository protocol (port).

    Methods:
        find_by_id: Retrieve project by ID
        find_membership: Retrieve a user's membership in a project
    """

    async def find_by_id(self, project_id: int) -> Project | None:
        """Find project by ID.

        Args:
            project_id: Project identifier.

        Returns:
            Project if found, None otherwise.
        """
        ...

    async def find_membership(
        self, project_id: int, user_id: int
    ) -> ProjectMembership | None:
        """Find a user's membership row in a project.

        Args:
            project_id: Project identifier.
            user_id: User identifier.

        Returns:
            ProjectMembership if the user is a member, None otherwise.
        """
        ...
