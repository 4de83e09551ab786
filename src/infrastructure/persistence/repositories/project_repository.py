"""ProjectRepository - SQLAlchemy implementation of ProjectRepository protocol.

Adapter for hexagonal architecture. Reads projects and memberships.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Project, ProjectMembership
from src.infrastructure.persistence.models.project import (
    Project as ProjectModel,
    ProjectMember as ProjectMemberModel,
)


class ProjectRepository:
    """SQLAlchemy implementation of ProjectRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, project_id: int) -> Project | None:
        """Find project by ID.

        Args:
            project_id: Project identifier.

        Returns:
            Domain Project entity if found, None otherwise.
        """
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        result = await self.session.execute(stmt)
        project_model = result.scalar_one_or_none()

        if project_model is None:
            return None

        return Project(
            id=project_model.id,
            name=project_model.name,
            created_by=project_model.created_by,
        )

    async def find_membership(
        self, project_id: int, user_id: int
    ) -> ProjectMembership | None:
        """Find a user's membership in a project.

        Args:
            project_id: Project identifier.
            user_id: User identifier.

        Returns:
            ProjectMembership if the user is a member, None otherwise.
        """
        stmt = select(ProjectMemberModel).where(
            ProjectMemberModel.project_id == project_id,
            ProjectMemberModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        member_model = result.scalar_one_or_none()

        if member_model is None:
            return None

        return ProjectMembership(
            project_id=member_model.project_id,
            user_id=member_model.user_id,
            project_role=member_model.role,
        )
