"""Repository dependency factories.

Request-scoped: the four repositories the access pipeline reads share the
request's session. Tests replace these factories through
``app.dependency_overrides``.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        ChatRepository,
        ProjectRepository,
        ResourceRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Users and their global roles (principal resolution)."""
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_project_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectRepository":
    """Projects and memberships (membership stage)."""
    from src.infrastructure.persistence.repositories import ProjectRepository

    return ProjectRepository(session=session)


async def get_chat_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ChatRepository":
    """Direct chats and participants (participant stage)."""
    from src.infrastructure.persistence.repositories import ChatRepository

    return ChatRepository(session=session)


async def get_resource_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ResourceRepository":
    """Owner and parent of nested resources (resource scope, ownership)."""
    from src.infrastructure.persistence.repositories import ResourceRepository

    return ResourceRepository(session=session)
