"""ResourceRepository - owner and parent lookups for nested resources.

One query per lookup, selecting only (owner column, parent column) from the
table that backs the resource type:

    task            tasks            created_by   project_id
    document        documents        uploaded_by  project_id
    tag             task_tags        (none)       project_id
    message         chat_messages    user_id      project_id
    direct_message  direct_messages  sender_id    chat_id
    comment         task_comments    user_id      task_id
    notification    notifications    user_id      user_id
"""

from typing import Any

from sqlalchemy import literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import OwnedResource
from src.domain.enums import ResourceType
from src.infrastructure.persistence.models import (
    ChatMessage,
    DirectMessage,
    Document,
    Notification,
    Task,
    TaskComment,
    TaskTag,
)

# resource type -> (model, owner column or None, parent column)
_COLUMNS: dict[ResourceType, tuple[Any, Any, Any]] = {
    ResourceType.TASK: (Task, Task.created_by, Task.project_id),
    ResourceType.DOCUMENT: (Document, Document.uploaded_by, Document.project_id),
    ResourceType.TAG: (TaskTag, None, TaskTag.project_id),
    ResourceType.MESSAGE: (ChatMessage, ChatMessage.user_id, ChatMessage.project_id),
    ResourceType.DIRECT_MESSAGE: (
        DirectMessage,
        DirectMessage.sender_id,
        DirectMessage.chat_id,
    ),
    ResourceType.COMMENT: (TaskComment, TaskComment.user_id, TaskComment.task_id),
    ResourceType.NOTIFICATION: (
        Notification,
        Notification.user_id,
        Notification.user_id,
    ),
}


class ResourceRepository:
    """SQLAlchemy implementation of ResourceRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_owner_and_parent(
        self, resource_type: ResourceType, resource_id: int
    ) -> OwnedResource | None:
        """Load owner and recorded parent of a resource.

        Args:
            resource_type: Kind of resource.
            resource_id: Resource identifier.

        Returns:
            OwnedResource if the row exists, None otherwise.
        """
        model, owner_column, parent_column = _COLUMNS[resource_type]
        owner_expr = owner_column if owner_column is not None else literal(None)

        stmt = select(
            owner_expr.label("owner_id"),
            parent_column.label("parent_id"),
        ).where(model.id == resource_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        owner_id, parent_id = row
        return OwnedResource(
            resource_type=resource_type,
            resource_id=resource_id,
            owner_id=owner_id,
            parent_id=parent_id,
        )
