"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - user.py: Users and their global role
    - project.py: Projects and project memberships
    - task.py: Tasks, task comments, task tags
    - document.py: Project documents
    - chat_message.py: Project chat messages
    - direct_chat.py: Direct chats, participants and direct messages
    - notification.py: Per-user notifications

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.chat_message import ChatMessage
from src.infrastructure.persistence.models.direct_chat import (
    DirectChat,
    DirectChatParticipant,
    DirectMessage,
)
from src.infrastructure.persistence.models.document import Document
from src.infrastructure.persistence.models.notification import Notification
from src.infrastructure.persistence.models.project import Project, ProjectMember
from src.infrastructure.persistence.models.task import Task, TaskComment, TaskTag
from src.infrastructure.persistence.models.user import User

__all__ = [
    "ChatMessage",
    "DirectChat",
    "DirectChatParticipant",
    "DirectMessage",
    "Document",
    "Notification",
    "Project",
    "ProjectMember",
    "Task",
    "TaskComment",
    "TaskTag",
    "User",
]
