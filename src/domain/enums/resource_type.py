"""Nested resource kinds and the parents they live under."""

from enum import Enum


class ResourceType(str, Enum):
    """Resources that are addressed inside a parent scope.

    Parent and owner column per type:
        TASK: project, created_by
        DOCUMENT: project, uploaded_by
        TAG: project, (no owner)
        MESSAGE: project, user_id (project chat)
        DIRECT_MESSAGE: chat, sender_id
        COMMENT: task, user_id
        NOTIFICATION: user (recipient), user_id
    """

    TASK = "task"
    DOCUMENT = "document"
    TAG = "tag"
    MESSAGE = "message"
    DIRECT_MESSAGE = "direct_message"
    COMMENT = "comment"
    NOTIFICATION = "notification"

    @property
    def parent_type(self) -> "ParentType":
        """Kind of parent this resource is recorded under."""
        return _PARENTS[self]


class ParentType(str, Enum):
    """Kinds of scope a nested resource can belong to."""

    PROJECT = "project"
    TASK = "task"
    CHAT = "chat"
    USER = "user"


_PARENTS: dict[ResourceType, ParentType] = {
    ResourceType.TASK: ParentType.PROJECT,
    ResourceType.DOCUMENT: ParentType.PROJECT,
    ResourceType.TAG: ParentType.PROJECT,
    ResourceType.MESSAGE: ParentType.PROJECT,
    ResourceType.DIRECT_MESSAGE: ParentType.CHAT,
    ResourceType.COMMENT: ParentType.TASK,
    ResourceType.NOTIFICATION: ParentType.USER,
}
