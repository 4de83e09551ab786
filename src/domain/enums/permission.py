"""Permission keys for the role-permission matrix.

A permission key is an opaque "resource:action" string. The set of keys is
fixed; the matrix holds a boolean for every (role, key) pair.

Usage:
    from src.domain.enums import Permission

    Permission.TASKS_EDIT_ANY.value      # "tasks:edit_any"
"""

from enum import Enum


class Permission(str, Enum):
    """Every permission key the matrix knows about.

    String Enum:
        Members compare equal to their "resource:action" strings, so callers
        may pass either the member or the raw key.
    """

    # Projects
    PROJECTS_VIEW = "projects:view"
    PROJECTS_CREATE = "projects:create"
    PROJECTS_EDIT = "projects:edit"
    PROJECTS_DELETE = "projects:delete"
    PROJECTS_ADD_MEMBERS = "projects:add_members"
    PROJECTS_REMOVE_MEMBERS = "projects:remove_members"

    # Tasks
    TASKS_VIEW = "tasks:view"
    TASKS_CREATE = "tasks:create"
    TASKS_EDIT_OWN = "tasks:edit_own"
    TASKS_EDIT_ANY = "tasks:edit_any"
    TASKS_DELETE = "tasks:delete"
    TASKS_UPDATE_STATUS = "tasks:update_status"

    # Comments
    COMMENTS_CREATE = "comments:create"
    COMMENTS_EDIT_OWN = "comments:edit_own"
    COMMENTS_EDIT_ANY = "comments:edit_any"
    COMMENTS_DELETE_OWN = "comments:delete_own"
    COMMENTS_DELETE_ANY = "comments:delete_any"
    COMMENTS_RATE = "comments:rate"

    # Documents
    DOCUMENTS_UPLOAD = "documents:upload"
    DOCUMENTS_DOWNLOAD = "documents:download"
    DOCUMENTS_DELETE = "documents:delete"

    # Chat
    CHAT_PARTICIPATE = "chat:participate"
    MESSAGES_SEND = "messages:send"

    # Templates
    TEMPLATES_USE = "templates:use"
    TEMPLATES_CREATE = "templates:create"
    TEMPLATES_MANAGE = "templates:manage"

    # Dashboards
    DASHBOARD_BASIC = "dashboard:basic"
    DASHBOARD_ADVANCED = "dashboard:advanced"

    # System
    SYSTEM_MANAGE_USERS = "system:manage_users"
    SYSTEM_SETTINGS = "system:settings"

    @classmethod
    def values(cls) -> list[str]:
        """Get all permission keys as strings.

        Returns:
            list[str]: Keys in declaration order.
        """
        return [permission.value for permission in cls]
