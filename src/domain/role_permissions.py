"""Static role-permission table.

The table is the single source of truth for what each global role may do.
Every role carries an explicit row for every permission key; there is no
inheritance between roles. The structure is wrapped in read-only mapping
proxies at import time and never mutated afterwards.

Usage:
    from src.domain.role_permissions import ROLE_PERMISSIONS

    ROLE_PERMISSIONS["tutor"]["comments:rate"]   # True
    ROLE_PERMISSIONS["developer"]["tasks:delete"]  # False
"""

from collections.abc import Mapping
from types import MappingProxyType

from src.domain.enums import Permission, UserRole

P = Permission


def _row(granted: set[Permission]) -> Mapping[str, bool]:
    """Build a complete read-only row: granted keys True, all others False."""
    return MappingProxyType({key.value: key in granted for key in Permission})


_DEVELOPER: set[Permission] = {
    P.PROJECTS_VIEW,
    P.TASKS_VIEW,
    P.TASKS_CREATE,
    P.TASKS_EDIT_OWN,
    P.TASKS_UPDATE_STATUS,
    P.COMMENTS_CREATE,
    P.COMMENTS_EDIT_OWN,
    P.COMMENTS_DELETE_OWN,
    P.DOCUMENTS_UPLOAD,
    P.DOCUMENTS_DOWNLOAD,
    P.CHAT_PARTICIPATE,
    P.MESSAGES_SEND,
    P.TEMPLATES_USE,
    P.DASHBOARD_BASIC,
}

_SUPERVISOR: set[Permission] = _DEVELOPER | {P.TASKS_EDIT_ANY}

_TUTOR: set[Permission] = {
    P.PROJECTS_VIEW,
    P.TASKS_VIEW,
    P.COMMENTS_CREATE,
    P.COMMENTS_EDIT_OWN,
    P.COMMENTS_DELETE_OWN,
    P.COMMENTS_RATE,
    P.DOCUMENTS_DOWNLOAD,
    P.CHAT_PARTICIPATE,
    P.MESSAGES_SEND,
    P.TEMPLATES_USE,
    P.DASHBOARD_BASIC,
}

_TEAM_LEADER: set[Permission] = {
    P.PROJECTS_VIEW,
    P.PROJECTS_CREATE,
    P.PROJECTS_EDIT,
    P.PROJECTS_ADD_MEMBERS,
    P.TASKS_VIEW,
    P.TASKS_CREATE,
    P.TASKS_EDIT_OWN,
    P.TASKS_EDIT_ANY,
    P.TASKS_DELETE,
    P.TASKS_UPDATE_STATUS,
    P.COMMENTS_CREATE,
    P.COMMENTS_EDIT_OWN,
    P.COMMENTS_DELETE_OWN,
    P.DOCUMENTS_UPLOAD,
    P.DOCUMENTS_DOWNLOAD,
    P.DOCUMENTS_DELETE,
    P.CHAT_PARTICIPATE,
    P.MESSAGES_SEND,
    P.TEMPLATES_USE,
    P.TEMPLATES_CREATE,
    P.DASHBOARD_BASIC,
}

_PROJECT_MANAGER: set[Permission] = set(Permission) - {
    P.SYSTEM_MANAGE_USERS,
    P.SYSTEM_SETTINGS,
}

_ADMIN: set[Permission] = set(Permission) - {P.DASHBOARD_ADVANCED}

ROLE_PERMISSIONS: Mapping[str, Mapping[str, bool]] = MappingProxyType(
    {
        UserRole.DEVELOPER.value: _row(_DEVELOPER),
        UserRole.SUPERVISOR.value: _row(_SUPERVISOR),
        UserRole.TUTOR.value: _row(_TUTOR),
        UserRole.TEAM_LEADER.value: _row(_TEAM_LEADER),
        UserRole.PROJECT_MANAGER.value: _row(_PROJECT_MANAGER),
        UserRole.ADMIN.value: _row(_ADMIN),
    }
)
"""Role -> permission key -> granted. Complete for every role and key."""
