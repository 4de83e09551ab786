"""API route registry - single source of truth for all routes.

ROUTE_REGISTRY lists every endpoint with its access policy. Paths are
relative to ``settings.api_prefix`` ("/api").

Access policy conventions:
    - Every route except health is PROTECTED (authenticate first).
    - Path identifiers decide the scope checks (see scope_resolution):
      {project_id} -> membership, {chat_id} -> participation,
      {task_id}/{document_id}/{tag_id} -> in project, {comment_id} -> in task,
      {message_id} -> in chat or project, {notification_id} -> caller's own.
    - Every parent is named by its own placeholder, never by a bare {id}.
    - Permission keys are checked against the caller's global role.

Usage:
    router = APIRouter(prefix=settings.api_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.application.services import OwnershipRule
from src.domain.enums import Permission as P
from src.domain.enums import ResourceType
from src.presentation.routers.api.comments import (
    create_comment,
    delete_comment,
    get_comment,
    list_comments,
    rate_comment,
    update_comment,
)
from src.presentation.routers.api.dashboards import (
    get_advanced_metrics,
    get_overall_dashboard,
    get_project_analytics,
    get_project_statistics,
)
from src.presentation.routers.api.direct_chats import (
    delete_direct_message,
    get_chat,
    list_chats,
    list_direct_messages,
    send_direct_message,
    start_chat,
)
from src.presentation.routers.api.documents import (
    delete_document,
    get_document,
    get_document_version,
    link_document_to_task,
    list_documents,
    list_task_documents,
    unlink_document_from_task,
    upload_document,
    upload_document_version,
)
from src.presentation.routers.api.me import get_my_permissions
from src.presentation.routers.api.messages import (
    delete_message,
    get_message,
    list_messages,
    send_message,
    update_message,
)
from src.presentation.routers.api.notifications import (
    delete_notification,
    get_notification,
    list_notifications,
    mark_notification_read,
)
from src.presentation.routers.api.projects import (
    add_member,
    create_project,
    delete_project,
    get_project,
    list_members,
    list_projects,
    remove_member,
    update_project,
)
from src.presentation.routers.api.routes.metadata import (
    AccessPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.tags import (
    add_tag_to_task,
    create_tag,
    delete_tag,
    list_tags,
    list_task_tags,
    remove_tag_from_task,
    update_tag,
)
from src.presentation.routers.api.tasks import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
    update_task_status,
)
from src.presentation.routers.api.templates import (
    create_project_from_template,
    create_template_from_project,
    delete_template,
    get_template,
    list_templates,
)
from src.presentation.routers.api.users import (
    delete_user,
    get_system_settings,
    get_user,
    list_users,
    update_user,
)
from src.schemas.access_schemas import AccessResponse, PermissionsResponse

_PROJECT = "/projects/{project_id}"
_TASK = _PROJECT + "/tasks/{task_id}"
_COMMENT = _TASK + "/comments/{comment_id}"
_DOCUMENT = _PROJECT + "/documents/{document_id}"
_CHAT = "/chats/{chat_id}"

_CONFLICT = ErrorSpec(status=409, description="Resource already exists")

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Projects
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects",
        handler=create_project,
        resource="projects",
        tags=["Projects"],
        summary="Create project",
        operation_id="create_project",
        response_model=AccessResponse,
        status_code=201,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(permission=P.PROJECTS_CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects",
        handler=list_projects,
        resource="projects",
        tags=["Projects"],
        summary="List my projects",
        operation_id="list_projects",
        response_model=AccessResponse,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT,
        handler=get_project,
        resource="projects",
        tags=["Projects"],
        summary="Get project",
        operation_id="get_project",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.PROJECTS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=_PROJECT,
        handler=update_project,
        resource="projects",
        tags=["Projects"],
        summary="Update project",
        operation_id="update_project",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.PROJECTS_EDIT),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_PROJECT,
        handler=delete_project,
        resource="projects",
        tags=["Projects"],
        summary="Delete project",
        operation_id="delete_project",
        status_code=204,
        access_policy=AccessPolicy(permission=P.PROJECTS_DELETE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT + "/members",
        handler=list_members,
        resource="projects",
        tags=["Projects"],
        summary="List project members",
        operation_id="list_project_members",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.PROJECTS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_PROJECT + "/members",
        handler=add_member,
        resource="projects",
        tags=["Projects"],
        summary="Add project member",
        operation_id="add_project_member",
        response_model=AccessResponse,
        status_code=201,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(permission=P.PROJECTS_ADD_MEMBERS),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_PROJECT + "/members/{user_id}",
        handler=remove_member,
        resource="projects",
        tags=["Projects"],
        summary="Remove project member",
        operation_id="remove_project_member",
        status_code=204,
        access_policy=AccessPolicy(permission=P.PROJECTS_REMOVE_MEMBERS),
    ),
    # =========================================================================
    # Tasks
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT + "/tasks",
        handler=list_tasks,
        resource="tasks",
        tags=["Tasks"],
        summary="List tasks",
        operation_id="list_tasks",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_PROJECT + "/tasks",
        handler=create_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Create task",
        operation_id="create_task",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(permission=P.TASKS_CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_TASK,
        handler=get_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Get task",
        operation_id="get_task",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=_TASK,
        handler=update_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Update task",
        description="The task creator may always edit; others need tasks:edit_any.",
        operation_id="update_task",
        response_model=AccessResponse,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.TASK, P.TASKS_EDIT_ANY)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path=_TASK + "/status",
        handler=update_task_status,
        resource="tasks",
        tags=["Tasks"],
        summary="Update task status",
        operation_id="update_task_status",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_UPDATE_STATUS),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_TASK,
        handler=delete_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Delete task",
        operation_id="delete_task",
        status_code=204,
        access_policy=AccessPolicy(permission=P.TASKS_DELETE),
    ),
    # =========================================================================
    # Task comments
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_TASK + "/comments",
        handler=list_comments,
        resource="comments",
        tags=["Comments"],
        summary="List task comments",
        operation_id="list_comments",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_TASK + "/comments",
        handler=create_comment,
        resource="comments",
        tags=["Comments"],
        summary="Create comment",
        operation_id="create_comment",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(permission=P.COMMENTS_CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_COMMENT,
        handler=get_comment,
        resource="comments",
        tags=["Comments"],
        summary="Get comment",
        operation_id="get_comment",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=_COMMENT,
        handler=update_comment,
        resource="comments",
        tags=["Comments"],
        summary="Edit comment",
        description="The author may always edit; others need comments:edit_any.",
        operation_id="update_comment",
        response_model=AccessResponse,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.COMMENT, P.COMMENTS_EDIT_ANY)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_COMMENT,
        handler=delete_comment,
        resource="comments",
        tags=["Comments"],
        summary="Delete comment",
        description="The author may always delete; others need comments:delete_any.",
        operation_id="delete_comment",
        status_code=204,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.COMMENT, P.COMMENTS_DELETE_ANY)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_COMMENT + "/rating",
        handler=rate_comment,
        resource="comments",
        tags=["Comments"],
        summary="Rate comment",
        operation_id="rate_comment",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.COMMENTS_RATE),
    ),
    # =========================================================================
    # Tags
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT + "/tags",
        handler=list_tags,
        resource="tags",
        tags=["Tags"],
        summary="List project tags",
        operation_id="list_tags",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_PROJECT + "/tags",
        handler=create_tag,
        resource="tags",
        tags=["Tags"],
        summary="Create tag",
        operation_id="create_tag",
        response_model=AccessResponse,
        status_code=201,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(permission=P.TASKS_CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=_PROJECT + "/tags/{tag_id}",
        handler=update_tag,
        resource="tags",
        tags=["Tags"],
        summary="Update tag",
        operation_id="update_tag",
        response_model=AccessResponse,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(permission=P.TASKS_EDIT_ANY),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_PROJECT + "/tags/{tag_id}",
        handler=delete_tag,
        resource="tags",
        tags=["Tags"],
        summary="Delete tag",
        operation_id="delete_tag",
        status_code=204,
        access_policy=AccessPolicy(permission=P.TASKS_EDIT_ANY),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_TASK + "/tags",
        handler=list_task_tags,
        resource="tags",
        tags=["Tags"],
        summary="List task tags",
        operation_id="list_task_tags",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_TASK + "/tags/{tag_id}",
        handler=add_tag_to_task,
        resource="tags",
        tags=["Tags"],
        summary="Add tag to task",
        description="Task and tag must both belong to the project.",
        operation_id="add_tag_to_task",
        response_model=AccessResponse,
        status_code=201,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.TASK, P.TASKS_EDIT_ANY)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_TASK + "/tags/{tag_id}",
        handler=remove_tag_from_task,
        resource="tags",
        tags=["Tags"],
        summary="Remove tag from task",
        operation_id="remove_tag_from_task",
        status_code=204,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.TASK, P.TASKS_EDIT_ANY)
        ),
    ),
    # =========================================================================
    # Documents
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT + "/documents",
        handler=list_documents,
        resource="documents",
        tags=["Documents"],
        summary="List project documents",
        operation_id="list_documents",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.PROJECTS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_PROJECT + "/documents",
        handler=upload_document,
        resource="documents",
        tags=["Documents"],
        summary="Upload document",
        operation_id="upload_document",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(permission=P.DOCUMENTS_UPLOAD),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_DOCUMENT,
        handler=get_document,
        resource="documents",
        tags=["Documents"],
        summary="Download document",
        operation_id="get_document",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.DOCUMENTS_DOWNLOAD),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_DOCUMENT,
        handler=delete_document,
        resource="documents",
        tags=["Documents"],
        summary="Delete document",
        operation_id="delete_document",
        status_code=204,
        access_policy=AccessPolicy(permission=P.DOCUMENTS_DELETE),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_DOCUMENT + "/versions",
        handler=upload_document_version,
        resource="documents",
        tags=["Documents"],
        summary="Upload document version",
        operation_id="upload_document_version",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(permission=P.DOCUMENTS_UPLOAD),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_DOCUMENT + "/versions/{version_number}",
        handler=get_document_version,
        resource="documents",
        tags=["Documents"],
        summary="Download document version",
        operation_id="get_document_version",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.DOCUMENTS_DOWNLOAD),
    ),
    # =========================================================================
    # Task documents
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_TASK + "/documents",
        handler=list_task_documents,
        resource="documents",
        tags=["Documents"],
        summary="List task documents",
        operation_id="list_task_documents",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TASKS_VIEW),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_TASK + "/documents/{document_id}",
        handler=link_document_to_task,
        resource="documents",
        tags=["Documents"],
        summary="Link document to task",
        description="Task and document must both belong to the project.",
        operation_id="link_document_to_task",
        response_model=AccessResponse,
        status_code=201,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.TASK, P.TASKS_EDIT_ANY)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_TASK + "/documents/{document_id}",
        handler=unlink_document_from_task,
        resource="documents",
        tags=["Documents"],
        summary="Unlink document from task",
        operation_id="unlink_document_from_task",
        status_code=204,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.TASK, P.TASKS_EDIT_ANY)
        ),
    ),
    # =========================================================================
    # Project chat
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT + "/chat",
        handler=list_messages,
        resource="chat",
        tags=["Chat"],
        summary="List chat messages",
        operation_id="list_messages",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.CHAT_PARTICIPATE),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_PROJECT + "/chat",
        handler=send_message,
        resource="chat",
        tags=["Chat"],
        summary="Send chat message",
        operation_id="send_message",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(all_of=(P.CHAT_PARTICIPATE, P.MESSAGES_SEND)),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_PROJECT + "/chat/{message_id}",
        handler=get_message,
        resource="chat",
        tags=["Chat"],
        summary="Get chat message",
        operation_id="get_message",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.CHAT_PARTICIPATE),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=_PROJECT + "/chat/{message_id}",
        handler=update_message,
        resource="chat",
        tags=["Chat"],
        summary="Edit chat message",
        description="Owner only.",
        operation_id="update_message",
        response_model=AccessResponse,
        access_policy=AccessPolicy(ownership=OwnershipRule(ResourceType.MESSAGE)),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_PROJECT + "/chat/{message_id}",
        handler=delete_message,
        resource="chat",
        tags=["Chat"],
        summary="Delete chat message",
        description="Owner only.",
        operation_id="delete_message",
        status_code=204,
        access_policy=AccessPolicy(ownership=OwnershipRule(ResourceType.MESSAGE)),
    ),
    # =========================================================================
    # Direct chats
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/chats",
        handler=start_chat,
        resource="direct_chats",
        tags=["Direct chats"],
        summary="Start direct chat",
        operation_id="start_chat",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.MESSAGES_SEND),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/chats",
        handler=list_chats,
        resource="direct_chats",
        tags=["Direct chats"],
        summary="List my direct chats",
        operation_id="list_chats",
        response_model=AccessResponse,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_CHAT,
        handler=get_chat,
        resource="direct_chats",
        tags=["Direct chats"],
        summary="Get direct chat",
        description="Participants only.",
        operation_id="get_chat",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.CHAT_PARTICIPATE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=_CHAT + "/messages",
        handler=list_direct_messages,
        resource="direct_chats",
        tags=["Direct chats"],
        summary="List direct messages",
        operation_id="list_direct_messages",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.CHAT_PARTICIPATE),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=_CHAT + "/messages",
        handler=send_direct_message,
        resource="direct_chats",
        tags=["Direct chats"],
        summary="Send direct message",
        operation_id="send_direct_message",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(all_of=(P.CHAT_PARTICIPATE, P.MESSAGES_SEND)),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=_CHAT + "/messages/{message_id}",
        handler=delete_direct_message,
        resource="direct_chats",
        tags=["Direct chats"],
        summary="Delete direct message",
        description="Sender only. A message of another chat is not found.",
        operation_id="delete_direct_message",
        status_code=204,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.DIRECT_MESSAGE)
        ),
    ),
    # =========================================================================
    # Notifications
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/notifications",
        handler=list_notifications,
        resource="notifications",
        tags=["Notifications"],
        summary="List my notifications",
        operation_id="list_notifications",
        response_model=AccessResponse,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/notifications/{notification_id}",
        handler=get_notification,
        resource="notifications",
        tags=["Notifications"],
        summary="Get notification",
        operation_id="get_notification",
        response_model=AccessResponse,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/notifications/{notification_id}/read",
        handler=mark_notification_read,
        resource="notifications",
        tags=["Notifications"],
        summary="Mark notification as read",
        operation_id="mark_notification_read",
        response_model=AccessResponse,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.NOTIFICATION)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/notifications/{notification_id}",
        handler=delete_notification,
        resource="notifications",
        tags=["Notifications"],
        summary="Delete notification",
        operation_id="delete_notification",
        status_code=204,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.NOTIFICATION)
        ),
    ),
    # =========================================================================
    # Templates
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/templates",
        handler=list_templates,
        resource="templates",
        tags=["Templates"],
        summary="List templates",
        operation_id="list_templates",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TEMPLATES_USE),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/templates/{template_id}",
        handler=get_template,
        resource="templates",
        tags=["Templates"],
        summary="Get template",
        operation_id="get_template",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.TEMPLATES_USE),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/templates/from-project/{project_id}",
        handler=create_template_from_project,
        resource="templates",
        tags=["Templates"],
        summary="Create template from project",
        operation_id="create_template_from_project",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(permission=P.TEMPLATES_CREATE),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/templates/{template_id}/projects",
        handler=create_project_from_template,
        resource="templates",
        tags=["Templates"],
        summary="Create project from template",
        operation_id="create_project_from_template",
        response_model=AccessResponse,
        status_code=201,
        access_policy=AccessPolicy(all_of=(P.TEMPLATES_USE, P.PROJECTS_CREATE)),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/templates/{template_id}",
        handler=delete_template,
        resource="templates",
        tags=["Templates"],
        summary="Delete template",
        operation_id="delete_template",
        status_code=204,
        access_policy=AccessPolicy(permission=P.TEMPLATES_MANAGE),
    ),
    # =========================================================================
    # Dashboards
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/dashboard/overall",
        handler=get_overall_dashboard,
        resource="dashboards",
        tags=["Dashboards"],
        summary="Overall statistics",
        operation_id="get_overall_dashboard",
        response_model=AccessResponse,
        access_policy=AccessPolicy(
            any_of=(P.DASHBOARD_BASIC, P.DASHBOARD_ADVANCED)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/dashboard" + _PROJECT + "/statistics",
        handler=get_project_statistics,
        resource="dashboards",
        tags=["Dashboards"],
        summary="Project statistics",
        operation_id="get_project_statistics",
        response_model=AccessResponse,
        access_policy=AccessPolicy(
            any_of=(P.DASHBOARD_BASIC, P.DASHBOARD_ADVANCED)
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/advanced-dashboard/metrics",
        handler=get_advanced_metrics,
        resource="dashboards",
        tags=["Dashboards"],
        summary="Advanced metrics",
        operation_id="get_advanced_metrics",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.DASHBOARD_ADVANCED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/advanced-dashboard" + _PROJECT + "/analytics",
        handler=get_project_analytics,
        resource="dashboards",
        tags=["Dashboards"],
        summary="Project analytics",
        operation_id="get_project_analytics",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.DASHBOARD_ADVANCED),
    ),
    # =========================================================================
    # Users and system (admin)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users",
        handler=list_users,
        resource="users",
        tags=["Users"],
        summary="List users",
        operation_id="list_users",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.SYSTEM_MANAGE_USERS),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}",
        handler=get_user,
        resource="users",
        tags=["Users"],
        summary="Get user",
        operation_id="get_user",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.SYSTEM_MANAGE_USERS),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/users/{user_id}",
        handler=update_user,
        resource="users",
        tags=["Users"],
        summary="Update user",
        operation_id="update_user",
        response_model=AccessResponse,
        errors=[_CONFLICT],
        access_policy=AccessPolicy(permission=P.SYSTEM_MANAGE_USERS),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/users/{user_id}",
        handler=delete_user,
        resource="users",
        tags=["Users"],
        summary="Delete user",
        operation_id="delete_user",
        status_code=204,
        access_policy=AccessPolicy(permission=P.SYSTEM_MANAGE_USERS),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/system/settings",
        handler=get_system_settings,
        resource="system",
        tags=["System"],
        summary="System settings",
        operation_id="get_system_settings",
        response_model=AccessResponse,
        access_policy=AccessPolicy(permission=P.SYSTEM_SETTINGS),
    ),
    # =========================================================================
    # Me
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/me/permissions",
        handler=get_my_permissions,
        resource="me",
        tags=["Me"],
        summary="My permissions",
        description="Full permission row of the caller's global role.",
        operation_id="get_my_permissions",
        response_model=PermissionsResponse,
    ),
]
