"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).
Request bodies forbid unknown fields; validation runs only after the access
pipeline has admitted the request.

Usage:
    from src.schemas import TaskCreateRequest, AccessResponse
"""

from src.schemas.access_schemas import (
    AccessResponse,
    HealthResponse,
    PermissionsResponse,
    VerifiedResourceResponse,
)
from src.schemas.collaboration_schemas import (
    DirectChatStartRequest,
    DocumentUploadRequest,
    MessageRequest,
    TemplateCreateRequest,
    UserUpdateRequest,
)
from src.schemas.project_schemas import (
    MemberAddRequest,
    ProjectCreateRequest,
    ProjectRole,
    ProjectUpdateRequest,
)
from src.schemas.task_schemas import (
    CommentRatingRequest,
    CommentRequest,
    TagRequest,
    TaskCreateRequest,
    TaskStatus,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)

__all__ = [
    # Access
    "AccessResponse",
    "HealthResponse",
    "PermissionsResponse",
    "VerifiedResourceResponse",
    # Projects
    "MemberAddRequest",
    "ProjectCreateRequest",
    "ProjectRole",
    "ProjectUpdateRequest",
    # Tasks
    "CommentRatingRequest",
    "CommentRequest",
    "TagRequest",
    "TaskCreateRequest",
    "TaskStatus",
    "TaskStatusUpdateRequest",
    "TaskUpdateRequest",
    # Collaboration
    "DirectChatStartRequest",
    "DocumentUploadRequest",
    "MessageRequest",
    "TemplateCreateRequest",
    "UserUpdateRequest",
]
