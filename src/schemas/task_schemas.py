"""Task, comment and tag request schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Workflow status of a task."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"


class TaskCreateRequest(BaseModel):
    """POST /api/projects/{project_id}/tasks"""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    assigned_to: int | None = Field(None, gt=0)


class TaskUpdateRequest(BaseModel):
    """PUT /api/projects/{project_id}/tasks/{task_id}"""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)
    assigned_to: int | None = Field(None, gt=0)


class TaskStatusUpdateRequest(BaseModel):
    """PATCH /api/projects/{project_id}/tasks/{task_id}/status"""

    model_config = ConfigDict(extra="forbid")

    status: TaskStatus


class CommentRequest(BaseModel):
    """Create or edit a task comment."""

    model_config = ConfigDict(extra="forbid")

    content: str = Field(..., min_length=1, max_length=2000)


class CommentRatingRequest(BaseModel):
    """Rate a task comment (1-5)."""

    model_config = ConfigDict(extra="forbid")

    rating: int = Field(..., ge=1, le=5)


class TagRequest(BaseModel):
    """Create or rename a project tag."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=50)
    color: str | None = Field(None, pattern=r"^#[0-9a-fA-F]{6}$")
