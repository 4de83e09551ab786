"""Project request schemas.

RESTful Endpoints:
    POST   /api/projects                          - Create project
    PUT    /api/projects/{project_id}             - Update project
    POST   /api/projects/{project_id}/members     - Add member
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProjectRole(str, Enum):
    """Display role of a member inside a project."""

    EXECUTOR = "executor"
    SUPERVISOR = "supervisor"


class ProjectCreateRequest(BaseModel):
    """Request schema for project creation.

    POST /api/projects
    Returns: 201 Created
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=3, max_length=150, examples=["Apollo"])
    description: str | None = Field(None, min_length=10, max_length=1000)


class ProjectUpdateRequest(BaseModel):
    """Request schema for project update (all fields optional)."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=3, max_length=150)
    description: str | None = Field(None, min_length=10, max_length=1000)


class MemberAddRequest(BaseModel):
    """Request schema for adding a project member.

    The project role is display metadata only; permissions always follow
    the member's global role.
    """

    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(..., gt=0, description="User to add")
    role: ProjectRole = Field(..., description="Display role in the project")
