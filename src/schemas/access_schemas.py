"""Schemas describing the verified access context.

Handlers of protected routes are thin: they hand the verified scope to the
resource services and echo it back. These models are that echo.
"""

from collections.abc import Mapping

from pydantic import BaseModel, Field

from src.application.services import AccessContext


class VerifiedResourceResponse(BaseModel):
    """A resource whose parent was verified by the scope stage."""

    type: str = Field(..., description="Resource type (task, comment, ...)")
    id: int = Field(..., description="Resource id")
    owner_id: int | None = Field(None, description="Owner user id, if any")
    parent_id: int = Field(..., description="Verified parent id")


class AccessResponse(BaseModel):
    """Verified access context of a request.

    Attributes:
        user_id: Authenticated principal.
        role: Global role used for permission lookups.
        project_id: Verified project, if the route is project scoped.
        project_role: Informational role inside the project.
        chat_id: Verified direct chat, if the route is chat scoped.
        resources: Verified resources, outermost first.
    """

    user_id: int
    role: str
    project_id: int | None = None
    project_role: str | None = None
    chat_id: int | None = None
    resources: list[VerifiedResourceResponse] = Field(default_factory=list)

    @classmethod
    def from_context(cls, access: AccessContext) -> "AccessResponse":
        """Build the response from a verified AccessContext."""
        assert access.principal is not None
        membership = access.membership
        participation = access.participation
        return cls(
            user_id=access.principal.user_id,
            role=access.principal.role,
            project_id=membership.project_id if membership else None,
            project_role=membership.project_role if membership else None,
            chat_id=participation.chat_id if participation else None,
            resources=[
                VerifiedResourceResponse(
                    type=resource.resource_type.value,
                    id=resource.resource_id,
                    owner_id=resource.owner_id,
                    parent_id=resource.parent_id,
                )
                for resource in access.resources
            ],
        )


class PermissionsResponse(BaseModel):
    """Full permission row of the caller's role.

    GET /api/me/permissions
    """

    user_id: int
    role: str
    permissions: dict[str, bool] = Field(
        ..., description="Every permission key with its grant"
    )

    @classmethod
    def from_row(
        cls, user_id: int, role: str, row: Mapping[str, bool]
    ) -> "PermissionsResponse":
        return cls(user_id=user_id, role=role, permissions=dict(row))


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = "healthy"
    version: str
