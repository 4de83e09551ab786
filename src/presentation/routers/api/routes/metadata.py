"""Route metadata types for the API route registry.

The registry is the single source of truth for every endpoint: method,
path, handler, OpenAPI docs and, most importantly, the access policy that
decides which pipeline stages run before the handler.

Core types:
    RouteMetadata: Complete route specification
    HTTPMethod: HTTP method enum
    AccessLevel: PUBLIC or PROTECTED
    AccessPolicy: Permission / ownership requirements of a protected route
    ErrorSpec: Error response specification for OpenAPI

Usage:
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/projects/{project_id}/tasks/{task_id}/comments/{comment_id}",
        handler=update_comment,
        resource="comments",
        tags=["Comments"],
        summary="Edit comment",
        response_model=AccessResponse,
        access_policy=AccessPolicy(
            ownership=OwnershipRule(ResourceType.COMMENT, P.COMMENTS_EDIT_ANY)
        ),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.application.services import OwnershipRule


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AccessLevel(str, Enum):
    """Access levels for routes.

    Attributes:
        PUBLIC: No pipeline at all (health).
        PROTECTED: Full access pipeline; with no permission fields set the
            route only requires an authenticated principal plus whatever
            scope its path names.
    """

    PUBLIC = "public"
    PROTECTED = "protected"


@dataclass(frozen=True, kw_only=True)
class AccessPolicy:
    """Access requirements of a route.

    Attributes:
        level: PUBLIC or PROTECTED.
        permission: Single required permission key.
        any_of: Keys of which at least one is required.
        all_of: Keys that are all required.
        ownership: Owner passes, others need ``ownership.any_permission``.

    Examples:
        >>> AccessPolicy(permission="tasks:create")
        >>> AccessPolicy(any_of=("dashboard:basic", "dashboard:advanced"))
        >>> AccessPolicy(level=AccessLevel.PUBLIC)
    """

    level: AccessLevel = AccessLevel.PROTECTED
    permission: str | None = None
    any_of: Sequence[str] | None = None
    all_of: Sequence[str] | None = None
    ownership: OwnershipRule | None = None

    def permission_keys(self) -> tuple[str, ...]:
        """Every permission key the policy mentions."""
        keys: list[str] = []
        if self.permission is not None:
            keys.append(self.permission)
        keys += self.any_of or ()
        keys += self.all_of or ()
        if self.ownership is not None and self.ownership.any_permission:
            keys.append(self.ownership.any_permission)
        return tuple(keys)


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code.
        description: Human-readable error description.
    """

    status: int
    description: str


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method.
        path: Path relative to the API prefix, with placeholders.
        handler: Async function implementing the endpoint.

    Grouping fields:
        resource: Resource category (e.g. "tasks").
        tags: OpenAPI tags.

    OpenAPI documentation:
        summary, description, operation_id

    Request/Response:
        response_model: Pydantic model for the success response.
        status_code: Expected success status.
        errors: Possible error responses (the generator adds the pipeline's).

    Behavior:
        access_policy: Which access stages run before the handler.
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    access_policy: AccessPolicy = AccessPolicy()
