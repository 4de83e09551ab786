"""Scope asserted by a request, normalized at the transport boundary.

The HTTP layer turns path parameters into a ResolvedScope once. The scope
verifier consumes this structure and never inspects raw paths.

Usage:
    scope = ResolvedScope(
        project_id=7,
        resources=(
            ResourceRef(ResourceType.TASK, 42, ParentType.PROJECT, 7),
            ResourceRef(ResourceType.COMMENT, 9, ParentType.TASK, 42),
        ),
    )
"""

from dataclasses import dataclass

from src.domain.enums import ParentType, ResourceType


@dataclass(frozen=True, slots=True)
class ResourceRef:
    """Claim that a resource lives under a given parent.

    Attributes:
        resource_type: Kind of the nested resource.
        resource_id: Id of the nested resource.
        parent_type: Kind of the asserted parent.
        parent_id: Id of the asserted parent.
    """

    resource_type: ResourceType
    resource_id: int
    parent_type: ParentType
    parent_id: int


@dataclass(frozen=True, slots=True)
class ResolvedScope:
    """Everything a request claims about where it operates.

    Attributes:
        project_id: Project whose membership must be verified, or None.
        chat_id: Direct chat whose participation must be verified, or None.
        resources: Resource-in-parent claims, outermost first.
    """

    project_id: int | None = None
    chat_id: int | None = None
    resources: tuple[ResourceRef, ...] = ()
