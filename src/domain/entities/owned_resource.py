"""Owner and parent of a nested resource.

Result of ResourceRepository.find_owner_and_parent. Carries just enough to
decide scope (parent_id) and ownership (owner_id).
"""

from dataclasses import dataclass

from src.domain.enums import ResourceType


@dataclass(frozen=True)
class OwnedResource:
    """Nested resource as seen by the access pipeline.

    Attributes:
        resource_type: Kind of resource.
        resource_id: Resource identifier.
        owner_id: User who owns the resource, None for ownerless kinds (tags).
        parent_id: Id of the recorded parent (project, task or recipient user).
    """

    resource_type: ResourceType
    resource_id: int
    owner_id: int | None
    parent_id: int
