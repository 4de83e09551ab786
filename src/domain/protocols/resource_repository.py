"""ResourceRepository protocol for nested resource lookups."""

from typing import Protocol

from src.domain.entities import OwnedResource
from src.domain.enums import ResourceType


class ResourceRepository(Protocol):
    """Resolves owner and parent of any nested resource (port)."""

    async def find_owner_and_parent(
        self, resource_type: ResourceType, resource_id: int
    ) -> OwnedResource | None:
        """Load the owner and recorded parent of a resource.

        Args:
            resource_type: Kind of resource (decides the table and columns).
            resource_id: Resource identifier.

        Returns:
            OwnedResource if the resource exists, None otherwise.
        """
        ...
