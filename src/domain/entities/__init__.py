"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.chat_participation import ChatParticipation
from src.domain.entities.owned_resource import OwnedResource
from src.domain.entities.project import Project
from src.domain.entities.project_membership import ProjectMembership
from src.domain.entities.user import User

__all__ = [
    "ChatParticipation",
    "OwnedResource",
    "Project",
    "ProjectMembership",
    "User",
]
