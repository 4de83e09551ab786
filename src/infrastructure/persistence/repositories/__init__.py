"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.chat_repository import (
    ChatRepository,
)
from src.infrastructure.persistence.repositories.project_repository import (
    ProjectRepository,
)
from src.infrastructure.persistence.repositories.resource_repository import (
    ResourceRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ChatRepository",
    "ProjectRepository",
    "ResourceRepository",
    "UserRepository",
]
