"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PermissionMatrixProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.permission_matrix_protocol import PermissionMatrixProtocol
from src.domain.protocols.token_verification_protocol import (
    TokenVerificationProtocol,
)

# Repository protocols
from src.domain.protocols.chat_repository import ChatRepository
from src.domain.protocols.project_repository import ProjectRepository
from src.domain.protocols.resource_repository import ResourceRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PermissionMatrixProtocol",
    "TokenVerificationProtocol",
    # Repository protocols
    "ChatRepository",
    "ProjectRepository",
    "ResourceRepository",
    "UserRepository",
]
