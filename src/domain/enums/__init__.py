"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Enums are centralized here for discoverability and maintainability.

Available Enums:
    - UserRole: Global roles (developer ... admin)
    - Permission: "resource:action" keys of the permission matrix
    - ResourceType / ParentType: Nested resources and their parent scopes
    - DenialReason: Why an authorization decision was negative
"""

from src.domain.enums.denial_reason import DenialReason
from src.domain.enums.permission import Permission
from src.domain.enums.resource_type import ParentType, ResourceType
from src.domain.enums.user_role import UserRole

__all__ = [
    "DenialReason",
    "ParentType",
    "Permission",
    "ResourceType",
    "UserRole",
]
