"""Database persistence infrastructure.

This module provides database-related functionality including:
- Base model for all database entities
- Database connection and session management
- Read-side repository implementations
- Integrity error classification
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.errors import classify_integrity_error

__all__ = [
    "BaseModel",
    "Database",
    "classify_integrity_error",
]
