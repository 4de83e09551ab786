"""Core errors package.

Usage:
    from src.core.errors import DomainError, FieldError, ValidationError
"""

from src.core.errors.common_errors import FieldError, InternalError, ValidationError
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "FieldError",
    "InternalError",
    "ValidationError",
]
