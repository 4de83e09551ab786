"""Application layer errors.

Exports:
    RequestRejectedError: Exception wrapping a DomainError for the HTTP boundary
"""

from src.application.errors.request_rejected import RequestRejectedError

__all__ = [
    "RequestRejectedError",
]
