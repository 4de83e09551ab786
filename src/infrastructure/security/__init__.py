"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- JWT bearer credential verification (and minting for fixtures/scripts)
"""

from src.infrastructure.security.jwt_service import JWTService

__all__ = [
    "JWTService",
]
