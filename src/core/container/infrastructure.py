"""Infrastructure dependency factories.

Application-scoped (``lru_cache`` singletons):
    get_logger: structlog ConsoleAdapter (pretty in development, JSON elsewhere)
    get_database: async engine and session factory
    get_token_service: JWT bearer verification

Request-scoped:
    get_db_session: one session per request, shared by all repositories
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.token_verification_protocol import (
        TokenVerificationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application logger.

    The adapter is chosen here and nowhere else; every pipeline stage
    receives it through the constructor.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_database() -> Database:
    """Return the Database (engine plus session factory) for settings.database_url."""
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_token_service() -> "TokenVerificationProtocol":
    """Return the JWT verifier.

    Secret, algorithm and lifetime come from settings; the secret length is
    validated by both Settings and JWTService.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's session.

    Commits when the request completes, rolls back if the handler raised.
    """
    async with get_database().get_session() as session:
        yield session
