"""
Main FastAPI application entry point.

Wires the pieces together:
- lifespan: builds the permission matrix before the first request, disposes
  the database engine on shutdown
- middleware: request correlation (X-Request-ID) and CORS
- exception handlers: the single place statuses and public messages are set
- routers: registry-generated API routes plus health, under /api
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger, get_permission_matrix
from src.presentation.routers import api_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware.request_id_middleware import (
    RequestIdMiddleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: compile the permission matrix (app-scoped, never mutated).
    Shutdown: dispose the database connection pool.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    matrix = get_permission_matrix()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        roles=len(matrix.roles()),
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant project and task management API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation (X-Request-ID)
app.add_middleware(RequestIdMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[settings.request_id_header],
)

register_exception_handlers(app)

app.include_router(api_router)
