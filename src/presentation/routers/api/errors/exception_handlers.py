"""Global exception handlers for the FastAPI application.

Every failure, wherever it is raised, ends up here and leaves the API as
an ErrorResponse with the status decided by ``normalize``.

Handlers:
    request_rejected_handler: RequestRejectedError (pipeline stages, handlers)
    validation_exception_handler: Request and model validation (400, aggregated)
    integrity_error_handler: Storage conflicts (409 / 400) from SQLSTATE
    http_exception_handler: Routing errors (unknown path, wrong method)
    generic_exception_handler: Anything else (500, logged with error_type)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import RequestRejectedError
from src.core.config import settings
from src.core.container import get_logger
from src.infrastructure.persistence.errors import classify_integrity_error
from src.presentation.routers.api.errors.error_response import ErrorDetail
from src.presentation.routers.api.errors.error_response_builder import (
    INTERNAL_SERVER_ERROR,
    NOT_FOUND,
    ErrorResponseBuilder,
    NormalizedError,
    normalize,
    validation_failed,
)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _respond(request: Request, normalized: NormalizedError) -> JSONResponse:
    return ErrorResponseBuilder.build(
        normalized,
        request_id=_request_id(request),
        header_name=settings.request_id_header,
    )


def _field_location(loc: tuple[int | str, ...] | list[int | str]) -> str:
    """Join a pydantic error location ("body", "title") -> "body.title"."""
    return ".".join(str(part) for part in loc) or "unknown"


async def request_rejected_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render the DomainError carried by a RequestRejectedError.

    Args:
        request: FastAPI Request object.
        exc: RequestRejectedError raised by a dependency or handler.

    Returns:
        JSONResponse with the normalized status and body.
    """
    assert isinstance(exc, RequestRejectedError)

    normalized = normalize(exc.error)
    if normalized.status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        get_logger().error(
            "request_failed",
            request_id=_request_id(request),
            error_code=exc.error.code.value,
            path=request.url.path,
        )
    return _respond(request, normalized)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert request or model validation errors into one 400 response.

    All field errors are reported, not just the first.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError or pydantic ValidationError.

    Returns:
        JSONResponse with code validation_error and field details.
    """
    assert isinstance(exc, (RequestValidationError, PydanticValidationError))

    details = tuple(
        ErrorDetail(
            field=_field_location(error.get("loc", ())),
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    )
    return _respond(request, validation_failed(details))


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map storage constraint violations to 409 / 400.

    Unclassified integrity errors fall through to 500.
    """
    assert isinstance(exc, IntegrityError)

    conflict = classify_integrity_error(exc)
    if conflict is None:
        return await generic_exception_handler(request, exc)
    return _respond(request, normalize(conflict))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the error shape."""
    assert isinstance(exc, StarletteHTTPException)

    if exc.status_code == status.HTTP_404_NOT_FOUND:
        normalized = NOT_FOUND
    else:
        try:
            phrase = HTTPStatus(exc.status_code).phrase
        except ValueError:
            phrase = "Error"
        normalized = NormalizedError(
            status=exc.status_code,
            code=phrase.lower().replace(" ", "_"),
            message=phrase,
            headers=dict(exc.headers or {}),
        )
    return _respond(request, normalized)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    The response never leaks the exception message. Only the exception type
    is logged, since messages can echo client input.

    This handler runs outside RequestIdMiddleware, so it sets the request id
    header itself.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_id=_request_id(request),
        path=request.url.path,
        method=request.method,
    )
    return _respond(request, INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(RequestRejectedError, request_rejected_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
