"""Error response schema, normalizer and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ErrorResponse: Public error body
    ErrorResponseBuilder: DomainError -> JSONResponse
    NormalizedError: Status, code and public message of a failure
    normalize: Map a DomainError to its NormalizedError
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.errors.error_response import (
    ErrorDetail,
    ErrorResponse,
)
from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
    NormalizedError,
    normalize,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "ErrorResponseBuilder",
    "NormalizedError",
    "normalize",
    "register_exception_handlers",
]
