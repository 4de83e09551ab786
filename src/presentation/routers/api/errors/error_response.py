"""Public error body.

Every failure leaves the API in the same shape:

    {"error": "Validation failed", "code": "validation_error",
     "details": [{"field": "path.task_id", "code": "invalid_identifier",
                  "message": "Must be a positive integer"}]}

``details`` is present only for validation failures. The request id travels
in the X-Request-ID header, not in the body.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Dotted location of the field (e.g. "body.title").
        code: Machine-readable error code.
        message: Human-readable error message.
    """

    field: str = Field(..., description="Field location")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Error body returned for every rejected request.

    Attributes:
        error: Fixed public message for the error kind.
        code: Stable machine-readable code (e.g. "access_denied").
        details: Field errors, validation failures only.
    """

    error: str = Field(..., description="Public error message")
    code: str = Field(..., description="Stable error code")
    details: list[ErrorDetail] | None = Field(
        default=None, description="Field-level errors (validation only)"
    )
