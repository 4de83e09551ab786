"""Result types for railway-oriented programming.

Every stage of the access pipeline returns a Result instead of raising, so a
denial is an ordinary value that travels to the presentation layer untouched.

Usage:
    def parse_project_id(raw: str) -> Result[int, ValidationError]:
        if not raw.isdigit():
            return Failure(error=ValidationError(...))
        return Success(value=int(raw))

    match parse_project_id("42"):
        case Success(value=project_id):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
