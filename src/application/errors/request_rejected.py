"""Exception carrying a DomainError across the HTTP boundary.

Pipeline stages and handlers return Failure(error) internally. When a
failure must abort the request, the presentation layer raises
RequestRejectedError(error) and the registered exception handler turns the
wrapped DomainError into the public response. Status codes and public
messages are decided there and nowhere else.

Usage:
    match result:
        case Failure(error=error):
            raise RequestRejectedError(error)
"""

from src.core.errors import DomainError


class RequestRejectedError(Exception):
    """Request aborted with a tagged domain error.

    Attributes:
        error: The DomainError describing why the request was rejected.
    """

    def __init__(self, error: DomainError) -> None:
        """Wrap a domain error.

        Args:
            error: Failure produced by a pipeline stage or handler.
        """
        super().__init__(str(error))
        self.error = error
