"""
Error taxonomy of the user directory and its HTTP translation.

Services raise subclasses of ``UserDirectoryError``; the handlers
below turn them into JSON bodies of the form ``{"error": "<message>"}``
with the status code carried by the exception.  Request bodies that
FastAPI cannot parse into a user payload are reported as a
``ValidationError`` so that clients only ever see the documented
error body.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required"
USER_NOT_FOUND = "User not found"


class UserDirectoryError(Exception):
    """Base exception for the user directory.

    Carries the HTTP status code and the human‑readable message that
    ends up in the ``error`` field of the response body.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(UserDirectoryError):
    """Raised when a user name is missing, empty or whitespace only."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = NAME_REQUIRED) -> None:
        super().__init__(message)


class NotFoundError(UserDirectoryError):
    """Raised when no user matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = USER_NOT_FOUND) -> None:
        super().__init__(message)


async def user_directory_exception_handler(request: Request, exc: UserDirectoryError) -> JSONResponse:
    """Convert a ``UserDirectoryError`` into its JSON response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as a missing name."""
    logger.warning(
        "%s %s - Error: invalid request body (%d problem(s))",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return await user_directory_exception_handler(request, ValidationError())
