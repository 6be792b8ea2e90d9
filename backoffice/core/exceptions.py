"""Exception types raised by the backoffice services.

Each error carries the HTTP status it maps to; ``server.py`` turns them into
``{"error": message}`` responses.
"""

from fastapi import status


class BackofficeError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class BadRequestError(BackofficeError):
    """Missing or malformed request parameter."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(BackofficeError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(BackofficeError):
    """No document, file or collection matches the request."""

    status_code = status.HTTP_404_NOT_FOUND


class UnavailableError(BackofficeError):
    """The MongoDB connection is not established."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class InternalError(BackofficeError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
