"""
Core module for the backoffice.

This module contains the error taxonomy and the FastAPI dependencies shared by the routers.
"""

from .exceptions import (
    BackofficeError,
    BadRequestError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    UnavailableError,
)

__all__ = [
    "BackofficeError",
    "BadRequestError",
    "InternalError",
    "NotFoundError",
    "UnauthorizedError",
    "UnavailableError",
]
