"""Application exceptions and their HTTP mapping.

Services raise these; ``sellfurniture.main`` turns them into ``{"error": message}``
responses with the class's status code.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for all API errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Raised when request input is missing or malformed."""

    status_code = 400


class ConflictError(AppError):
    """Raised when registering an email that already exists."""

    status_code = 400


class InvalidCredentialsError(AppError):
    """Raised on failed login. Same message for unknown email and wrong password."""

    status_code = 400

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class AuthenticationRequiredError(AppError):
    """Raised when a protected route is called without a bearer token."""

    status_code = 401

    def __init__(self, message: str = "Access denied. No token provided."):
        super().__init__(message)


class ForbiddenError(AppError):
    """Raised when a bearer token fails signature or expiry checks."""

    status_code = 403

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a referenced record does not exist."""

    status_code = 404


class StoreError(AppError):
    """Raised when the persistence layer (or hashing) fails."""

    status_code = 500


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Convert driver and connection failures into StoreError(message).

    The driver exception is logged with traceback; only ``message`` reaches the client.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        logger.exception("%s: %s", message, exc.__class__.__name__)
        raise StoreError(message) from exc
