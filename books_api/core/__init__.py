"""Core utilities."""
from books_api.core.exceptions import (
    AppException,
    BookNotFoundError,
    ConstraintViolationError,
    ValidationError,
)
from books_api.core.logging import get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    # Exceptions
    "AppException",
    "ValidationError",
    "BookNotFoundError",
    "ConstraintViolationError",
]
