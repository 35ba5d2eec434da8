"""Custom exceptions for the application."""
from typing import Union


class AppException(Exception):
    """Base application exception.

    ``status_code`` is the HTTP status the exception handler responds with;
    ``message`` is rendered verbatim as ``{"error": {"message": ...}}``.
    """

    status_code: int = 400

    def __init__(
        self,
        message: Union[str, list[str]],
        error_code: str = "APP_ERROR",
    ):
        self.message = message
        self.error_code = error_code
        super().__init__(message if isinstance(message, str) else "; ".join(message))


class ValidationError(AppException):
    """Payload failed schema validation."""

    status_code = 400

    def __init__(self, violations: list[str]):
        super().__init__(list(violations), error_code="VALIDATION_ERROR")


class BookNotFoundError(AppException):
    """No book row matches the requested isbn."""

    status_code = 404

    def __init__(self, isbn: str, message: str = ""):
        super().__init__(
            message or f"There is no book with an isbn {isbn}",
            error_code="NOT_FOUND",
        )
        self.isbn = isbn


class ConstraintViolationError(AppException):
    """Insert rejected by a table constraint (duplicate isbn)."""

    status_code = 409

    def __init__(self, isbn: str):
        super().__init__(
            f"There is already a book with an isbn {isbn}",
            error_code="CONSTRAINT_VIOLATION",
        )
        self.isbn = isbn
