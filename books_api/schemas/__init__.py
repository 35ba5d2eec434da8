"""Pydantic schemas and the declarative book validation schemas."""
from books_api.schemas.book import BookEnvelope, BookListEnvelope, BookResponse
from books_api.schemas.book_schema import (
    CREATE_SCHEMA,
    UPDATE_SCHEMA,
    BookSchema,
    FieldRule,
    SchemaMode,
    get_schema,
    validate_book,
)
from books_api.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    MessageResponse,
    StatusResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "StatusResponse",
    # Book
    "BookResponse",
    "BookEnvelope",
    "BookListEnvelope",
    # Validation
    "SchemaMode",
    "FieldRule",
    "BookSchema",
    "CREATE_SCHEMA",
    "UPDATE_SCHEMA",
    "get_schema",
    "validate_book",
]
