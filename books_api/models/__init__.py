"""SQLAlchemy models."""
from books_api.models.book import BOOK_FIELDS, Book

__all__ = [
    "Book",
    "BOOK_FIELDS",
]
