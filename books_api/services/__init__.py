"""Business logic services."""
from books_api.services.book_repository import BookRepository

__all__ = [
    "BookRepository",
]
