"""Book repository: all data access for the books table."""
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from books_api.core.exceptions import BookNotFoundError, ConstraintViolationError
from books_api.core.logging import get_logger
from books_api.models.book import BOOK_FIELDS, Book

logger = get_logger("repository")


class BookRepository:
    """Repository for book persistence, keyed by isbn.

    Each write commits before returning; no operation spans more than one
    request-level transaction.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Book]:
        """Get all books in insertion order."""
        result = await self.db.execute(
            select(Book).order_by(Book.created_at, Book.isbn)
        )
        return list(result.scalars().all())

    async def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by isbn, or None."""
        return await self.db.get(Book, isbn)

    async def create(self, book_data: dict[str, Any]) -> Book:
        """Insert a new book.

        Raises ConstraintViolationError when the isbn is already stored.
        """
        book = Book(**{field: book_data[field] for field in BOOK_FIELDS})
        self.db.add(book)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            isbn = book_data["isbn"]
            logger.warning(f"Rejected duplicate isbn {isbn}: {exc.orig}")
            raise ConstraintViolationError(isbn) from exc

        logger.info(f"Created book {book.isbn}")
        return book

    async def update(self, isbn: str, book_data: dict[str, Any]) -> Book:
        """Apply the supplied non-key fields to the book with this isbn."""
        book = await self.find_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError(isbn)

        for field in BOOK_FIELDS:
            if field != "isbn" and field in book_data:
                setattr(book, field, book_data[field])

        await self.db.commit()
        await self.db.refresh(book)
        logger.info(f"Updated book {isbn}")
        return book

    async def delete(self, isbn: str) -> None:
        """Delete the book with this isbn."""
        result = await self.db.execute(delete(Book).where(Book.isbn == isbn))
        if result.rowcount == 0:
            raise BookNotFoundError(isbn)

        await self.db.commit()
        logger.info(f"Deleted book {isbn}")
