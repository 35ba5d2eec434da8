"""Book API routes."""
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from books_api.core.exceptions import BookNotFoundError, ValidationError
from books_api.core.logging import get_logger
from books_api.database import get_db
from books_api.schemas.book import BookEnvelope, BookListEnvelope, BookResponse
from books_api.schemas.book_schema import SchemaMode, validate_book
from books_api.schemas.common import ErrorResponse, MessageResponse
from books_api.services.book_repository import BookRepository

logger = get_logger("api.books")

router = APIRouter(prefix="/books", tags=["Books"])


def get_book_repository(db: AsyncSession = Depends(get_db)) -> BookRepository:
    """Dependency provider for BookRepository."""
    return BookRepository(db)


def missing_book(isbn: str) -> BookNotFoundError:
    # The unbalanced quote is part of the published error text
    return BookNotFoundError(isbn, message=f"There is no book with an isbn '{isbn}")


def check_payload(payload: Any, mode: SchemaMode) -> dict:
    """Raise ValidationError unless ``payload`` satisfies the ``mode`` schema."""
    violations = validate_book(payload, mode)
    if violations:
        logger.debug(f"Rejected {mode.value} payload: {violations}")
        raise ValidationError(violations)
    return payload


@router.get("", response_model=BookListEnvelope)
async def list_books(
    repo: BookRepository = Depends(get_book_repository),
) -> dict:
    """List all books."""
    books = await repo.list_all()
    return {"books": [BookResponse.model_validate(book) for book in books]}


@router.get(
    "/{isbn}",
    response_model=BookEnvelope,
    responses={404: {"model": ErrorResponse}},
)
async def get_book(
    isbn: str,
    repo: BookRepository = Depends(get_book_repository),
) -> dict:
    """Get a single book by isbn."""
    book = await repo.find_by_isbn(isbn)
    if book is None:
        raise missing_book(isbn)

    return {"book": BookResponse.model_validate(book)}


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_book(
    payload: Any = Body(None),
    repo: BookRepository = Depends(get_book_repository),
) -> dict:
    """Create a book from a complete payload."""
    book_data = check_payload(payload, SchemaMode.CREATE)
    book = await repo.create(book_data)
    return {"book": BookResponse.model_validate(book)}


@router.put(
    "/{isbn}",
    response_model=BookEnvelope,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_book(
    isbn: str,
    payload: Any = Body(None),
    repo: BookRepository = Depends(get_book_repository),
) -> dict:
    """Update the non-key fields of a book."""
    book_data = check_payload(payload, SchemaMode.UPDATE)
    try:
        book = await repo.update(isbn, book_data)
    except BookNotFoundError as exc:
        raise missing_book(isbn) from exc

    return {"book": BookResponse.model_validate(book)}


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_book(
    isbn: str,
    repo: BookRepository = Depends(get_book_repository),
) -> dict:
    """Delete a book by isbn."""
    await repo.delete(isbn)
    return {"message": "Book deleted"}
