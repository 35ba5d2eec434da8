"""Book Pydantic schemas."""
from pydantic import BaseModel

from books_api.schemas.common import BaseSchema


class BookResponse(BaseSchema):
    """A stored book, fields in column order."""

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookEnvelope(BaseModel):
    """Single book response."""

    book: BookResponse


class BookListEnvelope(BaseModel):
    """Book collection response."""

    books: list[BookResponse]
