"""Book model."""
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from books_api.database import Base

# Column order of the JSON representation
BOOK_FIELDS = (
    "isbn",
    "amazon_url",
    "author",
    "language",
    "pages",
    "publisher",
    "title",
    "year",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Book(Base):
    """A book, identified by its ISBN."""

    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(Text, primary_key=True)
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(64), nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    # Listing order; set client-side for microsecond resolution on SQLite
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Book(isbn={self.isbn}, title={self.title})>"
