"""Books API command line.

Usage:
    books-api serve [--host HOST] [--port PORT] [--reload]
    books-api init-db [--seed]
"""
import argparse
import asyncio

from sqlalchemy import select

from books_api.config import settings
from books_api.core.logging import get_logger, setup_logging

logger = get_logger("cli")

SAMPLE_BOOKS = [
    {
        "isbn": "9781451648539",
        "amazon_url": "https://www.amazon.com/dp/1451648537",
        "author": "Walter Isaacson",
        "language": "english",
        "pages": 656,
        "publisher": "Simon & Schuster",
        "title": "Steve Jobs",
        "year": 2011,
    },
    {
        "isbn": "9780307465351",
        "amazon_url": "https://www.amazon.com/dp/0307465357",
        "author": "Chris Guillebeau",
        "language": "english",
        "pages": 304,
        "publisher": "Crown Business",
        "title": (
            "The $100 Startup: Reinvent the Way You Make a Living, "
            "Do What You Love, and Create a New Future"
        ),
        "year": 2012,
    },
]


async def seed_books(books: list[dict]) -> int:
    """Insert sample books whose isbn is not stored yet. Returns rows added."""
    from books_api.database import AsyncSessionLocal
    from books_api.models.book import Book

    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Book.isbn))
        existing = set(result.scalars().all())
        new_books = [Book(**data) for data in books if data["isbn"] not in existing]
        session.add_all(new_books)
        await session.commit()
    return len(new_books)


async def run_init_db(seed: bool) -> None:
    from books_api.database import close_db, init_db

    try:
        await init_db()
        logger.info("Tables created")
        if seed:
            added = await seed_books(SAMPLE_BOOKS)
            logger.info(f"Seeded {added} book(s)")
    finally:
        await close_db()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="books-api",
        description="Books API service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=settings.host, help="Bind address")
    serve.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    init_db = subparsers.add_parser("init-db", help="Create the books table")
    init_db.add_argument("--seed", action="store_true", help="Insert sample books")

    args = parser.parse_args()
    setup_logging(settings.log_level)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("books_api.main:app", host=args.host, port=args.port, reload=args.reload)
    elif args.command == "init-db":
        asyncio.run(run_init_db(args.seed))


if __name__ == "__main__":
    main()
