"""Bookstore catalog — ISBN lookups for the checkout.

BookDatabase reads the ``books`` table through a SQLAlchemy session;
InMemoryBookDatabase is a dict-backed equivalent for scripts and tests.
Both satisfy ``pricing.ports.Catalog``.
"""

from typing import Iterable, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from core.database import get_session
from core.exceptions import MissingCollaboratorError
from verticals.bookstore.models.db_models import BookRecord
from verticals.bookstore.models.domain import Book


# ---------------------------------------------------------------------------
# In-memory catalog
# ---------------------------------------------------------------------------

class InMemoryBookDatabase:
    """Dict-backed catalog keyed by ISBN."""

    def __init__(self, books: Iterable[Book] = ()):
        self._books: dict[str, Book] = {}
        for book in books:
            self.add(book)

    def add(self, book: Book) -> Book:
        self._books[book.isbn] = book
        return book

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)


# ---------------------------------------------------------------------------
# SQL catalog
# ---------------------------------------------------------------------------

class BookDatabase:
    """Catalog over the ``books`` table."""

    def __init__(self, session: Session):
        if session is None:
            raise MissingCollaboratorError("BookDatabase", "session")
        self.session = session

    def _get_record(self, isbn: str) -> Optional[BookRecord]:
        stmt = select(BookRecord).where(BookRecord.isbn == isbn)
        return self.session.scalars(stmt).one_or_none()

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        record = self._get_record(isbn)
        return record.to_book() if record else None

    def add(self, book: Book) -> Book:
        """Insert the book, or update price and stock if the ISBN exists."""
        record = self._get_record(book.isbn)
        if record is None:
            record = BookRecord(
                isbn=book.isbn,
                price=book.price,
                stock_quantity=book.stock_qty,
            )
            self.session.add(record)
        else:
            record.price = book.price
            record.stock_quantity = book.stock_qty

        self.session.flush()
        return record.to_book()


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------

def get_book_database(
    session: Session = Depends(get_session),
) -> BookDatabase:
    """FastAPI dependency for BookDatabase."""
    return BookDatabase(session)
