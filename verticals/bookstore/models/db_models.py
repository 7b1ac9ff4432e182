"""SQLAlchemy models for the bookstore vertical."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, RecordMixin
from verticals.bookstore.models.domain import Book


class BookRecord(RecordMixin, Base):
    """A book in the catalog."""

    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(String(13), unique=True, nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def to_book(self) -> Book:
        return Book(isbn=self.isbn, price=self.price, stock_qty=self.stock_quantity)
