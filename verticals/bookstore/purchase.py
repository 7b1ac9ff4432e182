"""Purchase actions triggered by the checkout for each resolved order line."""

import logging

from verticals.bookstore.models.domain import Book

logger = logging.getLogger(__name__)


class RecordingBuyBookProcess:
    """Records each purchase and logs it. Stock levels are left untouched."""

    def __init__(self):
        self.purchases: list[tuple[str, int]] = []

    def buy_book(self, book: Book, quantity: int) -> None:
        self.purchases.append((book.isbn, quantity))
        logger.info("Purchased %d x %s at %d", quantity, book.isbn, book.price)
