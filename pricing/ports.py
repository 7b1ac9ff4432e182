"""Collaborator interfaces consumed by the pricing engine and the checkout.

Both cores depend only on these protocols, so tests can hand them
lightweight stand-ins and the SQL-backed implementations stay swappable.
"""

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from pricing.models import Item

if TYPE_CHECKING:
    from verticals.bookstore.models.domain import Book


class PriceRule(Protocol):
    name: str

    def price_to_aggregate(self, items: Sequence[Item]) -> float:
        ...


class Cart(Protocol):
    def add(self, item: Item) -> None:
        ...

    def get_items(self) -> list[Item]:
        ...


class Catalog(Protocol):
    def find_by_isbn(self, isbn: str) -> Optional["Book"]:
        """Return the book, or None when the ISBN is unknown."""
        ...


class PurchaseAction(Protocol):
    def buy_book(self, book: "Book", quantity: int) -> None:
        """Fire-and-forget; the return value is ignored."""
        ...
