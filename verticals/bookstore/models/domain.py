"""Value objects for bookstore order totaling."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Book:
    """A catalog entry as seen by the checkout."""

    isbn: str
    price: int
    stock_qty: int = 0


@dataclass(frozen=True)
class PurchaseSummary:
    """Result of pricing one order.

    ``unavailable`` holds the ISBNs the catalog could not resolve.
    """

    total_price: int | float = 0
    unavailable: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_price": self.total_price,
            "unavailable": sorted(self.unavailable),
        }
