"""Order totaling against the book catalog.

Resolves each requested ISBN, sums quantity * price for the ones found,
fires one purchase action per resolved line and reports the rest as
unavailable.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from core.exceptions import InvalidOrderError, MissingCollaboratorError
from core.observability.otel_setup import get_tracer
from pricing.ports import Catalog, PurchaseAction
from verticals.bookstore.models.domain import PurchaseSummary

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class BookstoreCheckout:
    """Prices bookstore orders.

    Usage::

        checkout = BookstoreCheckout(BookDatabase(session), RecordingBuyBookProcess())
        summary = checkout.get_price_for_cart({"111": 3, "222": 1})
        if summary.unavailable:
            notify_customer(summary.unavailable)
    """

    def __init__(self, catalog: Catalog, process: PurchaseAction):
        if catalog is None:
            raise MissingCollaboratorError("BookstoreCheckout", "catalog")
        if process is None:
            raise MissingCollaboratorError("BookstoreCheckout", "purchase process")
        self.catalog = catalog
        self.process = process

    def get_price_for_cart(
        self, order: Optional[Mapping[str, int]]
    ) -> Optional[PurchaseSummary]:
        """Total an ``isbn -> quantity`` order.

        Returns None when no order is given; an empty order gives a zero
        summary. Negative quantities are rejected before any lookup.
        """
        if order is None:
            return None

        entries = list(order.items())
        negative = {isbn: qty for isbn, qty in entries if qty < 0}
        if negative:
            raise InvalidOrderError(
                "Order quantities must be >= 0",
                {"negative": negative},
            )

        with tracer.start_as_current_span("bookstore.price_order") as span:
            total = 0
            unavailable: set[str] = set()

            for isbn, quantity in entries:
                book = self.catalog.find_by_isbn(isbn)
                if book is None:
                    logger.info("ISBN %s unavailable", isbn)
                    unavailable.add(isbn)
                    continue

                total += quantity * book.price
                self.process.buy_book(book, quantity)

            span.set_attribute("bookstore.line_count", len(entries))
            span.set_attribute("bookstore.unavailable_count", len(unavailable))
            span.set_attribute("bookstore.total", total)

        logger.debug("Order total %s over %d lines", total, len(entries))
        return PurchaseSummary(total_price=total, unavailable=frozenset(unavailable))
