"""Shopping cart implementations.

ShoppingCart keeps lines in memory; ShoppingCartAdaptor persists them through
a SQLAlchemy session. Both satisfy the ``pricing.ports.Cart`` protocol.
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from core.exceptions import MissingCollaboratorError
from pricing.models import Item
from verticals.marketplace.db_models import CartItem

logger = logging.getLogger(__name__)


class ShoppingCart:
    """In-memory cart."""

    def __init__(self):
        self._items: list[Item] = []

    def add(self, item: Item) -> None:
        self._items.append(item)

    def get_items(self) -> list[Item]:
        return list(self._items)

    def number_of_items(self) -> int:
        return len(self._items)


class ShoppingCartAdaptor:
    """Database-backed cart.

    Items come back in insertion order. The caller owns the session and its
    transaction; ``add`` and ``reset`` only flush.
    """

    def __init__(self, session: Session):
        if session is None:
            raise MissingCollaboratorError("ShoppingCartAdaptor", "session")
        self.session = session

    def add(self, item: Item) -> None:
        self.session.add(CartItem.from_item(item))
        self.session.flush()
        logger.debug("Added %s x%d to cart", item.name, item.quantity)

    def get_items(self) -> list[Item]:
        stmt = select(CartItem).order_by(CartItem.id)
        return [row.to_item() for row in self.session.scalars(stmt).all()]

    def number_of_items(self) -> int:
        """Number of stored lines, not units."""
        stmt = select(func.count()).select_from(CartItem)
        return self.session.execute(stmt).scalar() or 0

    def reset(self) -> None:
        """Remove every stored line."""
        self.session.execute(delete(CartItem))
        self.session.flush()
