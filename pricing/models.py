"""Cart line items priced by the rules in ``pricing.rules``."""

from dataclasses import dataclass
from enum import Enum

from core.exceptions import InvalidItemError


class ItemType(str, Enum):
    OTHER = "other"
    ELECTRONIC = "electronic"


@dataclass(frozen=True)
class Item:
    """An immutable cart line: ``quantity`` units of ``name`` at ``unit_price``."""

    type: ItemType
    name: str
    quantity: int
    unit_price: float

    def __post_init__(self):
        if self.quantity < 0:
            raise InvalidItemError(
                f"Item quantity must be >= 0, got {self.quantity}",
                {"name": self.name, "quantity": self.quantity},
            )
        if self.unit_price < 0:
            raise InvalidItemError(
                f"Item unit price must be >= 0, got {self.unit_price}",
                {"name": self.name, "unit_price": self.unit_price},
            )

    @property
    def line_value(self) -> float:
        return self.quantity * self.unit_price
