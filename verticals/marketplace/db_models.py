"""SQLAlchemy models for the marketplace vertical."""

from sqlalchemy import Enum as SAEnum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, RecordMixin
from pricing.models import Item, ItemType


class CartItem(RecordMixin, Base):
    """One persisted cart line."""

    __tablename__ = "cart_items"

    type: Mapped[ItemType] = mapped_column(
        SAEnum(ItemType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)

    @classmethod
    def from_item(cls, item: Item) -> "CartItem":
        return cls(
            type=item.type,
            name=item.name,
            quantity=item.quantity,
            unit_price=item.unit_price,
        )

    def to_item(self) -> Item:
        return Item(
            type=self.type,
            name=self.name,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )
