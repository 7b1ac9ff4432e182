"""Pydantic schemas for the marketplace API."""

from typing import Optional

from pydantic import BaseModel, Field

from pricing.models import Item, ItemType


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class ItemIn(BaseModel):
    type: ItemType = ItemType.OTHER
    name: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., ge=0)
    unit_price: float = Field(..., ge=0)

    def to_item(self) -> Item:
        return Item(
            type=self.type,
            name=self.name,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )


class QuoteRequest(BaseModel):
    items: list[ItemIn] = Field(default_factory=list)
    rules: Optional[list[str]] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class ContributionOut(BaseModel):
    rule: str
    amount: float


class QuoteResponse(BaseModel):
    total: float
    item_count: int
    contributions: list[ContributionOut]


class RulesResponse(BaseModel):
    available: list[str]
    default: list[str]
