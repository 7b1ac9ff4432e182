"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BookCreate(BaseModel):
    isbn: str = Field(..., pattern=r"^[0-9A-Za-z-]{1,13}$")
    price: int = Field(..., ge=0)
    stock_quantity: int = Field(0, ge=0)


class OrderRequest(BaseModel):
    # None means "no order", which is different from an empty order
    order: Optional[dict[str, int]] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class BookResponse(BaseModel):
    isbn: str
    price: int
    stock_quantity: int


class PurchaseSummaryResponse(BaseModel):
    total_price: float
    unavailable: list[str]


class OrderPriceResponse(BaseModel):
    summary: Optional[PurchaseSummaryResponse] = None
