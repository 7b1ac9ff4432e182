"""Bookstore API router — catalog maintenance + order pricing.

- Order pricing through BookstoreCheckout
- Book upsert/lookup against the SQL catalog
- Catalog and purchase process injected via FastAPI Depends
"""

from fastapi import APIRouter, Depends, HTTPException

from core.exceptions import StorefrontError
from verticals.bookstore.checkout import BookstoreCheckout
from verticals.bookstore.models.domain import Book
from verticals.bookstore.models.schemas import (
    BookCreate,
    BookResponse,
    OrderPriceResponse,
    OrderRequest,
)
from verticals.bookstore.purchase import RecordingBuyBookProcess
from verticals.bookstore.repository import BookDatabase, get_book_database

router = APIRouter()


def get_purchase_process() -> RecordingBuyBookProcess:
    """FastAPI dependency for the purchase action."""
    return RecordingBuyBookProcess()


# ============================================================================
# Order Endpoint
# ============================================================================

@router.post("/orders/price", response_model=OrderPriceResponse)
def price_order(
    request: OrderRequest,
    catalog: BookDatabase = Depends(get_book_database),
    process: RecordingBuyBookProcess = Depends(get_purchase_process),
):
    """Total an order and list the ISBNs that could not be resolved.

    A missing ``order`` yields ``{"summary": null}``.
    """
    checkout = BookstoreCheckout(catalog, process)
    try:
        summary = checkout.get_price_for_cart(request.order)
    except StorefrontError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc

    return {"summary": summary.to_dict() if summary else None}


# ============================================================================
# Book Endpoints
# ============================================================================

@router.get("/books/{isbn}", response_model=BookResponse)
def get_book(
    isbn: str,
    catalog: BookDatabase = Depends(get_book_database),
):
    """Look up a single book by ISBN."""
    book = catalog.find_by_isbn(isbn)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return BookResponse(isbn=book.isbn, price=book.price, stock_quantity=book.stock_qty)


@router.put("/books", response_model=BookResponse)
def upsert_book(
    request: BookCreate,
    catalog: BookDatabase = Depends(get_book_database),
):
    """Add a book to the catalog, or update its price and stock."""
    book = catalog.add(
        Book(isbn=request.isbn, price=request.price, stock_qty=request.stock_quantity)
    )
    return BookResponse(isbn=book.isbn, price=book.price, stock_quantity=book.stock_qty)
