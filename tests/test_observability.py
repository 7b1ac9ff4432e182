"""Test tracing spans and logging setup."""
import logging

from opentelemetry import trace
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from core.logging_config import setup_logging
from core.observability.otel_setup import setup_otel
from pricing.models import Item, ItemType
from pricing.rules import DeliveryPrice, RegularCost
from verticals.bookstore.checkout import BookstoreCheckout
from verticals.bookstore.models.domain import Book
from verticals.bookstore.purchase import RecordingBuyBookProcess
from verticals.bookstore.repository import InMemoryBookDatabase
from verticals.marketplace.cart import ShoppingCart
from verticals.marketplace.engine import PricingEngine


def test_spans_for_pricing_and_orders():
    exporter = InMemorySpanExporter()
    setup_otel(service_name="storefront-test", exporter=exporter)

    cart = ShoppingCart()
    cart.add(Item(ItemType.OTHER, "Notebook", 2, 10.0))
    PricingEngine(cart, [RegularCost(), DeliveryPrice()]).calculate()

    catalog = InMemoryBookDatabase([Book("A", 10, 5)])
    BookstoreCheckout(catalog, RecordingBuyBookProcess()).get_price_for_cart({"A": 1, "B": 1})

    trace.get_tracer_provider().force_flush()
    spans = {s.name: s for s in exporter.get_finished_spans()}

    pricing = spans["pricing.calculate"]
    assert pricing.attributes["pricing.rule_count"] == 2
    assert pricing.attributes["pricing.item_count"] == 1
    assert pricing.attributes["pricing.total"] == 25.0

    order = spans["bookstore.price_order"]
    assert order.attributes["bookstore.line_count"] == 2
    assert order.attributes["bookstore.unavailable_count"] == 1
    assert order.attributes["bookstore.total"] == 10


def test_unavailable_isbn_logged(caplog):
    caplog.set_level(logging.INFO, logger="verticals.bookstore.checkout")
    checkout = BookstoreCheckout(InMemoryBookDatabase(), RecordingBuyBookProcess())
    checkout.get_price_for_cart({"978-missing": 1})
    assert "ISBN 978-missing unavailable" in caplog.text


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    level = root.level
    before = len(root.handlers)
    try:
        setup_logging("DEBUG")
        after_first = len(root.handlers)
        setup_logging("WARNING")
        assert len(root.handlers) == after_first
        assert after_first - before <= 1
        assert root.level == logging.WARNING
    finally:
        root.setLevel(level)
