"""Pricing engine: a cart plus an ordered list of price rules."""

from __future__ import annotations

import logging
from typing import Iterable

from core.exceptions import MissingCollaboratorError
from core.observability.otel_setup import get_tracer
from pricing.models import Item
from pricing.ports import Cart, PriceRule
from pricing.rules import PriceBreakdown, evaluate_rules

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class PricingEngine:
    """Totals a cart under a configurable set of price rules.

    Usage::

        engine = PricingEngine(cart, [RegularCost(), DeliveryPrice()])
        engine.add_to_cart(Item(ItemType.OTHER, "Notebook", 2, 10.0))
        engine.calculate()  # 25.0
    """

    def __init__(self, cart: Cart, rules: Iterable[PriceRule]):
        if cart is None:
            raise MissingCollaboratorError("PricingEngine", "cart")
        if rules is None:
            raise MissingCollaboratorError("PricingEngine", "rule list")
        rules = list(rules)
        for position, rule in enumerate(rules):
            if rule is None:
                raise MissingCollaboratorError("PricingEngine", f"rule at position {position}")

        self.cart = cart
        self.rules = rules

    def breakdown(self) -> PriceBreakdown:
        """Per-rule contributions over a single read of the cart."""
        with tracer.start_as_current_span("pricing.calculate") as span:
            items = self.cart.get_items()
            result = evaluate_rules(self.rules, items)

            span.set_attribute("pricing.rule_count", len(self.rules))
            span.set_attribute("pricing.item_count", result.item_count)
            span.set_attribute("pricing.total", result.total)

        logger.debug(
            "Cart total %.2f from %d rules over %d items",
            result.total, len(self.rules), result.item_count,
        )
        return result

    def calculate(self) -> float:
        return self.breakdown().total

    def add_to_cart(self, item: Item) -> None:
        self.cart.add(item)
