"""Pure-function price rules.

Rules are stateless: (items) -> amount. No database, no side effects and no
knowledge of other rules' output. This makes them:
- Trivially testable (pure input/output)
- Composable (any subset, any order, repeats allowed)
- Order-independent (the total is a plain sum)

Example domain: an online marketplace adding delivery and electronics
surcharges on top of the regular item cost.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from core.exceptions import UnknownRuleError
from pricing.config import DeliveryKeying, PricingConfig
from pricing.models import Item, ItemType


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleContribution:
    """Amount a single rule adds to the total."""

    rule_name: str
    amount: float


@dataclass
class PriceBreakdown:
    """Aggregate of every configured rule over one item snapshot."""

    contributions: list[RuleContribution]
    item_count: int = 0
    total: float = 0.0

    def __post_init__(self):
        self.total = sum(c.amount for c in self.contributions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "item_count": self.item_count,
            "contributions": [
                {"rule": c.rule_name, "amount": c.amount}
                for c in self.contributions
            ],
        }


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

class RegularCost:
    """Sum of quantity * unit price over every item."""

    name = "regular_cost"

    def price_to_aggregate(self, items: Sequence[Item]) -> float:
        return sum((item.line_value for item in items), 0.0)


class DeliveryPrice:
    """Stepped delivery surcharge.

    The band is picked by number of item entries (default) or by total
    units, depending on ``keying``. Band upper bounds are inclusive.
    """

    name = "delivery_price"

    def __init__(
        self,
        config: PricingConfig | None = None,
        keying: DeliveryKeying | None = None,
    ):
        self.config = config or PricingConfig()
        self.keying = keying or self.config.delivery_keying

    def delivery_count(self, items: Sequence[Item]) -> int:
        if self.keying is DeliveryKeying.LINES:
            return len(items)
        return sum(item.quantity for item in items)

    def price_to_aggregate(self, items: Sequence[Item]) -> float:
        return self.config.band_for(self.delivery_count(items))


class ExtraCostForElectronics:
    """Flat surcharge when the cart holds any electronic item."""

    name = "extra_cost_for_electronics"

    def __init__(self, config: PricingConfig | None = None):
        self.surcharge = (config or PricingConfig()).electronics_surcharge

    def price_to_aggregate(self, items: Sequence[Item]) -> float:
        if any(item.type is ItemType.ELECTRONIC for item in items):
            return self.surcharge
        return 0.0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

RuleFactory = Callable[[PricingConfig], Any]

RULE_REGISTRY: dict[str, RuleFactory] = {
    RegularCost.name: lambda config: RegularCost(),
    DeliveryPrice.name: lambda config: DeliveryPrice(config),
    ExtraCostForElectronics.name: lambda config: ExtraCostForElectronics(config),
}


def build_rules(
    names: Iterable[str],
    config: PricingConfig | None = None,
) -> list:
    """Instantiate rules by name, keeping order and repeats.

    Example::

        rules = build_rules(["regular_cost", "delivery_price"])
        engine = PricingEngine(cart, rules)
    """
    config = config or PricingConfig()
    rules = []
    for name in names:
        factory = RULE_REGISTRY.get(name)
        if factory is None:
            raise UnknownRuleError(name, sorted(RULE_REGISTRY))
        rules.append(factory(config))
    return rules


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(rules: Sequence, items: Sequence[Item]) -> PriceBreakdown:
    """Apply every rule to the same item snapshot.

    No rule sees another's output, so the rules can be evaluated in any
    order and the total stays the same.
    """
    snapshot = tuple(items)
    return PriceBreakdown(
        contributions=[
            RuleContribution(
                rule_name=getattr(rule, "name", type(rule).__name__),
                amount=rule.price_to_aggregate(snapshot),
            )
            for rule in rules
        ],
        item_count=len(snapshot),
    )
