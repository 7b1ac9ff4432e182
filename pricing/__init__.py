"""Pluggable price rules for cart totals.

Each rule is a stateless function of the full item list; the pricing engine
sums whatever rules it is configured with. Configuration, the rule registry
and the collaborator protocols live alongside the rules.
"""

from pricing.config import (
    DeliveryBand,
    DeliveryKeying,
    PricingConfig,
    StoreConfig,
)
from pricing.models import Item, ItemType
from pricing.rules import (
    RULE_REGISTRY,
    DeliveryPrice,
    ExtraCostForElectronics,
    PriceBreakdown,
    RegularCost,
    RuleContribution,
    build_rules,
    evaluate_rules,
)

__all__ = [
    "DeliveryBand",
    "DeliveryKeying",
    "DeliveryPrice",
    "ExtraCostForElectronics",
    "Item",
    "ItemType",
    "PriceBreakdown",
    "PricingConfig",
    "RULE_REGISTRY",
    "RegularCost",
    "RuleContribution",
    "StoreConfig",
    "build_rules",
    "evaluate_rules",
]
