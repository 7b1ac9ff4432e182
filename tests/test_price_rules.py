"""Test the individual price rules and the rule registry."""
import pytest

from core.exceptions import InvalidItemError, UnknownRuleError
from pricing.config import DeliveryKeying, PricingConfig
from pricing.models import Item, ItemType
from pricing.rules import (
    DeliveryPrice,
    ExtraCostForElectronics,
    RegularCost,
    build_rules,
    evaluate_rules,
)


def other(name="X", quantity=1, unit_price=1.0):
    return Item(ItemType.OTHER, name, quantity, unit_price)


def units(n):
    """n separate single-unit lines."""
    return [other(name=f"I{i}") for i in range(n)]


# -- RegularCost --

def test_regular_cost_sums_line_values():
    items = [other("P", 3, 2.0), other("Q", 2, 5.0)]
    assert RegularCost().price_to_aggregate(items) == 3 * 2.0 + 2 * 5.0


def test_regular_cost_empty():
    assert RegularCost().price_to_aggregate([]) == 0


def test_regular_cost_zero_quantity_line():
    assert RegularCost().price_to_aggregate([other("Z", 0, 99.0)]) == 0


# -- DeliveryPrice --

@pytest.mark.parametrize("count, expected", [
    (0, 0.0),
    (1, 5.0),
    (3, 5.0),
    (4, 12.5),
    (10, 12.5),
    (11, 20.0),
])
def test_delivery_bands_by_units(count, expected):
    items = [other("bulk", count, 1.0)] if count else []
    assert DeliveryPrice(keying=DeliveryKeying.UNITS).price_to_aggregate(items) == expected


@pytest.mark.parametrize("count, expected", [
    (0, 0.0),
    (1, 5.0),
    (3, 5.0),
    (4, 12.5),
    (10, 12.5),
    (11, 20.0),
])
def test_delivery_bands_by_lines(count, expected):
    assert DeliveryPrice().price_to_aggregate(units(count)) == expected


def test_delivery_defaults_to_lines():
    assert DeliveryPrice().keying is DeliveryKeying.LINES


def test_delivery_units_count_quantities_not_lines():
    items = [other("A", 2), other("B", 1), other("C", 1)]
    rule = DeliveryPrice(keying=DeliveryKeying.UNITS)
    assert rule.delivery_count(items) == 4
    assert rule.price_to_aggregate(items) == 12.5


def test_delivery_lines_ignore_quantities():
    items = [other("A", 2), other("B", 1), other("C", 1)]
    rule = DeliveryPrice()
    assert rule.delivery_count(items) == 3
    assert rule.price_to_aggregate(items) == 5.0


def test_delivery_keying_from_config():
    config = PricingConfig(delivery_keying=DeliveryKeying.UNITS)
    assert DeliveryPrice(config).keying is DeliveryKeying.UNITS


def test_delivery_explicit_keying_overrides_config():
    config = PricingConfig(delivery_keying=DeliveryKeying.UNITS)
    assert DeliveryPrice(config, keying=DeliveryKeying.LINES).keying is DeliveryKeying.LINES


# -- ExtraCostForElectronics --

def test_no_electronics_no_surcharge():
    assert ExtraCostForElectronics().price_to_aggregate([other("A"), other("B")]) == 0.0


def test_electronics_surcharge_is_flat():
    tv = Item(ItemType.ELECTRONIC, "TV", 1, 100.0)
    phones = Item(ItemType.ELECTRONIC, "Phone", 5, 300.0)
    rule = ExtraCostForElectronics()
    assert rule.price_to_aggregate([other("A"), tv]) == 7.5
    assert rule.price_to_aggregate([tv, phones]) == 7.5


def test_electronics_surcharge_configurable():
    rule = ExtraCostForElectronics(PricingConfig(electronics_surcharge=9.99))
    assert rule.price_to_aggregate([Item(ItemType.ELECTRONIC, "TV", 1, 1.0)]) == 9.99


# -- Item --

def test_item_rejects_negative_quantity():
    with pytest.raises(InvalidItemError):
        Item(ItemType.OTHER, "bad", -1, 1.0)


def test_item_rejects_negative_price():
    with pytest.raises(InvalidItemError):
        Item(ItemType.OTHER, "bad", 1, -0.01)


def test_item_is_immutable():
    item = other()
    with pytest.raises(AttributeError):
        item.quantity = 5


# -- Registry & composition --

def test_build_rules_keeps_order_and_repeats():
    rules = build_rules(["delivery_price", "regular_cost", "delivery_price"])
    assert [r.name for r in rules] == ["delivery_price", "regular_cost", "delivery_price"]


def test_build_rules_passes_config():
    config = PricingConfig(electronics_surcharge=1.0)
    (rule,) = build_rules(["extra_cost_for_electronics"], config)
    assert rule.surcharge == 1.0


def test_build_rules_unknown_name():
    with pytest.raises(UnknownRuleError, match="Unknown price rule: loyalty"):
        build_rules(["regular_cost", "loyalty"])


def test_evaluate_rules_reports_each_contribution():
    items = [other("A", 2, 10.0), Item(ItemType.ELECTRONIC, "TV", 1, 50.0)]
    result = evaluate_rules([RegularCost(), DeliveryPrice(), ExtraCostForElectronics()], items)
    assert [(c.rule_name, c.amount) for c in result.contributions] == [
        ("regular_cost", 70.0),
        ("delivery_price", 5.0),
        ("extra_cost_for_electronics", 7.5),
    ]
    assert result.total == 82.5
    assert result.item_count == 2


def test_evaluate_rules_no_rules():
    result = evaluate_rules([], [other()])
    assert result.total == 0
    assert result.contributions == []
