"""Dataclass-based pricing configuration.

Delivery bands, the electronics surcharge and the default rule list are
defined as frozen dataclasses. This gives you:
- Sensible defaults matching the published price table
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides from environment variables via StoreConfig.from_env()
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from core.exceptions import ConfigError


class DeliveryKeying(str, Enum):
    """Which count selects the delivery band."""

    LINES = "lines"  # number of item entries
    UNITS = "units"  # sum of item quantities


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeliveryBand:
    """Delivery price for every count up to and including ``max_count``.

    ``max_count=None`` marks the open-ended top band.
    """

    max_count: Optional[int]
    price: float


DEFAULT_DELIVERY_BANDS: tuple[DeliveryBand, ...] = (
    DeliveryBand(max_count=0, price=0.0),
    DeliveryBand(max_count=3, price=5.0),
    DeliveryBand(max_count=10, price=12.5),
    DeliveryBand(max_count=None, price=20.0),
)

DEFAULT_ACTIVE_RULES: tuple[str, ...] = (
    "regular_cost",
    "delivery_price",
    "extra_cost_for_electronics",
)


@dataclass(frozen=True)
class PricingConfig:
    """Price rule thresholds and surcharges.

    Usage::

        config = PricingConfig(delivery_keying=DeliveryKeying.UNITS)
        config.band_for(4)  # 12.5
    """

    delivery_bands: tuple[DeliveryBand, ...] = DEFAULT_DELIVERY_BANDS
    delivery_keying: DeliveryKeying = DeliveryKeying.LINES
    electronics_surcharge: float = 7.5
    active_rules: tuple[str, ...] = DEFAULT_ACTIVE_RULES

    def __post_init__(self):
        bands = self.delivery_bands
        if not bands:
            raise ConfigError("At least one delivery band is required")
        if bands[-1].max_count is not None:
            raise ConfigError(
                "The last delivery band must be open-ended (max_count=None)",
                {"last_max_count": bands[-1].max_count},
            )

        previous = -1
        for band in bands[:-1]:
            if band.max_count is None or band.max_count <= previous:
                raise ConfigError(
                    "Delivery bands must have strictly ascending max_count values",
                    {"bands": [b.max_count for b in bands]},
                )
            previous = band.max_count

        if any(b.price < 0 for b in bands):
            raise ConfigError("Delivery band prices must be >= 0")
        if self.electronics_surcharge < 0:
            raise ConfigError(
                "Electronics surcharge must be >= 0",
                {"electronics_surcharge": self.electronics_surcharge},
            )

    def band_for(self, count: int) -> float:
        """Delivery price for a count; upper bounds are inclusive."""
        for band in self.delivery_bands:
            if band.max_count is None or count <= band.max_count:
                return band.price
        # unreachable: __post_init__ guarantees an open-ended last band
        return self.delivery_bands[-1].price


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StoreConfig:
    """Complete configuration for the storefront.

    Usage::

        config = StoreConfig.from_env()
        rules = build_rules(config.pricing.active_rules, config.pricing)
    """

    pricing: PricingConfig = field(default_factory=PricingConfig)

    @classmethod
    def default(cls) -> "StoreConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "STORE_") -> "StoreConfig":
        """Create config from environment variables.

        Example: STORE_DELIVERY_KEYING=units STORE_ELECTRONICS_SURCHARGE=9.99
        """
        import os

        overrides = {}

        keying = os.getenv(f"{prefix}DELIVERY_KEYING")
        if keying:
            try:
                overrides["delivery_keying"] = DeliveryKeying(keying.strip().lower())
            except ValueError:
                raise ConfigError(
                    f"Invalid {prefix}DELIVERY_KEYING: {keying}",
                    {"allowed": [k.value for k in DeliveryKeying]},
                ) from None

        surcharge = os.getenv(f"{prefix}ELECTRONICS_SURCHARGE")
        if surcharge:
            try:
                overrides["electronics_surcharge"] = float(surcharge)
            except ValueError:
                raise ConfigError(
                    f"Invalid {prefix}ELECTRONICS_SURCHARGE: {surcharge}"
                ) from None

        rules = os.getenv(f"{prefix}ACTIVE_RULES")
        if rules:
            overrides["active_rules"] = tuple(
                name.strip() for name in rules.split(",") if name.strip()
            )

        return cls(pricing=PricingConfig(**overrides))
