"""Marketplace API router — cart quotes under configurable price rules.

Each quote builds a throwaway in-memory cart from the request body, so the
endpoint stays stateless.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from core.exceptions import ConfigError, StorefrontError
from pricing.config import StoreConfig
from pricing.rules import RULE_REGISTRY, build_rules
from verticals.marketplace.cart import ShoppingCart
from verticals.marketplace.engine import PricingEngine
from verticals.marketplace.schemas import QuoteRequest, QuoteResponse, RulesResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def get_store_config() -> StoreConfig:
    """FastAPI dependency for the active store configuration."""
    try:
        return StoreConfig.from_env()
    except ConfigError as exc:
        logger.error("Store configuration rejected: %s", exc.message)
        raise HTTPException(status_code=500, detail=exc.message) from exc


@router.get("/rules", response_model=RulesResponse)
def list_rules(config: StoreConfig = Depends(get_store_config)):
    """List every registered price rule and the default rule order."""
    return RulesResponse(
        available=sorted(RULE_REGISTRY),
        default=list(config.pricing.active_rules),
    )


@router.post("/quote", response_model=QuoteResponse)
def quote(request: QuoteRequest, config: StoreConfig = Depends(get_store_config)):
    """Price the given items with the requested (or default) rules."""
    names = request.rules if request.rules is not None else config.pricing.active_rules
    try:
        rules = build_rules(names, config.pricing)
        cart = ShoppingCart()
        engine = PricingEngine(cart, rules)
        for item in request.items:
            engine.add_to_cart(item.to_item())
    except StorefrontError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc

    return engine.breakdown().to_dict()
