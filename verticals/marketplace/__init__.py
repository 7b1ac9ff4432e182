"""Marketplace vertical — cart pricing under pluggable rules.

- In-memory and SQLAlchemy-backed carts
- PricingEngine summing independent price rules
- FastAPI router for stateless quotes
"""
