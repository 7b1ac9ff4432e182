"""Bookstore vertical — availability-aware order totaling.

- BookstoreCheckout pricing isbn -> quantity orders
- SQLAlchemy and in-memory catalogs
- Recording purchase process
- FastAPI router for order pricing and catalog upserts
"""
