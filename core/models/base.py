"""Base model and mixins for all SQLAlchemy models.

Provides:
- Base: Declarative base class for all models
- RecordMixin: Integer primary key and created_at timestamp

The integer key doubles as insertion order, which the cart adaptor relies on
to hand items back in the order they were added.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all storefront models."""
    pass


class RecordMixin:
    """Mixin providing a surrogate key and an insert timestamp.

    Adds:
    - id: autoincrement integer primary key
    - created_at: Timestamp set on insert
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
