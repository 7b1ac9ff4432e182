"""SQLAlchemy database engine and session management.

Backs the SQL-based collaborators (cart adaptor, book database) with:
- A module-level engine configured from the environment
- FastAPI dependency injection via get_session()
- Automatic session lifecycle (commit on success, rollback on error)
"""

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

# ---------------------------------------------------------------------------
# Configuration from environment
# ---------------------------------------------------------------------------

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
ECHO_SQL = os.getenv("DB_ECHO", "false").lower() == "true"

# ---------------------------------------------------------------------------
# Engine & session factory
# ---------------------------------------------------------------------------

engine = create_engine(
    DATABASE_URL,
    echo=ECHO_SQL,
    pool_pre_ping=True,
)

session_factory = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------

def get_session() -> Iterator[Session]:
    """Yield a session with automatic commit/rollback.

    Usage in FastAPI routes::

        @router.get("/books/{isbn}")
        def get_book(isbn: str, session: Session = Depends(get_session)):
            return BookDatabase(session).find_by_isbn(isbn)
    """
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


@contextmanager
def session_scope(factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    """Context manager variant for non-FastAPI code (scripts, tests, etc.)."""
    with (factory or session_factory)() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


# ---------------------------------------------------------------------------
# Lifecycle hooks
# ---------------------------------------------------------------------------

def init_db(bind: Optional[Engine] = None) -> None:
    """Create tables for every imported model (dev/test only)."""
    from core.models.base import Base

    Base.metadata.create_all(bind or engine)


def close_db() -> None:
    """Dispose of the connection pool on shutdown."""
    engine.dispose()
