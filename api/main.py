"""Storefront API — FastAPI entry point.

Registers routers and lifecycle hooks. Each vertical adds its own router
under /api/{vertical}/.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from core.database import close_db, init_db
from core.logging_config import setup_logging
from core.observability.otel_setup import setup_otel

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    setup_logging()
    setup_otel()
    init_db()

    logger.info("Storefront API started")
    yield
    close_db()
    logger.info("Storefront API shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Storefront",
    description="Cart pricing under pluggable rules and availability-aware bookstore orders",
    version=VERSION,
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# Routers — verticals register here (their imports also register tables for init_db)
# ---------------------------------------------------------------------------

from verticals.bookstore.router import router as bookstore_router  # noqa: E402
from verticals.marketplace.router import router as marketplace_router  # noqa: E402

app.include_router(marketplace_router, prefix="/api/marketplace", tags=["Marketplace"])
app.include_router(bookstore_router, prefix="/api/bookstore", tags=["Bookstore"])


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}


@app.get("/")
async def root():
    return {
        "name": "Storefront",
        "version": VERSION,
        "docs": "/docs",
        "verticals": ["marketplace", "bookstore"],
    }
