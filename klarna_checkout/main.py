"""
Klarna Checkout: order payload builder and placement API.

Serializes storefront orders into Klarna Payments requests (US or UK/VAT
pricing), places them with an authorization token and keeps an audit trail of
every placement attempt.

Start the server:
    uvicorn klarna_checkout.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from klarna_checkout.api.health import router as health_router
from klarna_checkout.api.orders import router as orders_router
from klarna_checkout.api.placements import router as placements_router
from klarna_checkout.config import settings
from klarna_checkout.database import init_db

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    await init_db()
    yield


app = FastAPI(
    title="Klarna Checkout",
    description=(
        "Builds Klarna Payments order payloads from storefront orders and places "
        "them using customer authorization tokens."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(orders_router, prefix="/api")
app.include_router(placements_router, prefix="/api")
