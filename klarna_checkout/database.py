"""
Async database access for placement records and the audit trail.

The order data itself is never stored here; only OrderPlacement rows and their
AuditLog entries are.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from klarna_checkout.config import settings
from klarna_checkout.models.records import Base


def build_engine(url: str | None = None) -> AsyncEngine:
    return create_async_engine(url or settings.database_url, echo=settings.database_echo)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Placement rows are read back after the service commits
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine()
async_session = build_sessionmaker(engine)


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create the order_placements and audit_logs tables if they are missing."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session
