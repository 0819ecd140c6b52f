"""
Async database engine and session management.
The engine is owned by a Database object created in the app lifespan and kept on app.state;
request handlers get a request-scoped session through the get_db dependency.
"""

import logging
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from sellfurniture.config import Settings
from sellfurniture.db.base import Base
import sellfurniture.db.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def _engine_options(settings: Settings) -> dict:
    """Pool options per backend. SQLite (tests, local runs) shares one connection."""
    if settings.database_url.startswith("sqlite"):
        return {"poolclass": StaticPool}
    return {
        "pool_pre_ping": True,  # Verify connections before use
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
    }


class Database:
    """Owns the engine (connection pool) and the session factory."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        engine = create_async_engine(
            settings.database_url,
            echo=settings.debug,
            **_engine_options(settings),
        )
        return cls(engine)

    async def connect(self) -> None:
        """Open a connection and make sure all tables exist. Raises if the store is unreachable."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected to database (%s)", self.engine.url.render_as_string(hide_password=True))

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections released")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request. Ensures rollback on error, close on exit."""
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# Type alias for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
