"""
Base repository - generic data access shared by every collection.
Services depend on these, which keeps them testable with a throwaway SQLite session.
"""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sellfurniture.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses add collection-specific queries."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_all(self) -> list[ModelType]:
        """Every row in storage-native order (no ORDER BY)."""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def count(self) -> int:
        """Aggregate count; rows are not loaded."""
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity and commit, so the write is acknowledged before we answer."""
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError:
            # Leave the session usable for the caller's next query
            await self.session.rollback()
            raise
        await self.session.refresh(entity)
        return entity
