"""
Base repository - generic data access shared by every entity store.
Challenge: Consistent data access, testability, query shape in one place.
"""

from typing import Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from shareit.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific finders."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        """Fetch single entity by primary key."""
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.unique().scalar_one_or_none()

    async def exists_by_id(self, id: int) -> bool:
        result = await self.session.execute(select(exists().where(self.model.id == id)))
        return bool(result.scalar())

    async def get_many(self) -> list[ModelType]:
        """List all, ordered by id."""
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.unique().scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. The request-scoped session commits."""
        self.session.add(entity)
        await self.session.flush()  # Get ID without committing
        await self.session.refresh(entity)
        return entity

    async def save(self, entity: ModelType) -> ModelType:
        """Flush pending changes of an already tracked entity."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        await self.session.delete(entity)
        await self.session.flush()
