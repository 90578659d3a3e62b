"""
Item repository - item data access and search.
Challenge: Avoid N+1 on owners (joined eager load) and on request enrichment (bulk lookup).
"""

from sqlalchemy import or_, select

from shareit.db.models.item import Item
from shareit.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Item-specific queries."""

    def __init__(self, session):
        super().__init__(session, Item)

    async def get_by_owner(self, owner_id: int) -> list[Item]:
        result = await self.session.execute(
            select(Item).where(Item.owner_id == owner_id).order_by(Item.id)
        )
        return list(result.unique().scalars().all())

    async def search_available(self, text: str) -> list[Item]:
        """Case-insensitive substring match on name or description, available items only."""
        result = await self.session.execute(
            select(Item)
            .where(
                Item.available.is_(True),
                or_(
                    Item.name.icontains(text, autoescape=True),
                    Item.description.icontains(text, autoescape=True),
                ),
            )
            .order_by(Item.id)
        )
        return list(result.unique().scalars().all())

    async def get_by_request_ids(self, request_ids: list[int]) -> list[Item]:
        """All items created in response to any of the given requests, in one query."""
        if not request_ids:
            return []
        result = await self.session.execute(
            select(Item).where(Item.request_id.in_(request_ids)).order_by(Item.id)
        )
        return list(result.unique().scalars().all())
