"""
Item request repository - request board queries, newest first.
"""

from sqlalchemy import select

from shareit.db.models.item_request import ItemRequest
from shareit.db.repositories.base_repository import BaseRepository


class ItemRequestRepository(BaseRepository[ItemRequest]):
    def __init__(self, session):
        super().__init__(session, ItemRequest)

    async def get_by_requestor(self, requestor_id: int) -> list[ItemRequest]:
        result = await self.session.execute(
            select(ItemRequest)
            .where(ItemRequest.requestor_id == requestor_id)
            .order_by(ItemRequest.created.desc(), ItemRequest.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_other_requestors(
        self, requestor_id: int, offset: int, limit: int
    ) -> list[ItemRequest]:
        """Requests created by everyone except ``requestor_id``."""
        result = await self.session.execute(
            select(ItemRequest)
            .where(ItemRequest.requestor_id != requestor_id)
            .order_by(ItemRequest.created.desc(), ItemRequest.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())
