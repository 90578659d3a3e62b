"""
Comment repository - append-only comment log per item.
"""

from sqlalchemy import select

from shareit.db.models.comment import Comment
from shareit.db.repositories.base_repository import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    def __init__(self, session):
        super().__init__(session, Comment)

    async def get_by_item_id(self, item_id: int) -> list[Comment]:
        result = await self.session.execute(
            select(Comment).where(Comment.item_id == item_id).order_by(Comment.created, Comment.id)
        )
        return list(result.unique().scalars().all())
