"""
Comment service - comments are allowed only after a completed, approved rental.
"""

import logging
from datetime import datetime

from shareit.core.exceptions import NotFoundError, ValidationError
from shareit.db.models.comment import Comment
from shareit.db.repositories.booking_repository import BookingRepository
from shareit.db.repositories.comment_repository import CommentRepository
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.schemas.comment import CommentCreate, CommentResponse
from shareit.services.mappers import comment_to_response

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(
        self,
        comment_repo: CommentRepository,
        user_repo: UserRepository,
        item_repo: ItemRepository,
        booking_repo: BookingRepository,
    ):
        self.comment_repo = comment_repo
        self.user_repo = user_repo
        self.item_repo = item_repo
        self.booking_repo = booking_repo

    async def add_comment(self, item_id: int, author_id: int, data: CommentCreate) -> CommentResponse:
        logger.info("Adding comment to item %s by user %s", item_id, author_id)
        author = await self.user_repo.get_by_id(author_id)
        if author is None:
            raise NotFoundError("User not found")
        if not await self.item_repo.exists_by_id(item_id):
            raise NotFoundError("Item not found")

        now = datetime.now()
        if not await self.booking_repo.find_past_approved(item_id, author_id, now):
            logger.warning("User %s has no completed rental of item %s", author_id, item_id)
            raise ValidationError("Cannot comment on an item you have not rented")

        comment = Comment(text=data.text, item_id=item_id, author=author, created=now)
        comment = await self.comment_repo.add(comment)
        logger.info("Comment %s added to item %s", comment.id, item_id)
        return comment_to_response(comment)
