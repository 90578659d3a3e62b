"""
Item service - business logic for the item catalog.
Challenge: Ownership checks on update; owner-only booking context on read.
Design: Service depends on repositories; controllers stay thin.
"""

import logging
from datetime import datetime

from shareit.core.exceptions import ForbiddenError, NotFoundError
from shareit.db.models.item import Item
from shareit.db.repositories.booking_repository import BookingRepository
from shareit.db.repositories.comment_repository import CommentRepository
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.item_request_repository import ItemRequestRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from shareit.services.mappers import item_to_response

logger = logging.getLogger(__name__)


class ItemService:
    """Handles item use cases: create, update, detail, owner listing, search."""

    def __init__(
        self,
        item_repo: ItemRepository,
        user_repo: UserRepository,
        booking_repo: BookingRepository,
        comment_repo: CommentRepository,
        request_repo: ItemRequestRepository,
    ):
        self.item_repo = item_repo
        self.user_repo = user_repo
        self.booking_repo = booking_repo
        self.comment_repo = comment_repo
        self.request_repo = request_repo

    async def create(self, data: ItemCreate, owner_id: int) -> ItemResponse:
        logger.info("Creating item '%s' for user %s", data.name, owner_id)
        owner = await self.user_repo.get_by_id(owner_id)
        if owner is None:
            logger.warning("Owner %s not found", owner_id)
            raise NotFoundError("User not found")
        if data.request_id is not None and not await self.request_repo.exists_by_id(data.request_id):
            logger.warning("Request %s not found", data.request_id)
            raise NotFoundError("Request not found")

        item = Item(
            name=data.name,
            description=data.description,
            available=data.available,
            owner=owner,
            request_id=data.request_id,
        )
        item = await self.item_repo.add(item)
        return item_to_response(item)

    async def update(self, item_id: int, data: ItemUpdate, owner_id: int) -> ItemResponse:
        """Overwrite only the fields that are not null. Owner only."""
        logger.info("Updating item %s by user %s", item_id, owner_id)
        item = await self.item_repo.get_by_id(item_id)
        if item is None:
            raise NotFoundError("Item not found")
        if item.owner_id != owner_id:
            logger.warning("User %s tried to update item %s owned by %s", owner_id, item_id, item.owner_id)
            raise ForbiddenError("Only the owner can edit an item")

        if data.name is not None:
            item.name = data.name
        if data.description is not None:
            item.description = data.description
        if data.available is not None:
            item.available = data.available
        item = await self.item_repo.save(item)
        return item_to_response(item)

    async def get_by_id(self, item_id: int, user_id: int) -> ItemResponse:
        """Item with comments; the owner also sees the last and next approved bookings."""
        logger.info("User %s requests item %s", user_id, item_id)
        item = await self.item_repo.get_by_id(item_id)
        if item is None:
            raise NotFoundError("Item not found")

        comments = await self.comment_repo.get_by_item_id(item_id)
        logger.debug("Item %s has %d comments", item_id, len(comments))
        if item.owner_id != user_id:
            return item_to_response(item, comments)

        now = datetime.now()
        return item_to_response(
            item,
            comments,
            last_booking=await self.booking_repo.find_last_approved(item_id, now),
            next_booking=await self.booking_repo.find_next_approved(item_id, now),
        )

    async def list_by_owner(self, owner_id: int) -> list[ItemResponse]:
        """Owner's items by id. Unknown owner yields an empty list, not an error."""
        if not await self.user_repo.exists_by_id(owner_id):
            logger.warning("Owner %s not found, returning no items", owner_id)
            return []
        items = await self.item_repo.get_by_owner(owner_id)
        return [item_to_response(i) for i in items]

    async def search_available(self, text: str | None) -> list[ItemResponse]:
        """Blank text never dumps the catalog: it matches nothing."""
        if text is None or not text.strip():
            logger.debug("Blank search text, returning no items")
            return []
        items = await self.item_repo.search_available(text)
        logger.info("Search '%s' matched %d available items", text, len(items))
        return [item_to_response(i) for i in items]
