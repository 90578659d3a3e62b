"""
Item request service - request board, each request enriched with the items offered for it.
"""

import logging
from collections import defaultdict
from datetime import datetime

from shareit.core.exceptions import NotFoundError
from shareit.db.models.item import Item
from shareit.db.models.item_request import ItemRequest
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.item_request_repository import ItemRequestRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.schemas.item_request import ItemRequestCreate, ItemRequestResponse
from shareit.services.mappers import request_to_response

logger = logging.getLogger(__name__)


class ItemRequestService:
    def __init__(
        self,
        request_repo: ItemRequestRepository,
        user_repo: UserRepository,
        item_repo: ItemRepository,
    ):
        self.request_repo = request_repo
        self.user_repo = user_repo
        self.item_repo = item_repo

    async def create(self, data: ItemRequestCreate, user_id: int) -> ItemRequestResponse:
        logger.info("Creating item request by user %s", user_id)
        if not await self.user_repo.exists_by_id(user_id):
            raise NotFoundError("User not found")
        request = ItemRequest(
            description=data.description,
            requestor_id=user_id,
            created=datetime.now(),
        )
        request = await self.request_repo.add(request)
        logger.info("Item request %s created by user %s", request.id, user_id)
        return request_to_response(request, [])

    async def get_by_user(self, user_id: int) -> list[ItemRequestResponse]:
        """The caller's own requests, newest first."""
        await self._require_user(user_id)
        return await self._enrich(await self.request_repo.get_by_requestor(user_id))

    async def get_all(self, user_id: int, from_: int, size: int) -> list[ItemRequestResponse]:
        """Other users' requests, newest first, page ``from_ // size``."""
        logger.info("Listing requests of others for user %s: from=%s size=%s", user_id, from_, size)
        await self._require_user(user_id)
        requests = await self.request_repo.get_by_other_requestors(
            user_id, (from_ // size) * size, size
        )
        return await self._enrich(requests)

    async def get_by_id(self, user_id: int, request_id: int) -> ItemRequestResponse:
        await self._require_user(user_id)
        request = await self.request_repo.get_by_id(request_id)
        if request is None:
            raise NotFoundError("Request not found")
        items = await self.item_repo.get_by_request_ids([request.id])
        return request_to_response(request, items)

    async def _require_user(self, user_id: int) -> None:
        if not await self.user_repo.exists_by_id(user_id):
            raise NotFoundError("User not found")

    async def _enrich(self, requests: list[ItemRequest]) -> list[ItemRequestResponse]:
        """Attach items to every request with a single bulk lookup."""
        if not requests:
            return []
        by_request: dict[int, list[Item]] = defaultdict(list)
        for item in await self.item_repo.get_by_request_ids([r.id for r in requests]):
            by_request[item.request_id].append(item)
        return [request_to_response(r, by_request[r.id]) for r in requests]
