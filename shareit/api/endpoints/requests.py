"""
Item request endpoints - request board.
"""

from fastapi import APIRouter, Query

from shareit.config import get_settings
from shareit.core.dependencies import CallerId
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.item_request_repository import ItemRequestRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.db.session import DbSession
from shareit.schemas.item_request import ItemRequestCreate, ItemRequestResponse
from shareit.services.item_request_service import ItemRequestService

router = APIRouter()
settings = get_settings()


def _get_request_service(session: DbSession) -> ItemRequestService:
    return ItemRequestService(
        ItemRequestRepository(session), UserRepository(session), ItemRepository(session)
    )


@router.post("", response_model=ItemRequestResponse)
async def create_request(session: DbSession, data: ItemRequestCreate, user_id: CallerId):
    return await _get_request_service(session).create(data, user_id)


@router.get("", response_model=list[ItemRequestResponse])
async def list_own_requests(session: DbSession, user_id: CallerId):
    return await _get_request_service(session).get_by_user(user_id)


@router.get("/all", response_model=list[ItemRequestResponse])
async def list_other_requests(
    session: DbSession,
    user_id: CallerId,
    from_: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.default_page_size, gt=0),
):
    return await _get_request_service(session).get_all(user_id, from_, size)


@router.get("/{request_id}", response_model=ItemRequestResponse)
async def get_request(session: DbSession, request_id: int, user_id: CallerId):
    return await _get_request_service(session).get_by_id(user_id, request_id)
