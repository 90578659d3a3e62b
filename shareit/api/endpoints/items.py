"""
Item endpoints - item catalog, search and comments.
Design: Thin controller; services hold ownership and comment gating rules.
"""

from fastapi import APIRouter

from shareit.core.dependencies import CallerId
from shareit.db.repositories.booking_repository import BookingRepository
from shareit.db.repositories.comment_repository import CommentRepository
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.item_request_repository import ItemRequestRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.db.session import DbSession
from shareit.schemas.comment import CommentCreate, CommentResponse
from shareit.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from shareit.services.comment_service import CommentService
from shareit.services.item_service import ItemService

router = APIRouter()


def _get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return ItemService(
        ItemRepository(session),
        UserRepository(session),
        BookingRepository(session),
        CommentRepository(session),
        ItemRequestRepository(session),
    )


def _get_comment_service(session: DbSession) -> CommentService:
    return CommentService(
        CommentRepository(session),
        UserRepository(session),
        ItemRepository(session),
        BookingRepository(session),
    )


@router.post("", response_model=ItemResponse)
async def create_item(session: DbSession, data: ItemCreate, user_id: CallerId):
    return await _get_item_service(session).create(data, user_id)


@router.get("", response_model=list[ItemResponse])
async def list_own_items(session: DbSession, user_id: CallerId):
    return await _get_item_service(session).list_by_owner(user_id)


@router.get("/search", response_model=list[ItemResponse])
async def search_items(session: DbSession, text: str | None = None):
    """Available items whose name or description contains ``text``. Blank text finds nothing."""
    return await _get_item_service(session).search_available(text)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(session: DbSession, item_id: int, user_id: CallerId):
    return await _get_item_service(session).get_by_id(item_id, user_id)


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(session: DbSession, item_id: int, data: ItemUpdate, user_id: CallerId):
    return await _get_item_service(session).update(item_id, data, user_id)


@router.post("/{item_id}/comment", response_model=CommentResponse)
async def add_comment(session: DbSession, item_id: int, data: CommentCreate, user_id: CallerId):
    return await _get_comment_service(session).add_comment(item_id, user_id, data)
