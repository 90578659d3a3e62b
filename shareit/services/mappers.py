"""
Explicit conversions between ORM entities and API response models.
"""

import logging

from shareit.db.models.booking import Booking
from shareit.db.models.comment import Comment
from shareit.db.models.item import Item
from shareit.db.models.item_request import ItemRequest
from shareit.db.models.user import User
from shareit.schemas.booking import BookingItem, BookingResponse, BookingShort
from shareit.schemas.comment import CommentResponse
from shareit.schemas.item import ItemResponse
from shareit.schemas.item_request import ItemRequestResponse, RequestItem
from shareit.schemas.user import UserResponse

logger = logging.getLogger(__name__)

DEFAULT_ITEM_NAME = "Default Name"


def user_to_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


def booking_to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        start=booking.start,
        end=booking.end,
        status=booking.status,
        booker=user_to_response(booking.booker),
        item=BookingItem(id=booking.item.id, name=booking.item.name),
    )


def booking_to_short(booking: Booking | None) -> BookingShort | None:
    if booking is None:
        return None
    return BookingShort(id=booking.id, booker_id=booking.booker_id)


def comment_to_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        text=comment.text,
        author_name=comment.author.name,
        created=comment.created,
    )


def item_to_response(
    item: Item,
    comments: list[Comment] | None = None,
    last_booking: Booking | None = None,
    next_booking: Booking | None = None,
) -> ItemResponse:
    return ItemResponse(
        id=item.id,
        name=item.name,
        description=item.description,
        available=item.available,
        owner_id=item.owner_id,
        request_id=item.request_id,
        last_booking=booking_to_short(last_booking),
        next_booking=booking_to_short(next_booking),
        comments=[comment_to_response(c) for c in comments or []],
    )


def item_to_request_item(item: Item) -> RequestItem:
    """Item summary for the request board. A missing name gets a placeholder label."""
    if item.name is None:
        logger.warning("Item %s has no name, using placeholder", item.id)
    return RequestItem(
        id=item.id,
        name=item.name if item.name is not None else DEFAULT_ITEM_NAME,
        description=item.description,
        available=item.available,
        owner_id=item.owner_id,
        request_id=item.request_id,
    )


def request_to_response(request: ItemRequest, items: list[Item]) -> ItemRequestResponse:
    return ItemRequestResponse(
        id=request.id,
        description=request.description,
        created=request.created,
        items=[item_to_request_item(i) for i in items],
    )
