from shareit.schemas.booking import BookingCreate, BookingResponse, BookingShort
from shareit.schemas.comment import CommentCreate, CommentResponse
from shareit.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from shareit.schemas.item_request import ItemRequestCreate, ItemRequestResponse, RequestItem
from shareit.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "BookingCreate",
    "BookingResponse",
    "BookingShort",
    "CommentCreate",
    "CommentResponse",
    "ItemCreate",
    "ItemResponse",
    "ItemUpdate",
    "ItemRequestCreate",
    "ItemRequestResponse",
    "RequestItem",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
