# Repository pattern: stores injected into services, one per entity

from shareit.db.repositories.booking_repository import BookingRepository
from shareit.db.repositories.comment_repository import CommentRepository
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.item_request_repository import ItemRequestRepository
from shareit.db.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "ItemRepository",
    "BookingRepository",
    "CommentRepository",
    "ItemRequestRepository",
]
