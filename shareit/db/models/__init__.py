from shareit.db.models.user import User
from shareit.db.models.item_request import ItemRequest
from shareit.db.models.item import Item
from shareit.db.models.booking import Booking, BookingState, BookingStatus
from shareit.db.models.comment import Comment

__all__ = ["User", "ItemRequest", "Item", "Booking", "BookingState", "BookingStatus", "Comment"]
