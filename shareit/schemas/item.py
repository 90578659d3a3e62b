"""Item request/response schemas - REST API contract."""

from shareit.schemas.base import CamelModel
from shareit.schemas.booking import BookingShort
from shareit.schemas.comment import CommentResponse


class ItemCreate(CamelModel):
    name: str | None = None
    description: str | None = None
    available: bool
    request_id: int | None = None


class ItemUpdate(CamelModel):
    """Partial update: only fields that are not null overwrite the item."""

    name: str | None = None
    description: str | None = None
    available: bool | None = None


class ItemResponse(CamelModel):
    id: int
    name: str | None = None
    description: str | None = None
    available: bool
    owner_id: int
    request_id: int | None = None
    last_booking: BookingShort | None = None  # Populated for the owner only
    next_booking: BookingShort | None = None
    comments: list[CommentResponse] = []
