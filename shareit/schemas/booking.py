"""Booking request/response schemas."""

from datetime import datetime

from pydantic import field_validator

from shareit.db.models.booking import BookingStatus
from shareit.schemas.base import CamelModel
from shareit.schemas.user import UserResponse


class BookingCreate(CamelModel):
    item_id: int
    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def to_local_naive(cls, value: datetime) -> datetime:
        # Stored and compared as naive local time
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class BookingItem(CamelModel):
    """Item summary embedded in a booking."""

    id: int
    name: str | None = None


class BookingResponse(CamelModel):
    id: int
    start: datetime
    end: datetime
    status: BookingStatus
    booker: UserResponse
    item: BookingItem


class BookingShort(CamelModel):
    """Last/next booking shown to an item owner."""

    id: int
    booker_id: int
