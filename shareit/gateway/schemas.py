"""Gateway input schemas - stricter than the backend's: they reject bad input before forwarding."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, field_validator, model_validator

from shareit.schemas.base import CamelModel, NonBlankStr

BOOKING_STATES = ("ALL", "CURRENT", "PAST", "FUTURE", "WAITING", "REJECTED")


def _local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class UserIn(BaseModel):
    name: NonBlankStr
    email: EmailStr


class UserPatch(BaseModel):
    name: str | None = None
    email: EmailStr | None = None


class ItemIn(CamelModel):
    name: NonBlankStr
    description: NonBlankStr
    available: bool
    request_id: int | None = None


class ItemPatch(CamelModel):
    name: str | None = None
    description: str | None = None
    available: bool | None = None


class BookingIn(CamelModel):
    item_id: int
    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def normalize(cls, value: datetime) -> datetime:
        return _local_naive(value)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingIn":
        now = datetime.now()
        if self.start < now:
            raise ValueError("start must be in the present or future")
        if self.end <= now:
            raise ValueError("end must be in the future")
        return self


class CommentIn(CamelModel):
    text: NonBlankStr


class ItemRequestIn(CamelModel):
    description: NonBlankStr
