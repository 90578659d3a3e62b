"""Item request board schemas."""

from datetime import datetime

from shareit.schemas.base import CamelModel, NonBlankStr


class ItemRequestCreate(CamelModel):
    description: NonBlankStr


class RequestItem(CamelModel):
    """Item offered in response to a request."""

    id: int
    name: str
    description: str | None = None
    available: bool
    owner_id: int | None = None
    request_id: int | None = None


class ItemRequestResponse(CamelModel):
    id: int
    description: str
    created: datetime
    items: list[RequestItem] = []
