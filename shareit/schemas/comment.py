"""Comment request/response schemas."""

from datetime import datetime

from shareit.schemas.base import CamelModel, NonBlankStr


class CommentCreate(CamelModel):
    text: NonBlankStr


class CommentResponse(CamelModel):
    id: int
    text: str
    author_name: str
    created: datetime
