"""
Item request model - a user asking for an item nobody has listed yet.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from shareit.db.base import Base


class ItemRequest(Base):
    """Request entity. Items created in response point back via ``Item.request_id``."""

    __tablename__ = "requests"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    requestor_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<ItemRequest(id={self.id}, requestor_id={self.requestor_id})>"
