"""
Comment model - feedback left on an item after a completed rental.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shareit.db.base import Base

if TYPE_CHECKING:
    from shareit.db.models.user import User


class Comment(Base):
    """Append-only comment. ``created`` is assigned by the server."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    author: Mapped["User"] = relationship("User", lazy="joined", innerjoin=True)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, item_id={self.item_id})>"
