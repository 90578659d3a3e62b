"""
Item model - a thing an owner lists for others to book.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shareit.db.base import Base

if TYPE_CHECKING:
    from shareit.db.models.user import User


class Item(Base):
    """Item entity. Owner is set at creation and never changes."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    available: Mapped[bool] = mapped_column(nullable=False, default=False)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    request_id: Mapped[int | None] = mapped_column(
        ForeignKey("requests.id"), nullable=True, index=True
    )

    # Owner is needed for every authorization check, so load it with the item
    owner: Mapped["User"] = relationship("User", lazy="joined", innerjoin=True)

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name})>"
