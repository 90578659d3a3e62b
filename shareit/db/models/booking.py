"""
Booking model - a request by a booker to use an item over [start, end].
"""

import enum
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shareit.db.base import Base

if TYPE_CHECKING:
    from shareit.db.models.item import Item
    from shareit.db.models.user import User


class BookingStatus(str, enum.Enum):
    """Lifecycle: WAITING -> APPROVED or WAITING -> REJECTED. Both are terminal."""

    WAITING = "WAITING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class BookingState(str, enum.Enum):
    """Query-time partition of a booking listing."""

    ALL = "ALL"
    CURRENT = "CURRENT"
    PAST = "PAST"
    FUTURE = "FUTURE"
    WAITING = "WAITING"
    REJECTED = "REJECTED"


class Booking(Base):
    """Booking entity. Status changes at most once, by the item owner."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    start: Mapped[datetime] = mapped_column("start_date", DateTime, nullable=False, index=True)
    end: Mapped[datetime] = mapped_column("end_date", DateTime, nullable=False)
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, name="booking_status"), nullable=False, default=BookingStatus.WAITING
    )
    booker_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)

    booker: Mapped["User"] = relationship("User", lazy="joined", innerjoin=True)
    item: Mapped["Item"] = relationship("Item", lazy="joined", innerjoin=True)

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, item_id={self.item_id}, status={self.status})>"
