"""
Booking repository - paginated, state-filtered booking queries.
Challenge: One filter definition shared by the booker and owner listings.
Design: Listings always order by start descending; "now" is supplied by the caller.
"""

from datetime import datetime

from sqlalchemy import Select, select

from shareit.db.models.booking import Booking, BookingState, BookingStatus
from shareit.db.models.item import Item
from shareit.db.repositories.base_repository import BaseRepository


def _apply_state(stmt: Select, state: BookingState, now: datetime) -> Select:
    """Restrict a booking query to the temporal or status partition named by ``state``."""
    if state is BookingState.CURRENT:
        return stmt.where(Booking.start < now, Booking.end > now)
    if state is BookingState.PAST:
        return stmt.where(Booking.end < now)
    if state is BookingState.FUTURE:
        return stmt.where(Booking.start > now)
    if state is BookingState.WAITING:
        return stmt.where(Booking.status == BookingStatus.WAITING)
    if state is BookingState.REJECTED:
        return stmt.where(Booking.status == BookingStatus.REJECTED)
    return stmt


class BookingRepository(BaseRepository[Booking]):
    """Booking-specific queries. Booker, item and item owner load with each booking."""

    def __init__(self, session):
        super().__init__(session, Booking)

    async def get_by_id_for_update(self, id: int) -> Booking | None:
        """Fetch and lock the booking row until the transaction ends."""
        result = await self.session.execute(
            select(Booking).where(Booking.id == id).with_for_update(of=Booking)
        )
        return result.unique().scalar_one_or_none()

    async def _page(self, stmt: Select, offset: int, limit: int) -> list[Booking]:
        result = await self.session.execute(
            stmt.order_by(Booking.start.desc(), Booking.id.desc()).offset(offset).limit(limit)
        )
        return list(result.unique().scalars().all())

    async def find_for_booker(
        self, booker_id: int, state: BookingState, now: datetime, offset: int, limit: int
    ) -> list[Booking]:
        stmt = select(Booking).where(Booking.booker_id == booker_id)
        return await self._page(_apply_state(stmt, state, now), offset, limit)

    async def find_for_owner(
        self, owner_id: int, state: BookingState, now: datetime, offset: int, limit: int
    ) -> list[Booking]:
        stmt = (
            select(Booking)
            .where(Booking.item_id.in_(select(Item.id).where(Item.owner_id == owner_id)))
        )
        return await self._page(_apply_state(stmt, state, now), offset, limit)

    async def find_past_approved(self, item_id: int, booker_id: int, now: datetime) -> list[Booking]:
        """Completed rentals of ``item_id`` by ``booker_id``; gates comment creation."""
        result = await self.session.execute(
            select(Booking).where(
                Booking.item_id == item_id,
                Booking.booker_id == booker_id,
                Booking.status == BookingStatus.APPROVED,
                Booking.end < now,
            )
        )
        return list(result.unique().scalars().all())

    async def find_last_approved(self, item_id: int, now: datetime) -> Booking | None:
        """Most recent approved booking that has started."""
        result = await self.session.execute(
            select(Booking)
            .where(
                Booking.item_id == item_id,
                Booking.status == BookingStatus.APPROVED,
                Booking.start < now,
            )
            .order_by(Booking.start.desc())
            .limit(1)
        )
        return result.unique().scalar_one_or_none()

    async def find_next_approved(self, item_id: int, now: datetime) -> Booking | None:
        """Earliest approved booking that has not started yet."""
        result = await self.session.execute(
            select(Booking)
            .where(
                Booking.item_id == item_id,
                Booking.status == BookingStatus.APPROVED,
                Booking.start > now,
            )
            .order_by(Booking.start.asc())
            .limit(1)
        )
        return result.unique().scalar_one_or_none()
