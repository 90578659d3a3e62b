"""
Booking service - booking lifecycle, authorization and state-filtered listings.
Challenge: Small state machine (WAITING -> APPROVED | REJECTED) guarded by role checks.
Design: Authorization failures on reads and on self-booking are reported as not found,
so probing users cannot learn who owns what.

Overlapping bookings for the same item are not detected; the store only guarantees
single-entity atomicity (the approve path locks the booking row).
"""

import logging
from datetime import datetime

from shareit.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)
from shareit.db.models.booking import Booking, BookingState, BookingStatus
from shareit.db.repositories.booking_repository import BookingRepository
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.schemas.booking import BookingCreate, BookingResponse
from shareit.services.mappers import booking_to_response

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now()


def _offset(from_: int, size: int) -> int:
    """Page-aligned offset: ``from_`` selects the page ``from_ / size``, truncated toward zero."""
    return int(from_ / size) * size


def _parse_state(state: str) -> BookingState | None:
    try:
        return BookingState(state.upper())
    except ValueError:
        return None


class BookingService:
    """Handles booking use cases: create, approve/reject, get, list."""

    def __init__(
        self,
        booking_repo: BookingRepository,
        user_repo: UserRepository,
        item_repo: ItemRepository,
        reject_empty_bookings: bool = False,
    ):
        self.booking_repo = booking_repo
        self.user_repo = user_repo
        self.item_repo = item_repo
        self.reject_empty_bookings = reject_empty_bookings

    async def create(self, data: BookingCreate, booker_id: int) -> BookingResponse:
        """Create a WAITING booking of an available item by someone other than its owner."""
        logger.info("Creating booking of item %s by user %s", data.item_id, booker_id)
        booker = await self.user_repo.get_by_id(booker_id)
        if booker is None:
            logger.warning("Booking rejected: user %s not found", booker_id)
            raise NotFoundError("User not found")
        item = await self.item_repo.get_by_id(data.item_id)
        if item is None:
            logger.warning("Booking rejected: item %s not found", data.item_id)
            raise NotFoundError("Item not found")

        if not item.available:
            logger.warning("Booking rejected: item %s is unavailable", item.id)
            raise UnavailableError("Item is not available for booking")
        if item.owner_id == booker_id:
            logger.warning("Booking rejected: owner %s tried to book own item %s", booker_id, item.id)
            raise NotFoundError("Owner cannot book own item")
        if data.end < data.start:
            logger.warning("Booking rejected: end %s is before start %s", data.end, data.start)
            raise ConflictError("Booking end must not be before its start")
        if self.reject_empty_bookings and data.end == data.start:
            logger.warning("Booking rejected: end equals start %s", data.start)
            raise ConflictError("Booking end must be after its start")

        booking = Booking(
            start=data.start,
            end=data.end,
            status=BookingStatus.WAITING,
            booker=booker,
            item=item,
        )
        booking = await self.booking_repo.add(booking)
        logger.info("Booking %s created for item %s", booking.id, item.id)
        return booking_to_response(booking)

    async def approve(self, booking_id: int, owner_id: int, approved: bool) -> BookingResponse:
        """One-shot transition out of WAITING, allowed to the item owner only."""
        logger.info(
            "%s booking %s by user %s", "Approving" if approved else "Rejecting", booking_id, owner_id
        )
        booking = await self.booking_repo.get_by_id_for_update(booking_id)
        if booking is None:
            logger.warning("Booking %s not found", booking_id)
            raise NotFoundError("Booking not found")
        if booking.item.owner_id != owner_id:
            logger.warning("User %s is not the owner of booking %s", owner_id, booking_id)
            raise ForbiddenError("Only the item owner can approve a booking")
        if booking.status != BookingStatus.WAITING:
            logger.warning("Booking %s was already processed (%s)", booking_id, booking.status.value)
            raise ConflictError("Booking has already been processed")

        booking.status = BookingStatus.APPROVED if approved else BookingStatus.REJECTED
        booking = await self.booking_repo.save(booking)
        logger.info("Booking %s is now %s", booking.id, booking.status.value)
        return booking_to_response(booking)

    async def get_by_id(self, booking_id: int, user_id: int) -> BookingResponse:
        """Visible to the booker and the item owner; anyone else gets not found."""
        logger.debug("User %s requests booking %s", user_id, booking_id)
        booking = await self.booking_repo.get_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        if user_id not in (booking.booker_id, booking.item.owner_id):
            logger.warning("User %s may not view booking %s", user_id, booking_id)
            raise NotFoundError("Only the booker or the item owner can view a booking")
        return booking_to_response(booking)

    async def list_for_booker(
        self, booker_id: int, state: str, from_: int, size: int
    ) -> list[BookingResponse]:
        logger.info(
            "Listing bookings of booker %s: state=%s from=%s size=%s", booker_id, state, from_, size
        )
        if from_ < 0 or size <= 0:
            logger.warning("Invalid pagination from=%s size=%s", from_, size)
            raise ValidationError("Invalid pagination parameters")
        parsed = _parse_state(state)
        if parsed is None:
            logger.warning("Unknown booking state %s", state)
            raise ValidationError(f"Unknown state: {state}")
        if not await self.user_repo.exists_by_id(booker_id):
            raise NotFoundError("User not found")

        bookings = await self.booking_repo.find_for_booker(
            booker_id, parsed, _now(), _offset(from_, size), size
        )
        return [booking_to_response(b) for b in bookings]

    async def list_for_owner(
        self, owner_id: int, state: str, from_: int, size: int
    ) -> list[BookingResponse]:
        """Bookings of the owner's items. Unknown states fall back to ALL; pagination is unchecked."""
        logger.info(
            "Listing bookings of owner %s: state=%s from=%s size=%s", owner_id, state, from_, size
        )
        if not await self.user_repo.exists_by_id(owner_id):
            raise NotFoundError("User not found")

        parsed = _parse_state(state) or BookingState.ALL
        bookings = await self.booking_repo.find_for_owner(
            owner_id, parsed, _now(), _offset(from_, size), size
        )
        return [booking_to_response(b) for b in bookings]
