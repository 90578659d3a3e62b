"""
Booking endpoints - create, approve/reject, view and list bookings.
Design: Thin controller; BookingService holds the state machine and authorization.
"""

from fastapi import APIRouter, Query

from shareit.config import get_settings
from shareit.core.dependencies import CallerId
from shareit.db.repositories.booking_repository import BookingRepository
from shareit.db.repositories.item_repository import ItemRepository
from shareit.db.repositories.user_repository import UserRepository
from shareit.db.session import DbSession
from shareit.schemas.booking import BookingCreate, BookingResponse
from shareit.services.booking_service import BookingService

router = APIRouter()
settings = get_settings()


def _get_booking_service(session: DbSession) -> BookingService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return BookingService(
        BookingRepository(session),
        UserRepository(session),
        ItemRepository(session),
        reject_empty_bookings=settings.reject_empty_bookings,
    )


@router.post("", response_model=BookingResponse)
async def create_booking(session: DbSession, data: BookingCreate, user_id: CallerId):
    return await _get_booking_service(session).create(data, user_id)


@router.patch("/{booking_id}", response_model=BookingResponse)
async def approve_booking(session: DbSession, booking_id: int, approved: bool, user_id: CallerId):
    return await _get_booking_service(session).approve(booking_id, user_id, approved)


@router.get("/owner", response_model=list[BookingResponse])
async def list_owner_bookings(
    session: DbSession,
    user_id: CallerId,
    state: str = "ALL",
    from_: int = Query(0, alias="from"),
    size: int = Query(settings.default_page_size),
):
    """Bookings of the caller's items. GET /bookings/owner?state=ALL&from=0&size=10."""
    return await _get_booking_service(session).list_for_owner(user_id, state, from_, size)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(session: DbSession, booking_id: int, user_id: CallerId):
    return await _get_booking_service(session).get_by_id(booking_id, user_id)


@router.get("", response_model=list[BookingResponse])
async def list_booker_bookings(
    session: DbSession,
    user_id: CallerId,
    state: str = "ALL",
    from_: int = Query(0, alias="from"),
    size: int = Query(settings.default_page_size),
):
    """Bookings made by the caller. GET /bookings?state=ALL&from=0&size=10."""
    return await _get_booking_service(session).list_for_booker(user_id, state, from_, size)
