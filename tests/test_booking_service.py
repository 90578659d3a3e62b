"""
Booking service tests - state machine, authorization and listing filters.
Services run against real repositories on the SQLite test session.
"""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from shareit.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)
from shareit.db.models import Booking, BookingStatus
from shareit.db.repositories import BookingRepository, ItemRepository, UserRepository
from shareit.schemas.booking import BookingCreate
from shareit.services.booking_service import BookingService, _offset

DAY = timedelta(days=1)


def _service(session, reject_empty_bookings=False) -> BookingService:
    return BookingService(
        BookingRepository(session),
        UserRepository(session),
        ItemRepository(session),
        reject_empty_bookings=reject_empty_bookings,
    )


def _request(item_id: int, start_offset: timedelta, end_offset: timedelta) -> BookingCreate:
    now = datetime.now()
    return BookingCreate(item_id=item_id, start=now + start_offset, end=now + end_offset)


async def _booking_count(session) -> int:
    return (await session.execute(select(func.count(Booking.id)))).scalar_one()


@pytest.mark.asyncio
async def test_create_booking_is_waiting(session, item, booker):
    result = await _service(session).create(_request(item.id, DAY, 2 * DAY), booker.id)
    assert result.status == BookingStatus.WAITING
    assert result.start < result.end
    assert result.booker.id == booker.id
    assert result.item.id == item.id
    assert result.item.name == "Drill"


@pytest.mark.asyncio
async def test_create_booking_unknown_user(session, item):
    with pytest.raises(NotFoundError):
        await _service(session).create(_request(item.id, DAY, 2 * DAY), 999)


@pytest.mark.asyncio
async def test_create_booking_unknown_item(session, booker):
    with pytest.raises(NotFoundError):
        await _service(session).create(_request(999, DAY, 2 * DAY), booker.id)


@pytest.mark.asyncio
async def test_create_booking_unavailable_item(session, item, booker):
    item.available = False
    await session.flush()
    with pytest.raises(UnavailableError):
        await _service(session).create(_request(item.id, DAY, 2 * DAY), booker.id)


@pytest.mark.asyncio
async def test_owner_cannot_book_own_item(session, item, owner):
    """Reported as not found so ownership is not revealed."""
    with pytest.raises(NotFoundError):
        await _service(session).create(_request(item.id, DAY, 2 * DAY), owner.id)
    assert await _booking_count(session) == 0


@pytest.mark.asyncio
async def test_end_before_start_conflicts_and_persists_nothing(session, item, booker):
    with pytest.raises(ConflictError):
        await _service(session).create(_request(item.id, 2 * DAY, DAY), booker.id)
    assert await _booking_count(session) == 0


@pytest.mark.asyncio
async def test_end_equal_to_start_accepted_by_default(session, item, booker):
    start = datetime.now() + DAY
    data = BookingCreate(item_id=item.id, start=start, end=start)
    result = await _service(session).create(data, booker.id)
    assert result.status == BookingStatus.WAITING


@pytest.mark.asyncio
async def test_end_equal_to_start_rejected_when_configured(session, item, booker):
    start = datetime.now() + DAY
    data = BookingCreate(item_id=item.id, start=start, end=start)
    with pytest.raises(ConflictError):
        await _service(session, reject_empty_bookings=True).create(data, booker.id)


@pytest.mark.asyncio
async def test_aware_datetimes_are_stored_naive(session, item, booker):
    start = (datetime.now() + DAY).astimezone()
    data = BookingCreate(item_id=item.id, start=start, end=start + DAY)
    result = await _service(session).create(data, booker.id)
    assert result.start.tzinfo is None


@pytest.mark.asyncio
async def test_approve_and_second_call_conflicts(session, item, owner, booker):
    svc = _service(session)
    created = await svc.create(_request(item.id, DAY, 2 * DAY), booker.id)

    approved = await svc.approve(created.id, owner.id, True)
    assert approved.status == BookingStatus.APPROVED

    with pytest.raises(ConflictError):
        await svc.approve(created.id, owner.id, False)
    with pytest.raises(ConflictError):
        await svc.approve(created.id, owner.id, True)
    assert (await svc.get_by_id(created.id, owner.id)).status == BookingStatus.APPROVED


@pytest.mark.asyncio
async def test_reject_is_terminal(session, item, owner, booker):
    svc = _service(session)
    created = await svc.create(_request(item.id, DAY, 2 * DAY), booker.id)
    rejected = await svc.approve(created.id, owner.id, False)
    assert rejected.status == BookingStatus.REJECTED
    with pytest.raises(ConflictError):
        await svc.approve(created.id, owner.id, True)


@pytest.mark.asyncio
async def test_approve_by_non_owner_forbidden(session, item, booker, stranger):
    svc = _service(session)
    created = await svc.create(_request(item.id, DAY, 2 * DAY), booker.id)
    with pytest.raises(ForbiddenError):
        await svc.approve(created.id, booker.id, True)
    with pytest.raises(ForbiddenError):
        await svc.approve(created.id, stranger.id, True)


@pytest.mark.asyncio
async def test_approve_missing_booking(session, owner):
    with pytest.raises(NotFoundError):
        await _service(session).approve(999, owner.id, True)


@pytest.mark.asyncio
async def test_get_by_id_visible_to_booker_and_owner_only(session, item, owner, booker, stranger):
    svc = _service(session)
    created = await svc.create(_request(item.id, DAY, 2 * DAY), booker.id)
    assert (await svc.get_by_id(created.id, booker.id)).id == created.id
    assert (await svc.get_by_id(created.id, owner.id)).id == created.id
    with pytest.raises(NotFoundError):
        await svc.get_by_id(created.id, stranger.id)
    with pytest.raises(NotFoundError):
        await svc.get_by_id(999, booker.id)


@pytest_asyncio.fixture
async def timeline(item, booker, make_booking):
    """One booking per temporal/status partition, keyed by name."""
    return {
        "past": await make_booking(item, booker, -3 * DAY, -2 * DAY, BookingStatus.APPROVED),
        "current": await make_booking(item, booker, -DAY, DAY, BookingStatus.APPROVED),
        "future": await make_booking(item, booker, DAY, 2 * DAY, BookingStatus.WAITING),
        "future_rejected": await make_booking(item, booker, 3 * DAY, 4 * DAY, BookingStatus.REJECTED),
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "state, expected",
    [
        ("ALL", ["future_rejected", "future", "current", "past"]),
        ("CURRENT", ["current"]),
        ("PAST", ["past"]),
        ("FUTURE", ["future_rejected", "future"]),
        ("WAITING", ["future"]),
        ("REJECTED", ["future_rejected"]),
        ("current", ["current"]),
    ],
)
async def test_list_for_booker_filters(session, booker, timeline, state, expected):
    result = await _service(session).list_for_booker(booker.id, state, 0, 10)
    assert [b.id for b in result] == [timeline[name].id for name in expected]


@pytest.mark.asyncio
async def test_state_partitions_cover_all(session, booker, timeline):
    svc = _service(session)
    union = set()
    for state in ("CURRENT", "PAST", "FUTURE", "WAITING", "REJECTED"):
        union |= {b.id for b in await svc.list_for_booker(booker.id, state, 0, 10)}
    everything = {b.id for b in await svc.list_for_booker(booker.id, "ALL", 0, 10)}
    assert union == everything


@pytest.mark.asyncio
@pytest.mark.parametrize("from_, size", [(-1, 10), (0, 0), (0, -5)])
async def test_list_for_booker_rejects_bad_pagination(session, booker, from_, size):
    with pytest.raises(ValidationError):
        await _service(session).list_for_booker(booker.id, "ALL", from_, size)


@pytest.mark.asyncio
@pytest.mark.parametrize("state", ["UNSUPPORTED", "APPROVED", ""])
async def test_list_for_booker_rejects_unknown_state(session, booker, state):
    with pytest.raises(ValidationError):
        await _service(session).list_for_booker(booker.id, state, 0, 10)


@pytest.mark.asyncio
async def test_list_for_booker_unknown_user(session):
    with pytest.raises(NotFoundError):
        await _service(session).list_for_booker(999, "ALL", 0, 10)


@pytest.mark.asyncio
async def test_pagination_uses_page_index(session, booker, timeline):
    svc = _service(session)
    first_page = [b.id for b in await svc.list_for_booker(booker.id, "ALL", 0, 2)]
    assert first_page == [timeline["future_rejected"].id, timeline["future"].id]
    # from=1 still lands on page 0
    assert [b.id for b in await svc.list_for_booker(booker.id, "ALL", 1, 2)] == first_page
    second_page = [b.id for b in await svc.list_for_booker(booker.id, "ALL", 3, 2)]
    assert second_page == [timeline["current"].id, timeline["past"].id]


@pytest.mark.asyncio
async def test_list_for_owner_filters(session, owner, timeline):
    svc = _service(session)
    current = await svc.list_for_owner(owner.id, "CURRENT", 0, 10)
    assert [b.id for b in current] == [timeline["current"].id]
    waiting = await svc.list_for_owner(owner.id, "waiting", 0, 10)
    assert [b.id for b in waiting] == [timeline["future"].id]


@pytest.mark.asyncio
@pytest.mark.parametrize("state", ["UNSUPPORTED", "APPROVED"])
async def test_list_for_owner_unknown_state_falls_back_to_all(session, owner, timeline, state):
    result = await _service(session).list_for_owner(owner.id, state, 0, 10)
    assert len(result) == 4


@pytest.mark.asyncio
async def test_list_for_owner_excludes_other_owners(session, booker, stranger, timeline):
    assert await _service(session).list_for_owner(stranger.id, "ALL", 0, 10) == []
    # The booker owns nothing either
    assert await _service(session).list_for_owner(booker.id, "ALL", 0, 10) == []


@pytest.mark.asyncio
async def test_list_for_owner_unknown_user(session):
    with pytest.raises(NotFoundError):
        await _service(session).list_for_owner(999, "ALL", 0, 10)


@pytest.mark.asyncio
async def test_list_for_owner_skips_pagination_checks(session, owner, timeline):
    """A small negative ``from`` still selects the first page for owners."""
    result = await _service(session).list_for_owner(owner.id, "ALL", -5, 10)
    assert [b.id for b in result] == [
        timeline[name].id for name in ("future_rejected", "future", "current", "past")
    ]


@pytest.mark.parametrize(
    "from_, size, expected",
    [(0, 10, 0), (9, 10, 0), (10, 10, 10), (25, 10, 20), (-5, 10, 0), (-15, 10, -10)],
)
def test_offset_truncates_page_toward_zero(from_, size, expected):
    assert _offset(from_, size) == expected
