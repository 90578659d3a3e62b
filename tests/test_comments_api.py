"""
Comment API tests - only a completed, approved rental allows a comment.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from shareit.db.models import BookingStatus

DAY = timedelta(days=1)


@pytest.mark.asyncio
async def test_comment_after_completed_rental(client: AsyncClient, item, owner, booker, make_booking, headers_for):
    await make_booking(item, booker, -3 * DAY, -2 * DAY, BookingStatus.APPROVED)

    response = await client.post(f"/items/{item.id}/comment", json={"text": "Great drill"}, headers=headers_for(booker))
    assert response.status_code == 200
    data = response.json()
    assert data["text"] == "Great drill"
    assert data["authorName"] == "Booker"
    assert data["created"]

    response = await client.get(f"/items/{item.id}", headers=headers_for(owner))
    comments = response.json()["comments"]
    assert [c["text"] for c in comments] == ["Great drill"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start, end, status",
    [
        (-3 * DAY, -2 * DAY, BookingStatus.WAITING),
        (-3 * DAY, -2 * DAY, BookingStatus.REJECTED),
        (DAY, 2 * DAY, BookingStatus.APPROVED),
        (-DAY, DAY, BookingStatus.APPROVED),
    ],
)
async def test_comment_without_completed_rental_is_rejected(
    client: AsyncClient, item, booker, make_booking, headers_for, start, end, status
):
    await make_booking(item, booker, start, end, status)
    response = await client.post(f"/items/{item.id}/comment", json={"text": "Nice"}, headers=headers_for(booker))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_comment_with_no_bookings_is_rejected(client: AsyncClient, item, stranger, headers_for):
    response = await client.post(f"/items/{item.id}/comment", json={"text": "Nice"}, headers=headers_for(stranger))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_comment_on_missing_item(client: AsyncClient, booker, headers_for):
    response = await client.post("/items/999/comment", json={"text": "Nice"}, headers=headers_for(booker))
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_comment_by_unknown_user(client: AsyncClient, item):
    response = await client.post(f"/items/{item.id}/comment", json={"text": "Nice"}, headers={"X-Sharer-User-Id": "999"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_blank_comment_is_rejected(client: AsyncClient, item, booker, make_booking, headers_for):
    await make_booking(item, booker, -3 * DAY, -2 * DAY, BookingStatus.APPROVED)
    response = await client.post(f"/items/{item.id}/comment", json={"text": "  "}, headers=headers_for(booker))
    assert response.status_code == 400
