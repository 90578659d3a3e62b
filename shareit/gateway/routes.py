"""
Gateway routes - validate the request, then forward it to the backend as-is.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Path, Query, Request, Response

from shareit.config import get_settings
from shareit.core.exceptions import ValidationError
from shareit.gateway.client import ShareItClient
from shareit.gateway.schemas import (
    BOOKING_STATES,
    BookingIn,
    CommentIn,
    ItemIn,
    ItemPatch,
    ItemRequestIn,
    UserIn,
    UserPatch,
)

settings = get_settings()


def get_client(request: Request) -> ShareItClient:
    return request.app.state.client


Client = Annotated[ShareItClient, Depends(get_client)]
CallerId = Annotated[int, Header(alias=settings.user_id_header, gt=0)]
EntityId = Annotated[int, Path(gt=0)]
From = Annotated[int, Query(alias="from", ge=0)]
Size = Annotated[int, Query(gt=0)]


def _body(model, **kwargs):
    return model.model_dump(mode="json", by_alias=True, **kwargs)


def _check_state(state: str) -> None:
    if state not in BOOKING_STATES:
        raise ValidationError(f"Unknown state: {state}")


users = APIRouter(prefix="/users", tags=["users"])
items = APIRouter(prefix="/items", tags=["items"])
bookings = APIRouter(prefix="/bookings", tags=["bookings"])
requests = APIRouter(prefix="/requests", tags=["requests"])


@users.post("")
async def create_user(client: Client, data: UserIn) -> Response:
    return await client.post("/users", json=_body(data))


@users.patch("/{user_id}")
async def update_user(client: Client, user_id: EntityId, data: UserPatch) -> Response:
    return await client.patch(f"/users/{user_id}", json=_body(data, exclude_unset=True))


@users.get("/{user_id}")
async def get_user(client: Client, user_id: EntityId) -> Response:
    return await client.get(f"/users/{user_id}")


@users.get("")
async def list_users(client: Client) -> Response:
    return await client.get("/users")


@users.delete("/{user_id}")
async def delete_user(client: Client, user_id: EntityId) -> Response:
    return await client.delete(f"/users/{user_id}")


@items.post("")
async def create_item(client: Client, data: ItemIn, user_id: CallerId) -> Response:
    return await client.post("/items", user_id, json=_body(data))


@items.get("/search")
async def search_items(client: Client, text: str) -> Response:
    if not text.strip():
        return Response(content="[]", media_type="application/json")
    return await client.get("/items/search", params={"text": text})


@items.get("/{item_id}")
async def get_item(client: Client, item_id: EntityId, user_id: CallerId) -> Response:
    return await client.get(f"/items/{item_id}", user_id)


@items.get("")
async def list_own_items(client: Client, user_id: CallerId) -> Response:
    return await client.get("/items", user_id)


@items.patch("/{item_id}")
async def update_item(client: Client, item_id: EntityId, data: ItemPatch, user_id: CallerId) -> Response:
    return await client.patch(f"/items/{item_id}", user_id, json=_body(data, exclude_unset=True))


@items.post("/{item_id}/comment")
async def add_comment(client: Client, item_id: EntityId, data: CommentIn, user_id: CallerId) -> Response:
    return await client.post(f"/items/{item_id}/comment", user_id, json=_body(data))


@bookings.post("")
async def create_booking(client: Client, data: BookingIn, user_id: CallerId) -> Response:
    return await client.post("/bookings", user_id, json=_body(data))


@bookings.patch("/{booking_id}")
async def approve_booking(client: Client, booking_id: EntityId, approved: bool, user_id: CallerId) -> Response:
    params = {"approved": "true" if approved else "false"}
    return await client.patch(f"/bookings/{booking_id}", user_id, params=params)


@bookings.get("/owner")
async def list_owner_bookings(
    client: Client, user_id: CallerId, state: str = "ALL", from_: From = 0,
    size: Size = settings.default_page_size,
) -> Response:
    _check_state(state)
    return await client.get("/bookings/owner", user_id, {"state": state, "from": from_, "size": size})


@bookings.get("/{booking_id}")
async def get_booking(client: Client, booking_id: EntityId, user_id: CallerId) -> Response:
    return await client.get(f"/bookings/{booking_id}", user_id)


@bookings.get("")
async def list_booker_bookings(
    client: Client, user_id: CallerId, state: str = "ALL", from_: From = 0,
    size: Size = settings.default_page_size,
) -> Response:
    _check_state(state)
    return await client.get("/bookings", user_id, {"state": state, "from": from_, "size": size})


@requests.post("")
async def create_request(client: Client, data: ItemRequestIn, user_id: CallerId) -> Response:
    return await client.post("/requests", user_id, json=_body(data))


@requests.get("")
async def list_own_requests(client: Client, user_id: CallerId) -> Response:
    return await client.get("/requests", user_id)


@requests.get("/all")
async def list_other_requests(
    client: Client, user_id: CallerId, from_: From = 0, size: Size = settings.default_page_size
) -> Response:
    return await client.get("/requests/all", user_id, {"from": from_, "size": size})


@requests.get("/{request_id}")
async def get_request(client: Client, request_id: EntityId, user_id: CallerId) -> Response:
    return await client.get(f"/requests/{request_id}", user_id)
