"""
Pytest fixtures - test DB, client, seeded users and items.
Challenge: Isolated tests; every test gets a fresh in-memory SQLite database.
"""

from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shareit.db.base import Base
from shareit.db.models import Booking, BookingStatus, Item, User
from shareit.db.session import get_db
from shareit.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"
USER_HEADER = "X-Sharer-User-Id"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def _add(session: AsyncSession, entity):
    session.add(entity)
    await session.flush()
    await session.refresh(entity)
    return entity


@pytest_asyncio.fixture
async def owner(session: AsyncSession) -> User:
    return await _add(session, User(name="Owner", email="owner@example.com"))


@pytest_asyncio.fixture
async def booker(session: AsyncSession) -> User:
    return await _add(session, User(name="Booker", email="booker@example.com"))


@pytest_asyncio.fixture
async def stranger(session: AsyncSession) -> User:
    return await _add(session, User(name="Stranger", email="stranger@example.com"))


@pytest_asyncio.fixture
async def item(session: AsyncSession, owner: User) -> Item:
    return await _add(
        session,
        Item(name="Drill", description="Cordless power drill", available=True, owner=owner),
    )


@pytest.fixture
def make_booking(session: AsyncSession):
    """Insert a booking directly, bypassing service rules (e.g. for past-dated rentals)."""

    async def _make(item: Item, booker: User, start_offset: timedelta, end_offset: timedelta,
                    status: BookingStatus = BookingStatus.WAITING) -> Booking:
        now = datetime.now()
        return await _add(
            session,
            Booking(start=now + start_offset, end=now + end_offset, status=status,
                    booker=booker, item=item),
        )

    return _make


@pytest.fixture
def headers_for():
    """Caller identity header for a user."""

    def _headers(user: User) -> dict:
        return {USER_HEADER: str(user.id)}

    return _headers
