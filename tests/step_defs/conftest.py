"""
BDD fixtures - a synchronous TestClient over a fresh in-memory database.
pytest-bdd steps are plain functions, so the app runs in TestClient's own event loop
and the database is created lazily inside that loop.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import parsers, then, when
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shareit.db.base import Base
from shareit.db.session import get_db
from shareit.main import app


@pytest.fixture
def api():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    schema = {"created": False}

    async def override_get_db():
        if not schema["created"]:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            schema["created"] = True
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
        client.portal.call(engine.dispose)
    app.dependency_overrides.clear()


@pytest.fixture
def context():
    """Scenario state shared between steps: users, items, last response."""
    return {"users": {}, "items": {}, "response": None}


@when(parsers.parse('I request "{method}" "{path}"'))
def request_path(api, context, method, path):
    context["response"] = api.request(method, path)


@then(parsers.parse("the response status should be {status:d}"))
def response_status(context, status):
    assert context["response"].status_code == status


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(context, key, value):
    assert context["response"].json().get(key) == value
