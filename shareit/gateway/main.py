"""
Gateway application - validating reverse proxy in front of the ShareIt server.
Run: uvicorn shareit.gateway.main:app --port 8080
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from shareit import __version__
from shareit.api.errors import register_exception_handlers
from shareit.config import get_settings
from shareit.core.logging_config import setup_logging
from shareit.gateway import routes
from shareit.gateway.client import ShareItClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Gateway forwarding to %s", app.state.client.base_url)
    yield
    await app.state.client.aclose()


def create_gateway_app(transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Build the gateway. ``transport`` replaces the network (tests use httpx.MockTransport)."""
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title=f"{settings.app_name} Gateway",
        description="Validates ShareIt API calls and forwards them to the server.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.client = ShareItClient(
        settings.server_url, settings.gateway_timeout_seconds, transport=transport
    )
    register_exception_handlers(app)
    for router in (routes.users, routes.items, routes.bookings, routes.requests):
        app.include_router(router)
    return app


app = create_gateway_app()
