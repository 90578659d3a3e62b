"""
FastAPI application entry point.
Challenge: Mount routes, error mapping, middleware (Prometheus), engine cleanup on shutdown.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from shareit import __version__
from shareit.api.errors import register_exception_handlers
from shareit.api.router import api_router
from shareit.config import get_settings
from shareit.core.logging_config import setup_logging
from shareit.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log readiness. Shutdown: release pooled DB connections."""
    logger.info("ShareIt server starting")
    yield
    await engine.dispose()
    logger.info("ShareIt server stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Peer-to-peer item sharing: users, items, bookings, comments and item requests.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router)
    return app


app = create_app()
