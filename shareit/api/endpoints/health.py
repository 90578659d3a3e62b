"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness verifies the database answers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from shareit.config import get_settings
from shareit.db.session import DbSession

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the database be queried?"""
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}
