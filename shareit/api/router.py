"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from shareit.api.endpoints import bookings, health, items, requests, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(requests.router, prefix="/requests", tags=["requests"])
