"""
User endpoints - user directory CRUD.
"""

from fastapi import APIRouter, status

from shareit.db.repositories.user_repository import UserRepository
from shareit.db.session import DbSession
from shareit.schemas.user import UserCreate, UserResponse, UserUpdate
from shareit.services.user_service import UserService

router = APIRouter()


def _get_user_service(session: DbSession) -> UserService:
    return UserService(UserRepository(session))


@router.post("", response_model=UserResponse)
async def create_user(session: DbSession, data: UserCreate):
    return await _get_user_service(session).create(data)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(session: DbSession, user_id: int, data: UserUpdate):
    return await _get_user_service(session).update(user_id, data)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(session: DbSession, user_id: int):
    return await _get_user_service(session).get_by_id(user_id)


@router.get("", response_model=list[UserResponse])
async def list_users(session: DbSession):
    return await _get_user_service(session).list_users()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(session: DbSession, user_id: int):
    await _get_user_service(session).delete(user_id)
