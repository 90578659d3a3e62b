"""
User service - user directory with unique emails.
"""

import logging

from shareit.core.exceptions import ConflictError, NotFoundError
from shareit.db.models.user import User
from shareit.db.repositories.user_repository import UserRepository
from shareit.schemas.user import UserCreate, UserResponse, UserUpdate
from shareit.services.mappers import user_to_response

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def create(self, data: UserCreate) -> UserResponse:
        logger.info("Creating user %s", data.email)
        if await self.user_repo.exists_by_email(data.email):
            logger.warning("Email %s is already registered", data.email)
            raise ConflictError("Email already registered")
        user = await self.user_repo.add(User(name=data.name, email=data.email))
        return user_to_response(user)

    async def update(self, user_id: int, data: UserUpdate) -> UserResponse:
        """Apply non-null fields. A changed email must still be unique."""
        logger.info("Updating user %s", user_id)
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        if data.name is not None:
            user.name = data.name
        if data.email is not None and data.email != user.email:
            if await self.user_repo.exists_by_email(data.email):
                logger.warning("Email %s is used by another user", data.email)
                raise ConflictError("Email is used by another user")
            user.email = data.email
        user = await self.user_repo.save(user)
        return user_to_response(user)

    async def get_by_id(self, user_id: int) -> UserResponse:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user_to_response(user)

    async def list_users(self) -> list[UserResponse]:
        return [user_to_response(u) for u in await self.user_repo.get_many()]

    async def delete(self, user_id: int) -> None:
        logger.info("Deleting user %s", user_id)
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        await self.user_repo.delete(user)
