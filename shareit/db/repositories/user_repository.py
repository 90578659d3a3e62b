"""
User repository - encapsulates all user data access.
"""

from sqlalchemy import exists, select

from shareit.db.models.user import User
from shareit.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Email lookups back the uniqueness rule."""

    def __init__(self, session):
        super().__init__(session, User)

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())
