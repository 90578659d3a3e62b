"""
User model - identity of owners, bookers, commenters and requestors.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from shareit.db.base import Base


class User(Base):
    """User entity. Email is unique across the directory."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(512), unique=True, index=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
