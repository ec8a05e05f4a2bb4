"""
User Repository Interface.
"""

from typing import Optional

from app.domain.models.user import User
from app.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (case-insensitive) email."""
        ...

    def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by username."""
        ...
