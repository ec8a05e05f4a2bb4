"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from sqlalchemy import func

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()
