"""
Category Repository Interface.
"""

from app.domain.models.category import Category
from app.domain.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Interface for Category-specific operations."""
