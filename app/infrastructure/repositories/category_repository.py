"""
SQLAlchemy Implementation of Category Repository.
"""

from typing import ClassVar, Sequence

from app.domain.models.category import Category
from app.domain.queries import SortSpec
from app.domain.repositories.category_repository import CategoryRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCategoryRepository(SQLAlchemyRepository[Category], CategoryRepository):
    """Category repository implementation using SQLAlchemy."""

    default_order: ClassVar[Sequence[SortSpec]] = (
        SortSpec("sort_order", descending=False),
        SortSpec("name", descending=False),
    )
