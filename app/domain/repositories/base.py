"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import Any, Dict, Optional, Protocol, Sequence, TypeVar

from app.domain.queries import Filter, Page, PageRequest, SortSpec

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def paginate(
        self,
        page: PageRequest,
        filters: Sequence[Filter] = (),
        order: Sequence[SortSpec] = (),
    ) -> Page[T]:
        """One page of entities matching every filter, plus pagination metadata."""
        ...

    def create(self, data: Dict[str, Any]) -> T:
        """Create a new entity."""
        ...

    def update(self, db_obj: T, data: Dict[str, Any]) -> T:
        """Apply the given fields to an existing entity."""
        ...

    def delete(self, db_obj: T) -> None:
        """Physically delete an entity."""
        ...
