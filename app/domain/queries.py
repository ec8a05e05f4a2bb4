"""
Typed list-query vocabulary.

Handlers translate request parameters into these values; the repository layer
turns them into SQL. Field names are checked against the model when the query
is built, so nothing from the request is ever used as a raw column name.
"""

import math
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from app.domain.schemas.common import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class Search:
    """Case-insensitive substring match OR-ed across `fields`."""
    term: str
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class Equals:
    """Exact match; `via` names a many-to-one relationship to filter through."""
    field: str
    value: Any
    via: Optional[str] = None


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match on one field."""
    field: str
    value: str


@dataclass(frozen=True)
class Range:
    """Inclusive bounds; a missing bound is open."""
    field: str
    lower: Any = None
    upper: Any = None


Filter = Union[Search, Equals, Contains, Range]


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = True


PRODUCT_SORT_FIELDS = {
    "name": "name",
    "price": "price",
    "rating": "rating",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


def product_sort(sort_by: Optional[str], sort_order: Optional[str]) -> Optional[SortSpec]:
    """Resolve a caller-supplied product ordering; unknown fields yield None."""
    column = PRODUCT_SORT_FIELDS.get(sort_by or "")
    if column is None:
        return None
    return SortSpec(column, descending=sort_order != "asc")


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = 10

    @classmethod
    def bounded(cls, page: int, limit: int, max_limit: int) -> "PageRequest":
        return cls(page=max(page, 1), limit=min(max(limit, 1), max_limit))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def build_pagination(request: PageRequest, total_items: int) -> Pagination:
    total_pages = math.ceil(total_items / request.limit) if request.limit else 0
    return Pagination(
        current_page=request.page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=request.limit,
        has_next_page=request.page < total_pages,
        has_prev_page=request.page > 1,
    )


@dataclass
class Page(Generic[T]):
    items: List[T]
    pagination: Pagination


def compact(filters: Sequence[Optional[Filter]]) -> List[Filter]:
    """Drop filters whose parameter was absent from the request."""
    return [f for f in filters if f is not None]


def search(term: Optional[str], *fields: str) -> Optional[Search]:
    return Search(term, tuple(fields)) if term else None


def equals(name: str, value: Any, via: Optional[str] = None) -> Optional[Equals]:
    return Equals(name, value, via) if value is not None else None


def contains(name: str, value: Optional[str]) -> Optional[Contains]:
    return Contains(name, value) if value else None


def between(name: str, lower: Any = None, upper: Any = None) -> Optional[Range]:
    if lower is None and upper is None:
        return None
    return Range(name, lower, upper)
