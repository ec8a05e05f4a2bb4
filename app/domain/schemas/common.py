"""Shared pydantic building blocks: camelCase wire format and pagination."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool


class OwnerSummary(CamelModel):
    id: int
    username: str
    first_name: str | None = None
    last_name: str | None = None


class CategorySummary(CamelModel):
    id: int
    name: str


def reject_null(value):
    """Partial updates may omit a required column but never null it."""
    if value is None:
        raise ValueError("must not be null")
    return value
