"""Pydantic schemas for Category."""

from datetime import datetime

from pydantic import Field, field_validator

from app.domain.schemas.common import CamelModel, reject_null


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    icon: str | None = None
    image_url: str | None = None
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class CategoryUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    icon: str | None = None
    image_url: str | None = None
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)

    @field_validator("name", "is_active", "sort_order")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class CategoryRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    icon: str | None = None
    image_url: str | None = None
    is_active: bool
    sort_order: int
    product_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
