"""Pydantic schemas for Product."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from app.domain.schemas.common import CamelModel, CategorySummary, OwnerSummary, reject_null


class ProductCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    category_id: int = Field(ge=1)
    brand: str | None = Field(default=None, max_length=255)
    color: str | None = Field(default=None, max_length=50)
    image_url: str | None = None
    ar_model_url: str | None = None
    ar_model_preview: str | None = None


class ProductUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    category_id: int | None = Field(default=None, ge=1)
    brand: str | None = Field(default=None, max_length=255)
    color: str | None = Field(default=None, max_length=50)
    image_url: str | None = None
    ar_model_url: str | None = None
    ar_model_preview: str | None = None

    @field_validator("name", "price", "category_id")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


class ProductRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    price: Decimal
    brand: str | None = None
    color: str | None = None
    image_url: str | None = None
    ar_model_url: str | None = None
    ar_model_preview: str | None = None
    rating: float = 0
    review_count: int = 0
    category_id: int
    owner_id: int
    category: CategorySummary | None = None
    owner: OwnerSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
