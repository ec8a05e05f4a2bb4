"""Pydantic schemas for User."""

from datetime import datetime

from pydantic import Field, field_validator

from app.domain.models.user import Role
from app.domain.schemas.common import CamelModel, reject_null


class UserRead(CamelModel):
    id: int
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    avatar: str | None = None
    role: Role
    is_artisan: bool
    special_code: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserDetail(UserRead):
    product_count: int = 0


class UserUpdate(CamelModel):
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    avatar: str | None = Field(default=None, max_length=500)

    # Applied only for ADMIN callers
    role: Role | None = None
    is_artisan: bool | None = None
    special_code: str | None = None

    @field_validator("role", "is_artisan")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)


ADMIN_ONLY_FIELDS = frozenset({"role", "is_artisan", "special_code"})
