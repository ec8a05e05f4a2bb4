"""Pydantic schemas for authentication and the authenticated principal."""

from pydantic import EmailStr, Field, field_validator

from app.domain.models.user import Role
from app.domain.schemas.common import CamelModel, reject_null
from app.domain.schemas.user import UserRead


class Principal(CamelModel):
    """Identity derived from a validated bearer token."""

    id: int
    username: str
    email: str
    role: Role
    is_artisan: bool = False


class RegisterRequest(CamelModel):
    username: str = Field(min_length=3, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    special_code: str | None = None
    is_artisan: bool = False


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ResetPasswordRequest(CamelModel):
    email: str | None = None


class AuthResult(CamelModel):
    user: UserRead
    token: str


class ProfileUpdate(CamelModel):
    username: str | None = Field(default=None, min_length=3, max_length=255)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    avatar: str | None = Field(default=None, max_length=500)

    @field_validator("username")
    @classmethod
    def required_columns_not_null(cls, value):
        return reject_null(value)
