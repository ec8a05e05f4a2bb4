"""User domain model — maps to the 'users' table."""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, func, select
from sqlalchemy.orm import column_property, relationship

from app.domain.models.product import Product
from app.infrastructure.database import Base, TimestampMixin


class Role(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    phone = Column(String(30), nullable=True)
    avatar = Column(String(500), nullable=True)
    role = Column(Enum(Role, name="role"), nullable=False, default=Role.USER)
    is_artisan = Column(Boolean, nullable=False, default=False)
    special_code = Column(String(255), nullable=True)

    # Password reset (no delivery, token is only logged)
    reset_token = Column(String(255), nullable=True, index=True)
    reset_token_expiry = Column(DateTime(timezone=True), nullable=True)

    products = relationship("Product", back_populates="owner")
    companies = relationship("Company", back_populates="owner")
    plans = relationship("Plan", back_populates="owner")
    product_count = column_property(
        select(func.count(Product.id))
        .where(Product.owner_id == id)
        .correlate_except(Product)
        .scalar_subquery()
    )

    def __repr__(self):
        return f"<User {self.email}>"
