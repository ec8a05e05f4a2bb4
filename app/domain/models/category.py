"""Category domain model — maps to the 'categories' table."""

from sqlalchemy import Boolean, Column, Integer, String, Text, func, select
from sqlalchemy.orm import column_property, relationship

from app.domain.models.product import Product
from app.infrastructure.database import Base, TimestampMixin


class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(255), nullable=True)
    image_url = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)

    products = relationship("Product", back_populates="category")
    product_count = column_property(
        select(func.count(Product.id))
        .where(Product.category_id == id)
        .correlate_except(Product)
        .scalar_subquery()
    )

    def __repr__(self):
        return f"<Category {self.name}>"
