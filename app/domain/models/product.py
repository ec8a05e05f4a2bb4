"""Product domain model — maps to the 'products' table."""

from sqlalchemy import Column, Float, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base, TimestampMixin


class Product(TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    brand = Column(String(255), nullable=True, index=True)
    color = Column(String(50), nullable=True)
    image_url = Column(String(500), nullable=True)
    ar_model_url = Column(String(500), nullable=True)
    ar_model_preview = Column(String(500), nullable=True)
    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    category = relationship("Category", back_populates="products")
    owner = relationship("User", back_populates="products")

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"
