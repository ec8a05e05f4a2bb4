"""
SQLAlchemy Implementation of Product Repository.
"""

from sqlalchemy.orm import Query, joinedload

from app.domain.models.product import Product
from app.domain.repositories.product_repository import ProductRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product], ProductRepository):
    """Product repository implementation using SQLAlchemy."""

    def query(self) -> Query:
        return self.db.query(Product).options(
            joinedload(Product.category),
            joinedload(Product.owner),
        )
