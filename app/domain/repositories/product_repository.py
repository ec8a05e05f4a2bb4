"""
Product Repository Interface.
"""

from app.domain.models.product import Product
from app.domain.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Interface for Product-specific operations."""
