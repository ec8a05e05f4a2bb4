"""
Company Repository Interface.
"""

from app.domain.models.company import Company
from app.domain.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    """Interface for Company-specific operations."""
