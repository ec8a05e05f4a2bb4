"""
SQLAlchemy Implementation of Company Repository.
"""

from sqlalchemy.orm import Query, joinedload, selectinload

from app.domain.models.company import Company
from app.domain.models.plan import Plan
from app.domain.repositories.company_repository import CompanyRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCompanyRepository(SQLAlchemyRepository[Company], CompanyRepository):
    """Company repository implementation using SQLAlchemy."""

    def query(self) -> Query:
        return self.db.query(Company).options(joinedload(Company.owner))

    def get_with_plans(self, id: int):
        return (
            self.query()
            .options(selectinload(Company.plans).joinedload(Plan.owner))
            .filter(Company.id == id)
            .first()
        )
