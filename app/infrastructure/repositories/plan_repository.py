"""
SQLAlchemy Implementation of Plan and SubPlan Repositories.
"""

from sqlalchemy.orm import Query, joinedload, selectinload

from app.domain.models.plan import Plan, SubPlan
from app.domain.repositories.plan_repository import PlanRepository, SubPlanRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPlanRepository(SQLAlchemyRepository[Plan], PlanRepository):
    """Plan repository implementation using SQLAlchemy."""

    def query(self) -> Query:
        return self.db.query(Plan).options(
            joinedload(Plan.company),
            joinedload(Plan.owner),
        )

    def get_with_sub_plans(self, id: int):
        return self.query().options(selectinload(Plan.sub_plans)).filter(Plan.id == id).first()


class SQLAlchemySubPlanRepository(SQLAlchemyRepository[SubPlan], SubPlanRepository):
    """SubPlan repository implementation using SQLAlchemy."""

    def query(self) -> Query:
        return self.db.query(SubPlan).options(
            joinedload(SubPlan.plan).joinedload(Plan.company),
            joinedload(SubPlan.plan).joinedload(Plan.owner),
        )
