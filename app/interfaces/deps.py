"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.domain.models.category import Category
from app.domain.models.company import Company
from app.domain.models.plan import Plan, SubPlan
from app.domain.models.product import Product
from app.domain.models.user import User
from app.infrastructure.database import get_db
from app.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from app.infrastructure.repositories.company_repository import SQLAlchemyCompanyRepository
from app.infrastructure.repositories.plan_repository import SQLAlchemyPlanRepository, SQLAlchemySubPlanRepository
from app.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_product_repository(db: Session = Depends(get_db)) -> SQLAlchemyProductRepository:
    """Get product repository instance."""
    return SQLAlchemyProductRepository(db, Product)


def get_category_repository(db: Session = Depends(get_db)) -> SQLAlchemyCategoryRepository:
    return SQLAlchemyCategoryRepository(db, Category)


def get_company_repository(db: Session = Depends(get_db)) -> SQLAlchemyCompanyRepository:
    return SQLAlchemyCompanyRepository(db, Company)


def get_plan_repository(db: Session = Depends(get_db)) -> SQLAlchemyPlanRepository:
    return SQLAlchemyPlanRepository(db, Plan)


def get_subplan_repository(db: Session = Depends(get_db)) -> SQLAlchemySubPlanRepository:
    return SQLAlchemySubPlanRepository(db, SubPlan)
