"""Plans API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.services import plan_service
from app.core.responses import paginated_response, success_response
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.domain.schemas.plan import PlanCreate, PlanDetail, PlanRead, PlanUpdate
from app.infrastructure.repositories.company_repository import SQLAlchemyCompanyRepository
from app.infrastructure.repositories.plan_repository import SQLAlchemyPlanRepository
from app.interfaces.api.deps import get_current_user, page_params
from app.interfaces.deps import get_company_repository, get_plan_repository

router = APIRouter(prefix="/api/plans", tags=["Plans"])


@router.get("")
def list_plans(
    search: Optional[str] = None,
    company_id: Optional[int] = Query(None, alias="companyId"),
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyPlanRepository = Depends(get_plan_repository),
):
    result = plan_service.list_plans(repo, page, search_term=search, company_id=company_id)
    items = [PlanRead.model_validate(p) for p in result.items]
    return paginated_response(items, result.pagination, "Plans retrieved successfully")


@router.get("/user/my-plans")
def my_plans(
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyPlanRepository = Depends(get_plan_repository),
    user: Principal = Depends(get_current_user),
):
    result = plan_service.list_plans_by_owner(repo, user.id, page)
    items = [PlanRead.model_validate(p) for p in result.items]
    return paginated_response(items, result.pagination, "Your plans retrieved successfully")


@router.get("/{plan_id}")
def get_plan(plan_id: int, repo: SQLAlchemyPlanRepository = Depends(get_plan_repository)):
    plan = plan_service.get_plan_detail(repo, plan_id)
    return success_response(PlanDetail.model_validate(plan), "Plan retrieved successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_plan(
    body: PlanCreate,
    repo: SQLAlchemyPlanRepository = Depends(get_plan_repository),
    companies: SQLAlchemyCompanyRepository = Depends(get_company_repository),
    user: Principal = Depends(get_current_user),
):
    plan = plan_service.create_plan(repo, companies, user, body)
    return success_response(PlanRead.model_validate(plan), "Plan created successfully")


@router.put("/{plan_id}")
def update_plan(
    plan_id: int,
    body: PlanUpdate,
    repo: SQLAlchemyPlanRepository = Depends(get_plan_repository),
    user: Principal = Depends(get_current_user),
):
    plan = plan_service.update_plan(repo, user, plan_id, body)
    return success_response(PlanRead.model_validate(plan), "Plan updated successfully")


@router.delete("/{plan_id}")
def delete_plan(
    plan_id: int,
    repo: SQLAlchemyPlanRepository = Depends(get_plan_repository),
    user: Principal = Depends(get_current_user),
):
    plan_service.delete_plan(repo, user, plan_id)
    return success_response(None, "Plan deleted successfully")
