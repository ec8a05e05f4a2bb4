"""Sub-plans API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.services import plan_service
from app.core.responses import paginated_response, success_response
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.domain.schemas.plan import SubPlanCreate, SubPlanDetail, SubPlanListItem, SubPlanUpdate
from app.infrastructure.repositories.plan_repository import SQLAlchemyPlanRepository, SQLAlchemySubPlanRepository
from app.interfaces.api.deps import get_current_user, page_params
from app.interfaces.deps import get_plan_repository, get_subplan_repository

router = APIRouter(prefix="/api/subplans", tags=["Sub-plans"])


@router.get("")
def list_sub_plans(
    search: Optional[str] = None,
    plan_id: Optional[int] = Query(None, alias="planId"),
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemySubPlanRepository = Depends(get_subplan_repository),
):
    result = plan_service.list_sub_plans(repo, page, search_term=search, plan_id=plan_id)
    items = [SubPlanListItem.model_validate(s) for s in result.items]
    return paginated_response(items, result.pagination, "Sub-plans retrieved successfully")


@router.get("/user/my-subplans")
def my_sub_plans(
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemySubPlanRepository = Depends(get_subplan_repository),
    user: Principal = Depends(get_current_user),
):
    result = plan_service.list_sub_plans_by_owner(repo, user.id, page)
    items = [SubPlanListItem.model_validate(s) for s in result.items]
    return paginated_response(items, result.pagination, "Your sub-plans retrieved successfully")


@router.get("/{sub_plan_id}")
def get_sub_plan(sub_plan_id: int, repo: SQLAlchemySubPlanRepository = Depends(get_subplan_repository)):
    sub_plan = plan_service.get_sub_plan(repo, sub_plan_id)
    return success_response(SubPlanDetail.model_validate(sub_plan), "Sub-plan retrieved successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_sub_plan(
    body: SubPlanCreate,
    repo: SQLAlchemySubPlanRepository = Depends(get_subplan_repository),
    plans: SQLAlchemyPlanRepository = Depends(get_plan_repository),
    user: Principal = Depends(get_current_user),
):
    sub_plan = plan_service.create_sub_plan(repo, plans, user, body)
    return success_response(SubPlanListItem.model_validate(sub_plan), "Sub-plan created successfully")


@router.put("/{sub_plan_id}")
def update_sub_plan(
    sub_plan_id: int,
    body: SubPlanUpdate,
    repo: SQLAlchemySubPlanRepository = Depends(get_subplan_repository),
    user: Principal = Depends(get_current_user),
):
    sub_plan = plan_service.update_sub_plan(repo, user, sub_plan_id, body)
    return success_response(SubPlanListItem.model_validate(sub_plan), "Sub-plan updated successfully")


@router.delete("/{sub_plan_id}")
def delete_sub_plan(
    sub_plan_id: int,
    repo: SQLAlchemySubPlanRepository = Depends(get_subplan_repository),
    user: Principal = Depends(get_current_user),
):
    plan_service.delete_sub_plan(repo, user, sub_plan_id)
    return success_response(None, "Sub-plan deleted successfully")
