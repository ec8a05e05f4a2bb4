"""Plan service — plans and their sub-plans, owned through the company chain."""

from typing import Optional

import structlog

from app.application.services.authorization import ensure_owner
from app.core.exceptions import DeleteBlockedException, EntityNotFoundException, ForbiddenException
from app.domain.models.plan import Plan, SubPlan
from app.domain.queries import Equals, Page, PageRequest, compact, equals, search
from app.domain.repositories.company_repository import CompanyRepository
from app.domain.repositories.plan_repository import PlanRepository, SubPlanRepository
from app.domain.schemas.auth import Principal
from app.domain.schemas.plan import PlanCreate, PlanUpdate, SubPlanCreate, SubPlanUpdate

logger = structlog.get_logger(__name__)


# Plans

def list_plans(
    repo: PlanRepository,
    page: PageRequest,
    search_term: Optional[str] = None,
    company_id: Optional[int] = None,
) -> Page[Plan]:
    filters = compact([
        search(search_term, "name", "description"),
        equals("company_id", company_id),
    ])
    return repo.paginate(page, filters)


def list_plans_by_owner(repo: PlanRepository, owner_id: int, page: PageRequest) -> Page[Plan]:
    return repo.paginate(page, [Equals("owner_id", owner_id)])


def get_plan(repo: PlanRepository, plan_id: int) -> Plan:
    plan = repo.get_by_id(plan_id)
    if plan is None:
        raise EntityNotFoundException("Plan not found")
    return plan


def get_plan_detail(repo, plan_id: int) -> Plan:
    plan = repo.get_with_sub_plans(plan_id)
    if plan is None:
        raise EntityNotFoundException("Plan not found")
    return plan


def create_plan(
    repo: PlanRepository,
    companies: CompanyRepository,
    principal: Principal,
    body: PlanCreate,
) -> Plan:
    company = companies.get_by_id(body.company_id)
    if company is None:
        raise EntityNotFoundException("Company not found")
    if company.owner_id != principal.id:
        raise ForbiddenException("You can only create plans for your own companies")

    # owner_id is a snapshot of the company's owner at creation time.
    plan = repo.create({**body.model_dump(), "owner_id": company.owner_id})
    logger.info("Plan created", plan_id=plan.id, company_id=company.id)
    return plan


def update_plan(repo: PlanRepository, principal: Principal, plan_id: int, body: PlanUpdate) -> Plan:
    plan = get_plan(repo, plan_id)
    ensure_owner(principal, plan.owner_id)
    return repo.update(plan, body.model_dump(exclude_unset=True))


def delete_plan(repo: PlanRepository, principal: Principal, plan_id: int) -> None:
    plan = get_plan(repo, plan_id)
    ensure_owner(principal, plan.owner_id)
    if plan.sub_plan_count > 0:
        raise DeleteBlockedException("Cannot delete plan with existing sub-plans")
    repo.delete(plan)
    logger.info("Plan deleted", plan_id=plan_id, by=principal.id)


# Sub-plans

def list_sub_plans(
    repo: SubPlanRepository,
    page: PageRequest,
    search_term: Optional[str] = None,
    plan_id: Optional[int] = None,
) -> Page[SubPlan]:
    filters = compact([
        search(search_term, "name"),
        equals("plan_id", plan_id),
    ])
    return repo.paginate(page, filters)


def list_sub_plans_by_owner(repo: SubPlanRepository, owner_id: int, page: PageRequest) -> Page[SubPlan]:
    return repo.paginate(page, [Equals("owner_id", owner_id, via="plan")])


def get_sub_plan(repo: SubPlanRepository, sub_plan_id: int) -> SubPlan:
    sub_plan = repo.get_by_id(sub_plan_id)
    if sub_plan is None:
        raise EntityNotFoundException("Sub-plan not found")
    return sub_plan


def create_sub_plan(
    repo: SubPlanRepository,
    plans: PlanRepository,
    principal: Principal,
    body: SubPlanCreate,
) -> SubPlan:
    plan = plans.get_by_id(body.plan_id)
    if plan is None:
        raise EntityNotFoundException("Plan not found")
    if plan.owner_id != principal.id:
        raise ForbiddenException("You can only create sub-plans for your own plans")

    sub_plan = repo.create(body.model_dump())
    logger.info("Sub-plan created", sub_plan_id=sub_plan.id, plan_id=plan.id)
    return sub_plan


def update_sub_plan(repo: SubPlanRepository, principal: Principal, sub_plan_id: int, body: SubPlanUpdate) -> SubPlan:
    sub_plan = get_sub_plan(repo, sub_plan_id)
    ensure_owner(principal, sub_plan.plan.owner_id)
    return repo.update(sub_plan, body.model_dump(exclude_unset=True))


def delete_sub_plan(repo: SubPlanRepository, principal: Principal, sub_plan_id: int) -> None:
    sub_plan = get_sub_plan(repo, sub_plan_id)
    ensure_owner(principal, sub_plan.plan.owner_id)
    repo.delete(sub_plan)
    logger.info("Sub-plan deleted", sub_plan_id=sub_plan_id, by=principal.id)
