"""Company service — company registry owned by users."""

from typing import Optional

import structlog

from app.application.services.authorization import ensure_owner
from app.core.exceptions import DeleteBlockedException, EntityNotFoundException
from app.domain.models.company import Company, CompanyType
from app.domain.queries import Equals, Page, PageRequest, compact, contains, equals, search
from app.domain.repositories.company_repository import CompanyRepository
from app.domain.schemas.auth import Principal
from app.domain.schemas.company import CompanyCreate, CompanyUpdate

logger = structlog.get_logger(__name__)


def list_companies(
    repo: CompanyRepository,
    page: PageRequest,
    search_term: Optional[str] = None,
    company_type: Optional[CompanyType] = None,
    wilaya: Optional[str] = None,
    commune: Optional[str] = None,
) -> Page[Company]:
    filters = compact([
        search(search_term, "raison_sociale", "numero_inscription", "adresse"),
        equals("type", company_type),
        contains("wilaya", wilaya),
        contains("commune", commune),
    ])
    return repo.paginate(page, filters)


def list_companies_by_owner(repo: CompanyRepository, owner_id: int, page: PageRequest) -> Page[Company]:
    return repo.paginate(page, [Equals("owner_id", owner_id)])


def get_company(repo: CompanyRepository, company_id: int) -> Company:
    company = repo.get_by_id(company_id)
    if company is None:
        raise EntityNotFoundException("Company not found")
    return company


def get_company_detail(repo, company_id: int) -> Company:
    company = repo.get_with_plans(company_id)
    if company is None:
        raise EntityNotFoundException("Company not found")
    return company


def create_company(repo: CompanyRepository, principal: Principal, body: CompanyCreate) -> Company:
    company = repo.create({**body.model_dump(), "owner_id": principal.id})
    logger.info("Company created", company_id=company.id, owner_id=principal.id)
    return company


def update_company(repo: CompanyRepository, principal: Principal, company_id: int, body: CompanyUpdate) -> Company:
    company = get_company(repo, company_id)
    ensure_owner(principal, company.owner_id)
    return repo.update(company, body.model_dump(exclude_unset=True))


def delete_company(repo: CompanyRepository, principal: Principal, company_id: int) -> None:
    company = get_company(repo, company_id)
    ensure_owner(principal, company.owner_id)
    if company.plan_count > 0:
        raise DeleteBlockedException("Cannot delete company with existing plans")
    repo.delete(company)
    logger.info("Company deleted", company_id=company_id, by=principal.id)
