"""Companies API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.application.services import company_service
from app.core.responses import paginated_response, success_response
from app.domain.models.company import CompanyType
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.domain.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from app.domain.schemas.plan import CompanyDetail
from app.infrastructure.repositories.company_repository import SQLAlchemyCompanyRepository
from app.interfaces.api.deps import get_current_user, page_params
from app.interfaces.deps import get_company_repository

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.get("")
def list_companies(
    search: Optional[str] = None,
    type: Optional[CompanyType] = None,
    wilaya: Optional[str] = None,
    commune: Optional[str] = None,
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyCompanyRepository = Depends(get_company_repository),
):
    result = company_service.list_companies(
        repo, page, search_term=search, company_type=type, wilaya=wilaya, commune=commune
    )
    items = [CompanyRead.model_validate(c) for c in result.items]
    return paginated_response(items, result.pagination, "Companies retrieved successfully")


@router.get("/user/my-companies")
def my_companies(
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyCompanyRepository = Depends(get_company_repository),
    user: Principal = Depends(get_current_user),
):
    result = company_service.list_companies_by_owner(repo, user.id, page)
    items = [CompanyRead.model_validate(c) for c in result.items]
    return paginated_response(items, result.pagination, "Your companies retrieved successfully")


@router.get("/{company_id}")
def get_company(company_id: int, repo: SQLAlchemyCompanyRepository = Depends(get_company_repository)):
    company = company_service.get_company_detail(repo, company_id)
    return success_response(CompanyDetail.model_validate(company), "Company retrieved successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_company(
    body: CompanyCreate,
    repo: SQLAlchemyCompanyRepository = Depends(get_company_repository),
    user: Principal = Depends(get_current_user),
):
    company = company_service.create_company(repo, user, body)
    return success_response(CompanyRead.model_validate(company), "Company created successfully")


@router.put("/{company_id}")
def update_company(
    company_id: int,
    body: CompanyUpdate,
    repo: SQLAlchemyCompanyRepository = Depends(get_company_repository),
    user: Principal = Depends(get_current_user),
):
    company = company_service.update_company(repo, user, company_id, body)
    return success_response(CompanyRead.model_validate(company), "Company updated successfully")


@router.delete("/{company_id}")
def delete_company(
    company_id: int,
    repo: SQLAlchemyCompanyRepository = Depends(get_company_repository),
    user: Principal = Depends(get_current_user),
):
    company_service.delete_company(repo, user, company_id)
    return success_response(None, "Company deleted successfully")
