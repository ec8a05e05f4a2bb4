"""Users API routes — admin listing, self-or-admin access."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.application.services import product_service, user_service
from app.application.services.authorization import check_ownership
from app.core.responses import paginated_response, success_response
from app.domain.models.user import Role
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.domain.schemas.common import OwnerSummary
from app.domain.schemas.product import ProductRead
from app.domain.schemas.user import UserDetail, UserRead, UserUpdate
from app.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.interfaces.api.deps import get_current_user, page_params, require_admin
from app.interfaces.deps import get_product_repository, get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("")
def list_users(
    search: Optional[str] = None,
    role: Optional[Role] = None,
    is_artisan: Optional[bool] = Query(None, alias="isArtisan"),
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    admin: Principal = Depends(require_admin),
):
    result = user_service.list_users(repo, page, search_term=search, role=role, is_artisan=is_artisan)
    items = [UserDetail.model_validate(u) for u in result.items]
    return paginated_response(items, result.pagination, "Users retrieved successfully")


@router.get("/{user_id}")
def get_user(
    user_id: int,
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    user: Principal = Depends(get_current_user),
):
    check_ownership(repo.db, user, "user", user_id)
    account = user_service.get_user(repo, user_id)
    return success_response(UserDetail.model_validate(account), "User retrieved successfully")


@router.put("/{user_id}")
def update_user(
    user_id: int,
    body: UserUpdate,
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    user: Principal = Depends(get_current_user),
):
    check_ownership(repo.db, user, "user", user_id)
    account = user_service.update_user(repo, user, user_id, body)
    return success_response(UserRead.model_validate(account), "User updated successfully")


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    admin: Principal = Depends(require_admin),
):
    user_service.delete_user(repo, user_id)
    return success_response(None, "User deleted successfully")


@router.get("/{user_id}/products")
def get_user_products(
    user_id: int,
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
    products: SQLAlchemyProductRepository = Depends(get_product_repository),
    user: Principal = Depends(get_current_user),
):
    account = user_service.get_user(repo, user_id)
    result = product_service.list_products_by_owner(products, user_id, page)
    data = {
        "user": OwnerSummary.model_validate(account),
        "products": [ProductRead.model_validate(p) for p in result.items],
        "pagination": result.pagination,
    }
    return success_response(data, "User products retrieved successfully")
