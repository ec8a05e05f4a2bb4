"""Categories API routes — public reads, admin-only writes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.services import category_service, product_service
from app.core.responses import paginated_response, success_response
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.domain.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from app.domain.schemas.product import ProductRead
from app.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from app.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from app.interfaces.api.deps import category_page_params, page_params, require_admin
from app.interfaces.deps import get_category_repository, get_product_repository

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("")
def list_categories(
    search: Optional[str] = None,
    is_active: Optional[bool] = Query(None, alias="isActive"),
    page: PageRequest = Depends(category_page_params),
    repo: SQLAlchemyCategoryRepository = Depends(get_category_repository),
):
    result = category_service.list_categories(repo, page, search_term=search, is_active=is_active)
    items = [CategoryRead.model_validate(c) for c in result.items]
    return paginated_response(items, result.pagination, "Categories retrieved successfully")


@router.get("/{category_id}")
def get_category(category_id: int, repo: SQLAlchemyCategoryRepository = Depends(get_category_repository)):
    category = category_service.get_category(repo, category_id)
    return success_response(CategoryRead.model_validate(category), "Category retrieved successfully")


@router.get("/{category_id}/products")
def get_category_products(
    category_id: int,
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyCategoryRepository = Depends(get_category_repository),
    products: SQLAlchemyProductRepository = Depends(get_product_repository),
):
    category = category_service.get_category(repo, category_id)
    result = product_service.list_products_by_category(products, category_id, page)
    data = {
        "category": CategoryRead.model_validate(category),
        "products": [ProductRead.model_validate(p) for p in result.items],
        "pagination": result.pagination,
    }
    return success_response(data, "Category products retrieved successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    repo: SQLAlchemyCategoryRepository = Depends(get_category_repository),
    admin: Principal = Depends(require_admin),
):
    category = category_service.create_category(repo, body)
    return success_response(CategoryRead.model_validate(category), "Category created successfully")


@router.put("/{category_id}")
def update_category(
    category_id: int,
    body: CategoryUpdate,
    repo: SQLAlchemyCategoryRepository = Depends(get_category_repository),
    admin: Principal = Depends(require_admin),
):
    category = category_service.update_category(repo, category_id, body)
    return success_response(CategoryRead.model_validate(category), "Category updated successfully")


@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    repo: SQLAlchemyCategoryRepository = Depends(get_category_repository),
    admin: Principal = Depends(require_admin),
):
    category_service.delete_category(repo, category_id)
    return success_response(None, "Category deleted successfully")
