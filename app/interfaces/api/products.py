"""Products API routes — public catalog, owner-scoped writes."""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.services import product_service
from app.core.responses import paginated_response, success_response
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.domain.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from app.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from app.interfaces.api.deps import get_current_user, page_params
from app.interfaces.deps import get_category_repository, get_product_repository

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("")
def list_products(
    search: Optional[str] = None,
    category_id: Optional[int] = Query(None, alias="categoryId"),
    brand: Optional[str] = None,
    color: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyProductRepository = Depends(get_product_repository),
):
    result = product_service.list_products(
        repo,
        page,
        search_term=search,
        category_id=category_id,
        brand=brand,
        color=color,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    items = [ProductRead.model_validate(p) for p in result.items]
    return paginated_response(items, result.pagination, "Products retrieved successfully")


@router.get("/user/my-products")
def my_products(
    page: PageRequest = Depends(page_params),
    repo: SQLAlchemyProductRepository = Depends(get_product_repository),
    user: Principal = Depends(get_current_user),
):
    result = product_service.list_products_by_owner(repo, user.id, page)
    items = [ProductRead.model_validate(p) for p in result.items]
    return paginated_response(items, result.pagination, "Your products retrieved successfully")


@router.get("/{product_id}")
def get_product(
    product_id: int,
    repo: SQLAlchemyProductRepository = Depends(get_product_repository),
):
    product = product_service.get_product(repo, product_id)
    return success_response(ProductRead.model_validate(product), "Product retrieved successfully")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductCreate,
    repo: SQLAlchemyProductRepository = Depends(get_product_repository),
    categories: SQLAlchemyCategoryRepository = Depends(get_category_repository),
    user: Principal = Depends(get_current_user),
):
    product = product_service.create_product(repo, categories, user, body)
    return success_response(ProductRead.model_validate(product), "Product created successfully")


@router.put("/{product_id}")
def update_product(
    product_id: int,
    body: ProductUpdate,
    repo: SQLAlchemyProductRepository = Depends(get_product_repository),
    categories: SQLAlchemyCategoryRepository = Depends(get_category_repository),
    user: Principal = Depends(get_current_user),
):
    product = product_service.update_product(repo, categories, user, product_id, body)
    return success_response(ProductRead.model_validate(product), "Product updated successfully")


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    repo: SQLAlchemyProductRepository = Depends(get_product_repository),
    user: Principal = Depends(get_current_user),
):
    product_service.delete_product(repo, user, product_id)
    return success_response(None, "Product deleted successfully")
