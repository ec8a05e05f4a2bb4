"""Product service — catalog queries and owner-scoped product lifecycle."""

from decimal import Decimal
from typing import Optional

import structlog

from app.application.services.authorization import ensure_owner
from app.core.exceptions import EntityNotFoundException
from app.domain.models.product import Product
from app.domain.queries import Equals, Page, PageRequest, between, compact, contains, equals, product_sort, search
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.schemas.auth import Principal
from app.domain.schemas.product import ProductCreate, ProductUpdate

logger = structlog.get_logger(__name__)


def list_products(
    repo: ProductRepository,
    page: PageRequest,
    search_term: Optional[str] = None,
    category_id: Optional[int] = None,
    brand: Optional[str] = None,
    color: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
) -> Page[Product]:
    """Get products with filtering, sorting and pagination."""
    filters = compact([
        search(search_term, "name", "description", "brand"),
        equals("category_id", category_id),
        contains("brand", brand),
        contains("color", color),
        between("price", min_price, max_price),
    ])
    sort = product_sort(sort_by, sort_order)
    return repo.paginate(page, filters, [sort] if sort else ())


def list_products_by_owner(repo: ProductRepository, owner_id: int, page: PageRequest) -> Page[Product]:
    return repo.paginate(page, [Equals("owner_id", owner_id)])


def list_products_by_category(repo: ProductRepository, category_id: int, page: PageRequest) -> Page[Product]:
    return repo.paginate(page, [Equals("category_id", category_id)])


def get_product(repo: ProductRepository, product_id: int) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundException("Product not found")
    return product


def _ensure_category(categories: CategoryRepository, category_id: int) -> None:
    if categories.get_by_id(category_id) is None:
        raise EntityNotFoundException("Category not found")


def create_product(
    repo: ProductRepository,
    categories: CategoryRepository,
    principal: Principal,
    body: ProductCreate,
) -> Product:
    _ensure_category(categories, body.category_id)
    product = repo.create({**body.model_dump(), "owner_id": principal.id})
    logger.info("Product created", product_id=product.id, owner_id=principal.id)
    return product


def update_product(
    repo: ProductRepository,
    categories: CategoryRepository,
    principal: Principal,
    product_id: int,
    body: ProductUpdate,
) -> Product:
    product = get_product(repo, product_id)
    ensure_owner(principal, product.owner_id)

    data = body.model_dump(exclude_unset=True)
    if data.get("category_id") is not None:
        _ensure_category(categories, data["category_id"])
    return repo.update(product, data)


def delete_product(repo: ProductRepository, principal: Principal, product_id: int) -> None:
    product = get_product(repo, product_id)
    ensure_owner(principal, product.owner_id)
    repo.delete(product)
    logger.info("Product deleted", product_id=product_id, by=principal.id)
