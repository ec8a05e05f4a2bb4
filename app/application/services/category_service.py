"""Category service — admin-managed catalog taxonomy."""

from typing import Optional

import structlog

from app.core.exceptions import DeleteBlockedException, EntityNotFoundException
from app.domain.models.category import Category
from app.domain.queries import Page, PageRequest, compact, equals, search
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.schemas.category import CategoryCreate, CategoryUpdate

logger = structlog.get_logger(__name__)


def list_categories(
    repo: CategoryRepository,
    page: PageRequest,
    search_term: Optional[str] = None,
    is_active: Optional[bool] = None,
) -> Page[Category]:
    filters = compact([
        search(search_term, "name", "description"),
        equals("is_active", is_active),
    ])
    return repo.paginate(page, filters)


def get_category(repo: CategoryRepository, category_id: int) -> Category:
    category = repo.get_by_id(category_id)
    if category is None:
        raise EntityNotFoundException("Category not found")
    return category


def create_category(repo: CategoryRepository, body: CategoryCreate) -> Category:
    # Duplicate names surface as IntegrityError -> 409 "name already exists".
    return repo.create(body.model_dump())


def update_category(repo: CategoryRepository, category_id: int, body: CategoryUpdate) -> Category:
    category = get_category(repo, category_id)
    return repo.update(category, body.model_dump(exclude_unset=True))


def delete_category(repo: CategoryRepository, category_id: int) -> None:
    category = get_category(repo, category_id)
    if category.product_count > 0:
        raise DeleteBlockedException("Cannot delete category with existing products")
    repo.delete(category)
    logger.info("Category deleted", category_id=category_id)
