"""User service — account administration."""

from typing import Optional

import structlog

from app.application.services.authorization import is_admin
from app.core.exceptions import DeleteBlockedException, EntityNotFoundException
from app.domain.models.user import Role, User
from app.domain.queries import Page, PageRequest, compact, equals, search
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import Principal
from app.domain.schemas.user import ADMIN_ONLY_FIELDS, UserUpdate

logger = structlog.get_logger(__name__)


def list_users(
    repo: UserRepository,
    page: PageRequest,
    search_term: Optional[str] = None,
    role: Optional[Role] = None,
    is_artisan: Optional[bool] = None,
) -> Page[User]:
    filters = compact([
        search(search_term, "username", "email", "first_name", "last_name"),
        equals("role", role),
        equals("is_artisan", is_artisan),
    ])
    return repo.paginate(page, filters)


def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found")
    return user


def update_user(repo: UserRepository, principal: Principal, user_id: int, body: UserUpdate) -> User:
    user = get_user(repo, user_id)
    data = body.model_dump(exclude_unset=True)
    if not is_admin(principal):
        data = {k: v for k, v in data.items() if k not in ADMIN_ONLY_FIELDS}
    return repo.update(user, data)


def delete_user(repo: UserRepository, user_id: int) -> None:
    user = get_user(repo, user_id)
    if user.product_count > 0:
        raise DeleteBlockedException("Cannot delete user with existing products")
    if user.companies:
        raise DeleteBlockedException("Cannot delete user with existing companies")
    if user.plans:
        raise DeleteBlockedException("Cannot delete user with existing plans")
    repo.delete(user)
    logger.info("User deleted", user_id=user_id)
