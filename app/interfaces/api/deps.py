"""FastAPI dependencies — bearer authentication, role guards, list parameters."""

from typing import Optional

from fastapi import Depends, Header, Query

from app.application.services import auth_service
from app.application.services.authorization import authorize
from app.config import get_settings
from app.domain.models.user import Role
from app.domain.queries import PageRequest
from app.domain.schemas.auth import Principal
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.interfaces.deps import get_user_repository

settings = get_settings()


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    repo: SQLAlchemyUserRepository = Depends(get_user_repository),
) -> Principal:
    """Extract and validate the current principal from the bearer token."""
    return auth_service.authenticate(repo, authorization)


def require_roles(*roles: Role):
    def dependency(user: Principal = Depends(get_current_user)) -> Principal:
        authorize(user, roles)
        return user

    return dependency


require_admin = require_roles(Role.ADMIN)


def _page_params(default_limit: int):
    def dependency(
        page: int = Query(1, ge=1),
        limit: int = Query(default_limit, ge=1),
    ) -> PageRequest:
        return PageRequest.bounded(page, limit, settings.MAX_PAGE_SIZE)

    return dependency


page_params = _page_params(settings.DEFAULT_PAGE_SIZE)
category_page_params = _page_params(50)
