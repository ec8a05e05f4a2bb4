"""
Authorization predicates.

Role and ownership checks are kept separate so each handler can combine them
explicitly (public read, owner-or-admin write, admin-only, ...).
"""

from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import EntityNotFoundException, ForbiddenException, ValidationFailedException
from app.domain.models.company import Company
from app.domain.models.plan import Plan, SubPlan
from app.domain.models.product import Product
from app.domain.models.user import Role
from app.domain.schemas.auth import Principal


def has_role(principal: Principal, allowed_roles: Iterable[Role]) -> bool:
    return principal.role in set(allowed_roles)


def is_admin(principal: Principal) -> bool:
    return principal.role == Role.ADMIN


def can_act_on(principal: Principal, owner_id: int) -> bool:
    """Owner or ADMIN."""
    return principal.id == owner_id or is_admin(principal)


def authorize(principal: Principal, allowed_roles: Iterable[Role]) -> None:
    if not has_role(principal, allowed_roles):
        raise ForbiddenException("Insufficient permissions")


def ensure_owner(principal: Principal, owner_id: int) -> None:
    if not can_act_on(principal, owner_id):
        raise ForbiddenException("Access denied: You can only access your own resources")


def resolve_owner_id(db: Session, resource_type: str, resource_id: int) -> Optional[int]:
    """Owning user id of a resource, or None when the resource does not exist."""
    if resource_type == "user":
        return resource_id
    if resource_type == "product":
        return db.query(Product.owner_id).filter(Product.id == resource_id).scalar()
    if resource_type == "company":
        return db.query(Company.owner_id).filter(Company.id == resource_id).scalar()
    if resource_type == "plan":
        return db.query(Plan.owner_id).filter(Plan.id == resource_id).scalar()
    if resource_type == "subplan":
        return (
            db.query(Plan.owner_id)
            .join(SubPlan, SubPlan.plan_id == Plan.id)
            .filter(SubPlan.id == resource_id)
            .scalar()
        )
    raise ValidationFailedException("Invalid resource type")


def check_ownership(db: Session, principal: Principal, resource_type: str, resource_id: int) -> None:
    owner_id = resolve_owner_id(db, resource_type, resource_id)
    if owner_id is None:
        raise EntityNotFoundException(f"{resource_type} not found")
    ensure_owner(principal, owner_id)
