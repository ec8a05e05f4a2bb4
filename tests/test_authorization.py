"""Role and ownership predicates."""

from __future__ import annotations

import pytest

from app.application.services.authorization import (
    authorize,
    can_act_on,
    check_ownership,
    ensure_owner,
    resolve_owner_id,
)
from app.core.exceptions import EntityNotFoundException, ForbiddenException, ValidationFailedException
from app.domain.models.plan import Plan, SubPlan
from app.domain.models.user import Role
from app.domain.schemas.auth import Principal


def principal(id: int, role: Role = Role.USER) -> Principal:
    return Principal(id=id, username=f"user{id}", email=f"user{id}@example.com", role=role)


def test_owner_or_admin_may_act():
    assert can_act_on(principal(1), 1)
    assert can_act_on(principal(2, Role.ADMIN), 1)
    assert not can_act_on(principal(2), 1)


def test_authorize_checks_role():
    authorize(principal(1, Role.ADMIN), [Role.ADMIN])
    with pytest.raises(ForbiddenException, match="Insufficient permissions"):
        authorize(principal(1), [Role.ADMIN])


def test_ensure_owner_message():
    with pytest.raises(ForbiddenException, match="only access your own resources"):
        ensure_owner(principal(2), 1)


def test_resolve_owner_through_plan_chain(db_session, alice_company):
    plan = Plan(name="Villa", company_id=alice_company.id, owner_id=alice_company.owner_id)
    db_session.add(plan)
    db_session.commit()
    sub_plan = SubPlan(name="Roof", file_url="/uploads/roof.pdf", plan_id=plan.id)
    db_session.add(sub_plan)
    db_session.commit()

    assert resolve_owner_id(db_session, "company", alice_company.id) == alice_company.owner_id
    assert resolve_owner_id(db_session, "plan", plan.id) == alice_company.owner_id
    assert resolve_owner_id(db_session, "subplan", sub_plan.id) == alice_company.owner_id
    assert resolve_owner_id(db_session, "product", 999) is None


def test_check_ownership_missing_resource(db_session):
    with pytest.raises(EntityNotFoundException, match="product not found"):
        check_ownership(db_session, principal(1), "product", 999)


def test_check_ownership_unknown_type(db_session):
    with pytest.raises(ValidationFailedException):
        resolve_owner_id(db_session, "invoice", 1)
