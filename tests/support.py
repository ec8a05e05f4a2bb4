"""Helpers shared by the API tests: user factories and bearer headers."""

from __future__ import annotations

from app.application.services.auth_service import hash_password, token_for
from app.domain.models.user import Role, User

PASSWORD = "secret123"


def make_user(session, username: str, role: Role = Role.USER, **fields) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        password=hash_password(PASSWORD),
        role=role,
        **fields,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_header(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_for(user)}"}
