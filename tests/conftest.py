"""
Shared test wiring.
The app runs against an in-memory SQLite database swapped in through the
`get_db` dependency; users and bearer tokens are created directly.
"""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="catalog-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.domain.models.category import Category
from app.domain.models.company import Company, CompanyType
from app.domain.models.user import Role, User
from app.infrastructure.database import Base, get_db
from app.main import app
from tests.support import make_user


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        app.dependency_overrides.pop(get_db, None)
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin(db_session) -> User:
    return make_user(db_session, "admin", role=Role.ADMIN)


@pytest.fixture
def alice(db_session) -> User:
    return make_user(db_session, "alice", first_name="Alice", last_name="Martin")


@pytest.fixture
def bob(db_session) -> User:
    return make_user(db_session, "bob")


@pytest.fixture
def category(db_session) -> Category:
    item = Category(name="Lighting", description="Lamps and fixtures")
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item


@pytest.fixture
def alice_company(db_session, alice) -> Company:
    company = Company(
        numero_inscription="RC-001",
        raison_sociale="Atelier Alice",
        type=CompanyType.ARCHITECT,
        wilaya="Alger",
        commune="Hydra",
        owner_id=alice.id,
    )
    db_session.add(company)
    db_session.commit()
    db_session.refresh(company)
    return company
