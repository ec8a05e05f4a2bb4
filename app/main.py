"""FastAPI application — main entry point."""

import os
import time
from collections import defaultdict
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.config import get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.responses import success_response
from app.infrastructure.database import Base, SessionLocal, engine

# Import all models so SQLAlchemy knows about them
from app.domain.models.category import Category  # noqa: F401
from app.domain.models.company import Company  # noqa: F401
from app.domain.models.plan import Plan, SubPlan  # noqa: F401
from app.domain.models.product import Product  # noqa: F401
from app.domain.models.user import User  # noqa: F401

from app.application.services.auth_service import ensure_default_admin
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.categories import router as categories_router
from app.interfaces.api.companies import router as companies_router
from app.interfaces.api.plans import router as plans_router
from app.interfaces.api.products import router as products_router
from app.interfaces.api.subplans import router as subplans_router
from app.interfaces.api.uploads import router as uploads_router
from app.interfaces.api.users import router as users_router

settings = get_settings()

configure_logging()
logger = structlog.get_logger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Catalog API", env=settings.ENVIRONMENT, version=settings.APP_VERSION)

    # Development bootstrap; schema migrations are out of scope.
    Base.metadata.create_all(bind=engine)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)

    db = SessionLocal()
    try:
        ensure_default_admin(SQLAlchemyUserRepository(db, User))
    finally:
        db.close()

    yield

    logger.info("Catalog API stopped")


app = FastAPI(
    title="Catalog API",
    description="Product catalog, categories, companies and architectural plans",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(products_router)
app.include_router(categories_router)
app.include_router(companies_router)
app.include_router(plans_router)
app.include_router(subplans_router)
app.include_router(users_router)
app.include_router(uploads_router)

app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)


@app.get("/health", tags=["Meta"])
def health():
    data = {
        "status": "OK",
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "version": settings.APP_VERSION,
    }
    return success_response(data, "Server is healthy")


@app.get("/api", tags=["Meta"])
def api_info():
    """Describe the available endpoints."""
    endpoints: dict[str, dict[str, str]] = defaultdict(dict)
    for path, operations in app.openapi()["paths"].items():
        if not path.startswith("/api/"):
            continue
        group = path.split("/")[2]
        for method, operation in sorted(operations.items()):
            description = operation.get("summary") or operation.get("operationId", "")
            endpoints[group][f"{method.upper()} {path}"] = description

    data = {
        "name": app.title,
        "version": settings.APP_VERSION,
        "description": app.description,
        "endpoints": endpoints,
        "authentication": "Bearer token required for protected routes",
        "rateLimit": f"{settings.RATE_LIMIT} per IP",
    }
    return success_response(data, "API Documentation")
