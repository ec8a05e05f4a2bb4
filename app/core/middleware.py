"""
Middleware configuration for the application.
Correlation ids, request logging, compression, CORS and rate limiting.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import get_settings
from app.core.ratelimit import limiter

settings = get_settings()
logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            client_ip=request.client.host if request.client else "unknown",
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Setup all middleware for the application (last added runs first)."""
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    origins = settings.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Outermost so the id is bound before anything logs.
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
