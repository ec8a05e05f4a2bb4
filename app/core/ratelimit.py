"""Per-client-IP rate limiting shared by every route."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import get_settings

settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
    headers_enabled=True,
)
