"""
Logging configuration for the application.
structlog renders to the console in development and to JSON in production;
stdlib loggers (uvicorn, sqlalchemy) are routed through the same processors.
"""

import logging
import sys
from typing import Any

import structlog
from asgi_correlation_id import correlation_id

from app.config import get_settings

settings = get_settings()


def add_request_id(logger, method_name, event_dict):
    request_id = correlation_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def _renderer():
    if settings.ENVIRONMENT == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging() -> None:
    """Configure structlog and the root stdlib logger."""
    shared_processors: list[Any] = [
        add_request_id,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if settings.ENVIRONMENT == "production":
        final_processors.append(structlog.processors.format_exc_info)
    final_processors.append(_renderer())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=final_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(settings.LOG_LEVEL.upper())

    # Request logging middleware already records every request.
    logging.getLogger("uvicorn.access").propagate = False
