"""
Uniform JSON envelope shared by every endpoint.

    {"success": bool, "message": str, "data": ..., "errors": [...], "timestamp": ISO-8601}

Paginated responses additionally carry a top-level "pagination" object.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.domain.schemas.common import Pagination


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def success_response(data: Any = None, message: str = "Success") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": utc_timestamp(),
    }


def paginated_response(items: List[Any], pagination: Pagination, message: str = "Success") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": items,
        "pagination": pagination,
        "timestamp": utc_timestamp(),
    }


def error_body(message: str, errors: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "success": False,
        "message": message,
        "timestamp": utc_timestamp(),
    }
    if errors:
        body["errors"] = errors
    return body
