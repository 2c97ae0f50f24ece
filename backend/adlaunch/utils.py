"""
Shared utility functions.
"""

import logging
import uuid as uuid_mod
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def safe_error_detail(exc: Exception, fallback: str = "An internal error occurred. Please try again later.") -> str:
    """
    Return a sanitized error message safe for client consumption.
    Logs the real exception detail server-side.
    """
    logger.error(f"Operation failed: {exc}", exc_info=exc)
    return fallback


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string, the format stored in created_at/updated_at."""
    return datetime.now(timezone.utc).isoformat()


def new_id() -> str:
    return str(uuid_mod.uuid4())


def is_missing(value: Any) -> bool:
    """
    True for None, empty string and numeric zero.
    Empty lists/dicts are present values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


def missing_fields(payload: dict[str, Any], required: tuple[str, ...]) -> list[str]:
    return [name for name in required if is_missing(payload.get(name))]


def as_list(value: Any, default: Optional[Any] = None) -> list:
    """Wrap a bare value in a single-element list; lists pass through."""
    if isinstance(value, list):
        return value
    if is_missing(value) and default is not None:
        return [default]
    return [value]


def first_row(data: Any) -> Any:
    """PostgREST returns inserted rows as a list; the API returns the record."""
    if isinstance(data, list):
        return data[0] if data else None
    return data


def envelope(
    status_code: int = 200,
    data: Any = None,
    message: Optional[str] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Build the {success, data?, error?, message?} response. None fields are left out."""
    body: dict[str, Any] = {"success": error is None}
    if data is not None:
        body["data"] = jsonable_encoder(data)
    if error is not None:
        body["error"] = error
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)
