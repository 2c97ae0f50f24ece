"""
Apps Router — list and register mobile apps stored in the apps table.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ValidationError

from adlaunch.datastore import SupabaseREST
from adlaunch.dependencies import get_datastore
from adlaunch.errors import INVALID_VALUE_MESSAGE, BadRequestError, UpstreamError
from adlaunch.models import ApiResponse, App, AppStatus
from adlaunch.utils import envelope, first_row, missing_fields, new_id, utcnow_iso

logger = logging.getLogger(__name__)
router = APIRouter()

TABLE = "apps"
REQUIRED_FIELDS = ("name", "package_name", "platform", "category")


class AppCreateRequest(BaseModel):
    name: Optional[str] = None
    package_name: Optional[str] = None
    platform: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    app_store_url: Optional[str] = None
    google_play_url: Optional[str] = None


@router.get("", response_model=ApiResponse[list[dict[str, Any]]])
@router.get("/", response_model=ApiResponse[list[dict[str, Any]]], include_in_schema=False)
async def list_apps(
    platform: Optional[str] = Query(None, description="Filter by platform: ios, android"),
    status: Optional[str] = Query(None, description="Filter by status: active, inactive, pending"),
    datastore: SupabaseREST = Depends(get_datastore),
):
    """List apps, optionally filtered by exact platform/status."""
    filter: dict[str, Any] = {}
    if platform:
        filter["platform"] = platform
    if status:
        filter["status"] = status

    result = await datastore.select(TABLE, "*", filter)
    if not result.ok:
        raise UpstreamError("앱 목록을 불러오는데 실패했습니다.")

    return envelope(data=result.data or [], message="앱 목록을 성공적으로 불러왔습니다.")


@router.post("", status_code=201, response_model=ApiResponse[dict[str, Any]])
@router.post("/", status_code=201, response_model=ApiResponse[dict[str, Any]], include_in_schema=False)
async def create_app(
    req: AppCreateRequest,
    datastore: SupabaseREST = Depends(get_datastore),
):
    """Register a new app. New apps start as pending."""
    payload = req.model_dump()
    missing = missing_fields(payload, REQUIRED_FIELDS)
    if missing:
        logger.info(f"App creation rejected, missing: {missing}")
        raise BadRequestError()

    now = utcnow_iso()
    try:
        new_app = App(**payload, id=new_id(), status=AppStatus.PENDING, created_at=now, updated_at=now)
    except ValidationError as e:
        logger.info(f"App creation rejected: {e.errors()}")
        raise BadRequestError(INVALID_VALUE_MESSAGE)

    result = await datastore.insert(TABLE, new_app.model_dump(mode="json"))
    if not result.ok:
        raise UpstreamError("앱 생성에 실패했습니다.")

    logger.info(f"Created app {new_app.id} ({new_app.package_name})")
    return envelope(201, data=first_row(result.data), message="앱이 성공적으로 생성되었습니다.")
