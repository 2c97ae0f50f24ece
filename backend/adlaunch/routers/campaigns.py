"""
Campaigns Router — local campaign records before and after they are pushed to Google Ads.
"""

import logging
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from adlaunch.datastore import SupabaseREST
from adlaunch.dependencies import get_datastore
from adlaunch.errors import BadRequestError, UpstreamError
from adlaunch.models import ApiResponse, Campaign, CampaignStatus
from adlaunch.utils import as_list, envelope, first_row, missing_fields, new_id, utcnow_iso

logger = logging.getLogger(__name__)
router = APIRouter()

TABLE = "campaigns"
REQUIRED_FIELDS = ("app_id", "name", "budget", "target_countries", "start_date")
DEFAULT_LANGUAGE = "ko"


class CampaignCreateRequest(BaseModel):
    app_id: Optional[str] = None
    name: Optional[str] = None
    budget: Optional[Union[int, float]] = None
    target_countries: Optional[Union[list[str], str]] = None
    target_languages: Optional[Union[list[str], str]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


@router.get("", response_model=ApiResponse[list[dict[str, Any]]])
@router.get("/", response_model=ApiResponse[list[dict[str, Any]]], include_in_schema=False)
async def list_campaigns(
    app_id: Optional[str] = Query(None, description="Filter by owning app id"),
    status: Optional[str] = Query(None, description="Filter by status: draft, active, paused, ended"),
    datastore: SupabaseREST = Depends(get_datastore),
):
    """List campaigns, optionally filtered by exact app_id/status."""
    filter: dict[str, Any] = {}
    if app_id:
        filter["app_id"] = app_id
    if status:
        filter["status"] = status

    result = await datastore.select(TABLE, "*", filter)
    if not result.ok:
        raise UpstreamError("캠페인 목록을 불러오는데 실패했습니다.")

    return envelope(data=result.data or [], message="캠페인 목록을 성공적으로 불러왔습니다.")


@router.post("", status_code=201, response_model=ApiResponse[dict[str, Any]])
@router.post("/", status_code=201, response_model=ApiResponse[dict[str, Any]], include_in_schema=False)
async def create_campaign(
    req: CampaignCreateRequest,
    datastore: SupabaseREST = Depends(get_datastore),
):
    """Create a draft campaign. Bare country/language strings become one-element lists."""
    payload = req.model_dump()
    missing = missing_fields(payload, REQUIRED_FIELDS)
    if missing:
        logger.info(f"Campaign creation rejected, missing: {missing}")
        raise BadRequestError()

    now = utcnow_iso()
    new_campaign = Campaign(
        id=new_id(),
        app_id=req.app_id,
        name=req.name,
        budget=req.budget,
        target_countries=as_list(req.target_countries),
        target_languages=as_list(req.target_languages, default=DEFAULT_LANGUAGE),
        start_date=req.start_date,
        end_date=req.end_date,
        status=CampaignStatus.DRAFT,
        created_at=now,
        updated_at=now,
    )

    result = await datastore.insert(TABLE, new_campaign.model_dump(mode="json", exclude={"google_ads_campaign_id"}))
    if not result.ok:
        raise UpstreamError("캠페인 생성에 실패했습니다.")

    logger.info(f"Created campaign {new_campaign.id} for app {req.app_id}")
    return envelope(201, data=first_row(result.data), message="캠페인이 성공적으로 생성되었습니다.")
