"""
Google Ads Router — pushes a local draft campaign to Google Ads and activates it.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from adlaunch.datastore import SupabaseREST
from adlaunch.dependencies import get_campaign_creation_service, get_datastore
from adlaunch.errors import BadRequestError, NotFoundError, UpstreamError
from adlaunch.google_ads_client import (
    AdCreateRequest,
    AdGroupCreateRequest,
    CampaignCreateRequest,
    KeywordRequest,
)
from adlaunch.models import ApiResponse, CampaignStatus
from adlaunch.services.campaign_creation_service import CampaignCreationService
from adlaunch.utils import envelope, missing_fields, utcnow_iso

logger = logging.getLogger(__name__)
router = APIRouter()

REQUIRED_FIELDS = ("customer_id", "campaign_id", "ad_group_data", "keywords", "ads")
FALLBACK_FINAL_URL = "https://example.com"


class FullCampaignCreateRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    customer_id: Optional[str] = None
    campaign_id: Optional[str] = None  # local campaigns.id
    ad_group_data: Optional[AdGroupCreateRequest] = None
    keywords: Optional[list[KeywordRequest]] = None
    ads: Optional[list[AdCreateRequest]] = None


def _build_campaign_request(campaign: dict, app: dict) -> CampaignCreateRequest:
    """Google Ads campaign payload from the stored campaign and its app."""
    return CampaignCreateRequest(
        name=campaign["name"],
        budget=campaign["budget"],
        start_date=campaign["start_date"],
        end_date=campaign.get("end_date"),
        target_countries=campaign.get("target_countries") or [],
        target_languages=campaign.get("target_languages") or [],
        app_id=app["id"],
        final_url=app.get("app_store_url") or app.get("google_play_url") or FALLBACK_FINAL_URL,
    )


@router.post("/campaign/create", response_model=ApiResponse[dict[str, Any]])
async def create_google_ads_campaign(
    req: FullCampaignCreateRequest,
    datastore: SupabaseREST = Depends(get_datastore),
    service: CampaignCreationService = Depends(get_campaign_creation_service),
):
    """
    Create campaign, ad group, keywords and ads on Google Ads for a local campaign,
    then mark the local record active with the Google Ads campaign id.
    If Google Ads succeeds but the local update fails, the response is still a
    success and carries data.warning.
    """
    if missing_fields(req.model_dump(), REQUIRED_FIELDS):
        raise BadRequestError()

    campaign_result = await datastore.select("campaigns", "*", {"id": req.campaign_id})
    if not campaign_result.ok or not campaign_result.data:
        raise NotFoundError("캠페인을 찾을 수 없습니다.")
    campaign = campaign_result.data[0]

    app_result = await datastore.select("apps", "*", {"id": campaign["app_id"]})
    if not app_result.ok or not app_result.data:
        raise NotFoundError("앱 정보를 찾을 수 없습니다.")
    app = app_result.data[0]

    ads_result = await service.create_full_campaign(
        req.customer_id,
        _build_campaign_request(campaign, app),
        req.ad_group_data,
        req.keywords,
        req.ads,
    )
    if not ads_result.success:
        raise UpstreamError(f"Google Ads 캠페인 생성 실패: {ads_result.error}")

    google_ads_campaign_id = ads_result.data["campaign_id"]
    update_result = await datastore.update(
        "campaigns",
        {
            "google_ads_campaign_id": google_ads_campaign_id,
            "status": CampaignStatus.ACTIVE.value,
            "updated_at": utcnow_iso(),
        },
        {"id": req.campaign_id},
    )

    if not update_result.ok:
        logger.warning(
            f"Google Ads campaign {google_ads_campaign_id} created but local update of "
            f"campaign {req.campaign_id} failed: {update_result.error.message}"
        )
        return envelope(
            data={
                "google_ads_result": ads_result.data,
                "warning": "Google Ads 캠페인은 생성되었지만 로컬 DB 업데이트에 실패했습니다.",
            },
            message="Google Ads 캠페인이 생성되었습니다.",
        )

    logger.info(f"Campaign {req.campaign_id} activated as {google_ads_campaign_id}")
    return envelope(
        data={
            "campaign_id": campaign["id"],
            "google_ads_campaign_id": google_ads_campaign_id,
            "google_ads_data": ads_result.data,
        },
        message="Google Ads 캠페인이 성공적으로 생성되고 활성화되었습니다.",
    )
