"""
Google Ads Client
Wraps the four Google Ads mutations used to launch an app campaign:
campaign, ad group, keywords and text ads.
Calls currently return deterministic placeholder resource names.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from adlaunch.models import MatchType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoogleAdsConfig:
    client_id: str
    client_secret: str
    refresh_token: str
    developer_token: str


class _AdsPayload(BaseModel):
    """Accepts snake_case or camelCase keys from API callers."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CampaignCreateRequest(_AdsPayload):
    name: str
    budget: float
    start_date: str = Field(validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Optional[str] = Field(None, validation_alias=AliasChoices("end_date", "endDate"))
    target_countries: list[str] = Field(default_factory=list, validation_alias=AliasChoices("target_countries", "targetCountries"))
    target_languages: list[str] = Field(default_factory=list, validation_alias=AliasChoices("target_languages", "targetLanguages"))
    app_id: str = Field(validation_alias=AliasChoices("app_id", "appId"))
    final_url: str = Field(validation_alias=AliasChoices("final_url", "finalUrl"))


class AdGroupCreateRequest(_AdsPayload):
    name: str
    default_cpc: float = Field(validation_alias=AliasChoices("default_cpc", "defaultCpc"))


class KeywordRequest(_AdsPayload):
    text: str
    match_type: MatchType = Field(MatchType.BROAD, validation_alias=AliasChoices("match_type", "matchType"))
    max_cpc: float = Field(validation_alias=AliasChoices("max_cpc", "maxCpc"))


class AdCreateRequest(_AdsPayload):
    headline1: str
    headline2: str
    headline3: Optional[str] = None
    description1: str
    description2: Optional[str] = None
    final_url: str = Field(validation_alias=AliasChoices("final_url", "finalUrl"))


class GoogleAdsResponse(BaseModel):
    success: bool
    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def failure(cls, exc: Exception) -> "GoogleAdsResponse":
        return cls(success=False, error=str(exc) or "Unknown error")


class GoogleAdsClient:
    """
    Google Ads API wrapper configured with OAuth and developer credentials.
    Each stage catches its own errors and reports them in the response.
    """

    def __init__(self, config: GoogleAdsConfig):
        self.config = config

    @property
    def is_configured(self) -> bool:
        return bool(self.config.client_id and self.config.developer_token)

    async def create_campaign(self, customer_id: str, campaign: CampaignCreateRequest) -> GoogleAdsResponse:
        try:
            logger.info(f"Creating campaign for customer {customer_id}: {campaign.name!r} budget={campaign.budget}")
            return GoogleAdsResponse(
                success=True,
                data={
                    "campaign_id": f"customers/{customer_id}/campaigns/mock_campaign_id",
                    "budget_id": f"customers/{customer_id}/campaignBudgets/mock_budget_id",
                },
                message="캠페인이 성공적으로 생성되었습니다.",
            )
        except Exception as e:
            logger.error(f"Campaign creation error: {e}")
            return GoogleAdsResponse.failure(e)

    async def create_ad_group(
        self, customer_id: str, campaign_resource_name: str, ad_group: AdGroupCreateRequest
    ) -> GoogleAdsResponse:
        try:
            logger.info(f"Creating ad group {ad_group.name!r} under {campaign_resource_name}")
            return GoogleAdsResponse(
                success=True,
                data={"ad_group_id": f"customers/{customer_id}/adGroups/mock_adgroup_id"},
                message="광고 그룹이 성공적으로 생성되었습니다.",
            )
        except Exception as e:
            logger.error(f"Ad group creation error: {e}")
            return GoogleAdsResponse.failure(e)

    async def add_keywords(
        self, customer_id: str, ad_group_resource_name: str, keywords: list[KeywordRequest]
    ) -> GoogleAdsResponse:
        try:
            logger.info(f"Adding {len(keywords)} keywords to {ad_group_resource_name}")
            return GoogleAdsResponse(
                success=True,
                data={
                    "keyword_ids": [
                        f"customers/{customer_id}/adGroupCriteria/mock_keyword_{i}"
                        for i, _ in enumerate(keywords)
                    ],
                },
                message=f"{len(keywords)}개의 키워드가 성공적으로 추가되었습니다.",
            )
        except Exception as e:
            logger.error(f"Keywords addition error: {e}")
            return GoogleAdsResponse.failure(e)

    async def create_text_ad(
        self, customer_id: str, ad_group_resource_name: str, ad: AdCreateRequest
    ) -> GoogleAdsResponse:
        try:
            logger.info(f"Creating text ad {ad.headline1!r} in {ad_group_resource_name}")
            return GoogleAdsResponse(
                success=True,
                data={"ad_id": f"customers/{customer_id}/adGroupAds/mock_ad_id"},
                message="광고가 성공적으로 생성되었습니다.",
            )
        except Exception as e:
            logger.error(f"Ad creation error: {e}")
            return GoogleAdsResponse.failure(e)
