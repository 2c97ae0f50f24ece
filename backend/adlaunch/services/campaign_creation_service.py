"""
Campaign Creation Service — Executes full campaign creation on Google Ads.
Creates campaign → ad group → keywords → ads in sequence, passing resource
names between steps. The first failing step ends the run.
"""

import logging
from adlaunch.google_ads_client import (
    AdCreateRequest,
    AdGroupCreateRequest,
    CampaignCreateRequest,
    GoogleAdsClient,
    GoogleAdsResponse,
    KeywordRequest,
)

logger = logging.getLogger(__name__)


def _log_abandoned(stage: str, created: list[str]) -> None:
    if created:
        logger.warning(f"Campaign creation aborted at {stage}; remote resources left in place: {created}")


class CampaignCreationService:
    """Executes full campaign creation in sequence via the Google Ads client."""

    def __init__(self, client: GoogleAdsClient):
        self.client = client

    async def create_full_campaign(
        self,
        customer_id: str,
        campaign: CampaignCreateRequest,
        ad_group: AdGroupCreateRequest,
        keywords: list[KeywordRequest],
        ads: list[AdCreateRequest],
    ) -> GoogleAdsResponse:
        """
        Run the four stages strictly in order. A failed stage's response is
        returned unchanged and no later stage runs.
        On success data is { campaign_id, ad_group_id, keyword_ids, ad_ids }
        with ad_ids in the order of ``ads``.
        """
        # TODO: delete the campaign and ad group created here when a later
        # stage fails, once the stages issue real Google Ads mutations.
        created: list[str] = []
        try:
            # 1. Create campaign
            campaign_result = await self.client.create_campaign(customer_id, campaign)
            if not campaign_result.success:
                return campaign_result
            campaign_id = campaign_result.data["campaign_id"]
            created.append(campaign_id)

            # 2. Create ad group
            ad_group_result = await self.client.create_ad_group(customer_id, campaign_id, ad_group)
            if not ad_group_result.success:
                _log_abandoned("ad group", created)
                return ad_group_result
            ad_group_id = ad_group_result.data["ad_group_id"]
            created.append(ad_group_id)

            # 3. Add keywords
            keywords_result = await self.client.add_keywords(customer_id, ad_group_id, keywords)
            if not keywords_result.success:
                _log_abandoned("keywords", created)
                return keywords_result

            # 4. Create ads, one at a time
            ad_ids = []
            for ad in ads:
                ad_result = await self.client.create_text_ad(customer_id, ad_group_id, ad)
                if not ad_result.success:
                    _log_abandoned("ads", created + ad_ids)
                    return ad_result
                ad_ids.append(ad_result.data["ad_id"])

            logger.info(f"Created full campaign {campaign_id} with {len(ad_ids)} ads")
            return GoogleAdsResponse(
                success=True,
                data={
                    "campaign_id": campaign_id,
                    "ad_group_id": ad_group_id,
                    "keyword_ids": keywords_result.data["keyword_ids"],
                    "ad_ids": ad_ids,
                },
                message="전체 캠페인이 성공적으로 생성되었습니다.",
            )
        except Exception as e:
            logger.error(f"Full campaign creation error: {e}", exc_info=True)
            _log_abandoned("unexpected error", created)
            return GoogleAdsResponse.failure(e)
