"""
Tests for the Google Ads client stages and the full-campaign orchestration.
"""

import pytest
from unittest.mock import AsyncMock, patch

from adlaunch.google_ads_client import (
    AdCreateRequest,
    AdGroupCreateRequest,
    CampaignCreateRequest,
    GoogleAdsClient,
    GoogleAdsConfig,
    GoogleAdsResponse,
    KeywordRequest,
)
from adlaunch.models import MatchType
from adlaunch.services.campaign_creation_service import CampaignCreationService

CUSTOMER = "1234567890"


@pytest.fixture
def ads_client():
    return GoogleAdsClient(GoogleAdsConfig(client_id="cid", client_secret="s", refresh_token="r", developer_token="d"))


@pytest.fixture
def campaign():
    return CampaignCreateRequest(
        name="Launch KR",
        budget=500000,
        startDate="2024-02-01",
        targetCountries=["KR"],
        targetLanguages=["ko"],
        appId="app-1",
        finalUrl="https://play.google.com/store/apps/details?id=com.example",
    )


@pytest.fixture
def ad_group():
    return AdGroupCreateRequest(name="Core", defaultCpc=500)


@pytest.fixture
def keywords():
    return [
        KeywordRequest(text="puzzle game", matchType="exact", maxCpc=700),
        KeywordRequest(text="brain teaser", match_type="phrase", max_cpc=400),
    ]


def make_ads(n):
    return [
        AdCreateRequest(headline1=f"Headline {i}", headline2="Play now", description1="Free to play", finalUrl="https://example.com")
        for i in range(n)
    ]


def test_request_models_accept_both_key_styles(keywords, ad_group):
    assert keywords[0].match_type == MatchType.EXACT
    assert keywords[1].max_cpc == 400
    assert ad_group.default_cpc == 500


@pytest.mark.anyio
async def test_stages_return_placeholder_resource_names(anyio_backend, ads_client, campaign, ad_group, keywords):
    camp = await ads_client.create_campaign(CUSTOMER, campaign)
    assert camp.success
    assert camp.data["campaign_id"] == f"customers/{CUSTOMER}/campaigns/mock_campaign_id"
    assert camp.data["budget_id"] == f"customers/{CUSTOMER}/campaignBudgets/mock_budget_id"

    group = await ads_client.create_ad_group(CUSTOMER, camp.data["campaign_id"], ad_group)
    assert group.data["ad_group_id"] == f"customers/{CUSTOMER}/adGroups/mock_adgroup_id"

    kws = await ads_client.add_keywords(CUSTOMER, group.data["ad_group_id"], keywords)
    assert kws.data["keyword_ids"] == [
        f"customers/{CUSTOMER}/adGroupCriteria/mock_keyword_0",
        f"customers/{CUSTOMER}/adGroupCriteria/mock_keyword_1",
    ]
    assert kws.message.startswith("2")


@pytest.mark.anyio
async def test_full_campaign_success(anyio_backend, ads_client, campaign, ad_group, keywords):
    service = CampaignCreationService(ads_client)

    result = await service.create_full_campaign(CUSTOMER, campaign, ad_group, keywords, make_ads(3))

    assert result.success
    assert result.data["campaign_id"] == f"customers/{CUSTOMER}/campaigns/mock_campaign_id"
    assert result.data["ad_group_id"] == f"customers/{CUSTOMER}/adGroups/mock_adgroup_id"
    assert len(result.data["keyword_ids"]) == 2
    assert len(result.data["ad_ids"]) == 3


@pytest.mark.anyio
async def test_ad_ids_follow_input_order(anyio_backend, ads_client, campaign, ad_group, keywords):
    async def fake_ad(customer_id, ad_group_id, ad):
        return GoogleAdsResponse(success=True, data={"ad_id": f"{ad_group_id}/{ad.headline1}"})

    ads = make_ads(4)
    with patch.object(ads_client, "create_text_ad", side_effect=fake_ad) as create_ad:
        result = await CampaignCreationService(ads_client).create_full_campaign(CUSTOMER, campaign, ad_group, keywords, ads)

    group_id = f"customers/{CUSTOMER}/adGroups/mock_adgroup_id"
    assert result.data["ad_ids"] == [f"{group_id}/Headline {i}" for i in range(4)]
    assert create_ad.await_count == 4


@pytest.mark.anyio
async def test_ad_group_failure_stops_later_stages(anyio_backend, ads_client, campaign, ad_group, keywords):
    failure = GoogleAdsResponse(success=False, error="INVALID_BID: default CPC too low")
    ads_client.create_ad_group = AsyncMock(return_value=failure)
    ads_client.add_keywords = AsyncMock()
    ads_client.create_text_ad = AsyncMock()

    result = await CampaignCreationService(ads_client).create_full_campaign(CUSTOMER, campaign, ad_group, keywords, make_ads(2))

    assert result is failure
    assert result.error == "INVALID_BID: default CPC too low"
    ads_client.add_keywords.assert_not_awaited()
    ads_client.create_text_ad.assert_not_awaited()


@pytest.mark.anyio
async def test_campaign_failure_stops_everything(anyio_backend, ads_client, campaign, ad_group, keywords):
    ads_client.create_campaign = AsyncMock(return_value=GoogleAdsResponse(success=False, error="quota"))
    ads_client.create_ad_group = AsyncMock()

    result = await CampaignCreationService(ads_client).create_full_campaign(CUSTOMER, campaign, ad_group, keywords, [])

    assert result.success is False
    assert result.error == "quota"
    ads_client.create_ad_group.assert_not_awaited()


@pytest.mark.anyio
async def test_first_ad_failure_skips_remaining_ads(anyio_backend, ads_client, campaign, ad_group, keywords):
    calls = []

    async def flaky_ad(customer_id, ad_group_id, ad):
        calls.append(ad.headline1)
        if ad.headline1 == "Headline 1":
            return GoogleAdsResponse(success=False, error="POLICY_VIOLATION")
        return GoogleAdsResponse(success=True, data={"ad_id": ad.headline1})

    ads_client.create_text_ad = flaky_ad

    result = await CampaignCreationService(ads_client).create_full_campaign(CUSTOMER, campaign, ad_group, keywords, make_ads(3))

    assert result.success is False
    assert result.error == "POLICY_VIOLATION"
    assert calls == ["Headline 0", "Headline 1"]


@pytest.mark.anyio
async def test_unexpected_exception_becomes_failure(anyio_backend, ads_client, campaign, ad_group, keywords):
    ads_client.add_keywords = AsyncMock(side_effect=RuntimeError("socket closed"))

    result = await CampaignCreationService(ads_client).create_full_campaign(CUSTOMER, campaign, ad_group, keywords, make_ads(1))

    assert result.success is False
    assert result.error == "socket closed"
