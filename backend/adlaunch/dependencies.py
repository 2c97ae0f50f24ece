"""
FastAPI dependencies that build clients from settings.
Tests swap these out through app.dependency_overrides.
"""

from fastapi import Depends

from adlaunch.config import Settings, get_settings
from adlaunch.datastore import SupabaseREST
from adlaunch.google_ads_client import GoogleAdsClient
from adlaunch.services.campaign_creation_service import CampaignCreationService


def get_datastore(settings: Settings = Depends(get_settings)) -> SupabaseREST:
    return SupabaseREST(settings.supabase_config())


def get_ads_client(settings: Settings = Depends(get_settings)) -> GoogleAdsClient:
    return GoogleAdsClient(settings.google_ads_config())


def get_campaign_creation_service(
    client: GoogleAdsClient = Depends(get_ads_client),
) -> CampaignCreationService:
    return CampaignCreationService(client)
