import logging
from pydantic_settings import BaseSettings
from pydantic import model_validator, ConfigDict
from functools import lru_cache

from adlaunch.datastore import SupabaseConfig
from adlaunch.google_ads_client import GoogleAdsConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment: "development" or "production"
    environment: str = "development"

    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Supabase REST (PostgREST) datastore
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    datastore_timeout: float = 30.0

    # Google Ads API
    google_ads_client_id: str = ""
    google_ads_client_secret: str = ""
    google_ads_refresh_token: str = ""
    google_ads_developer_token: str = ""

    @model_validator(mode="before")
    @classmethod
    def _strip_trailing_slash(cls, values: dict) -> dict:
        """SUPABASE_URL is joined with /rest/v1/<table>; drop a trailing slash."""
        if not isinstance(values, dict):
            return values
        url = values.get("supabase_url") or ""
        if url.endswith("/"):
            values["supabase_url"] = url.rstrip("/")
        return values

    @model_validator(mode="after")
    def _warn_on_missing_production_settings(self) -> "Settings":
        """Missing credentials never block startup; they only get logged in production."""
        if self.is_production:
            if not self.supabase_url:
                logger.warning("SUPABASE_URL is not set in production; datastore calls will fail.")
            if not self.google_ads_developer_token:
                logger.warning("GOOGLE_ADS_DEVELOPER_TOKEN is not set in production.")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["http://localhost:3000"]

    def supabase_config(self) -> SupabaseConfig:
        return SupabaseConfig(
            url=self.supabase_url,
            anon_key=self.supabase_anon_key,
            service_role_key=self.supabase_service_role_key,
            timeout=self.datastore_timeout,
        )

    def google_ads_config(self) -> GoogleAdsConfig:
        return GoogleAdsConfig(
            client_id=self.google_ads_client_id,
            client_secret=self.google_ads_client_secret,
            refresh_token=self.google_ads_refresh_token,
            developer_token=self.google_ads_developer_token,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
