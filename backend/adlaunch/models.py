"""
Record and envelope models.
Rows live in the remote Supabase tables apps, campaigns, keywords, ad_groups, ads;
these models describe their shape as returned by the REST interface.
"""

import enum
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field

T = TypeVar("T")


# ── Enums ─────────────────────────────────────────────────────────────

class Platform(str, enum.Enum):
    IOS = "ios"
    ANDROID = "android"


class AppStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class CampaignStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


class MatchType(str, enum.Enum):
    EXACT = "exact"
    PHRASE = "phrase"
    BROAD = "broad"


class EntityStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"


# ── Tables ────────────────────────────────────────────────────────────

class App(BaseModel):
    id: str
    name: str
    package_name: str
    platform: Platform
    category: str
    description: Optional[str] = None
    app_store_url: Optional[str] = None
    google_play_url: Optional[str] = None
    status: AppStatus = AppStatus.PENDING
    created_at: str
    updated_at: str


class Campaign(BaseModel):
    id: str
    app_id: str
    google_ads_campaign_id: Optional[str] = None
    name: str
    budget: Union[int, float]
    target_countries: list[str] = Field(default_factory=list)
    target_languages: list[str] = Field(default_factory=lambda: ["ko"])
    start_date: str
    end_date: Optional[str] = None
    status: CampaignStatus = CampaignStatus.DRAFT
    created_at: str
    updated_at: str


class Keyword(BaseModel):
    id: str
    campaign_id: str
    text: str
    match_type: MatchType
    max_cpc: float
    status: EntityStatus = EntityStatus.ACTIVE
    created_at: str


class AdGroup(BaseModel):
    id: str
    campaign_id: str
    google_ads_adgroup_id: Optional[str] = None
    name: str
    default_cpc: float
    status: EntityStatus = EntityStatus.ACTIVE
    created_at: str


class Ad(BaseModel):
    id: str
    ad_group_id: str
    google_ads_ad_id: Optional[str] = None
    headline1: str
    headline2: str
    headline3: Optional[str] = None
    description1: str
    description2: Optional[str] = None
    final_url: str
    status: EntityStatus = EntityStatus.ACTIVE
    created_at: str


# ── API shapes ────────────────────────────────────────────────────────

class DashboardStats(BaseModel):
    total_apps: int = 0
    total_campaigns: int = 0
    active_campaigns: int = 0
    total_budget: Union[int, float] = 0
    # no performance sync yet; reported as 0
    total_impressions: int = 0
    total_clicks: int = 0
    total_conversions: int = 0
    total_budget_display: str = ""
    recent_apps: list[dict[str, Any]] = Field(default_factory=list)
    recent_campaigns: list[dict[str, Any]] = Field(default_factory=list)


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope returned by every endpoint. Unset fields are omitted."""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None
