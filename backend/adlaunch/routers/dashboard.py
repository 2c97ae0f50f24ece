"""
Dashboard Router — summary counts for the dashboard landing view.
"""

from fastapi import APIRouter, Depends

from adlaunch.datastore import SupabaseREST
from adlaunch.dependencies import get_datastore
from adlaunch.errors import UpstreamError
from adlaunch.models import ApiResponse, DashboardStats
from adlaunch.services.dashboard_service import build_dashboard_stats
from adlaunch.utils import envelope

router = APIRouter()


@router.get("/stats", response_model=ApiResponse[DashboardStats])
async def dashboard_stats(datastore: SupabaseREST = Depends(get_datastore)):
    """App/campaign totals, active campaigns, total budget and the five most recent of each."""
    apps = await datastore.select("apps")
    campaigns = await datastore.select("campaigns")
    if not apps.ok or not campaigns.ok:
        raise UpstreamError("대시보드 데이터를 불러오는데 실패했습니다.")

    stats = build_dashboard_stats(apps.data or [], campaigns.data or [])
    return envelope(data=stats, message="대시보드 통계를 성공적으로 불러왔습니다.")
