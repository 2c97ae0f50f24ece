"""
Dashboard Service — summary counts shown on the dashboard landing view.
"""

from typing import Any

from adlaunch.models import CampaignStatus, DashboardStats

RECENT_LIMIT = 5


def build_dashboard_stats(apps: list[dict[str, Any]], campaigns: list[dict[str, Any]]) -> DashboardStats:
    active = [c for c in campaigns if c.get("status") == CampaignStatus.ACTIVE.value]
    total_budget = sum(c.get("budget") or 0 for c in campaigns)
    return DashboardStats(
        total_apps=len(apps),
        total_campaigns=len(campaigns),
        active_campaigns=len(active),
        total_budget=total_budget,
        total_budget_display=format_krw(total_budget),
        recent_apps=apps[:RECENT_LIMIT],
        recent_campaigns=campaigns[:RECENT_LIMIT],
    )


def format_krw(amount: float) -> str:
    """Budgets are whole won: 1500000 -> '₩1,500,000'."""
    return f"₩{round(amount):,}"
