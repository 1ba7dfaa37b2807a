"""
Dashboard service - content for the dashboard shell.

The figures are placeholder data; swap get_overview() for real queries
when the app gets a database.
"""
from typing import Optional

from hacktemplate.models.dashboard import (
    ActivityItem,
    DashboardResponse,
    NavigationItem,
    NavigationResponse,
    QuickAction,
    StatCard,
    StatusBadge,
)


BRAND_NAME = "HackTemplate"

SIDEBAR_ITEMS = [
    ("Dashboard", "/dashboard", "home"),
    ("Analytics", "/dashboard/analytics", "bar-chart"),
    ("Documents", "/dashboard/documents", "file-text"),
    ("Team", "/dashboard/team", "users"),
    ("Settings", "/dashboard/settings", "settings"),
]

SAMPLE_STATS = [
    StatCard(title="Total Users", value="1,234", change="+12.5%", trend="up", icon="users"),
    StatCard(title="Documents", value="456", change="+8.2%", trend="up", icon="file-text"),
    StatCard(title="Analytics", value="89%", change="-2.4%", trend="down", icon="bar-chart"),
    StatCard(title="Active Now", value="123", change="+18.9%", trend="up", icon="activity"),
]

SAMPLE_ACTIVITY = [
    (1, "Sarah Chen", "created a new document", "2 minutes ago"),
    (2, "Mike Johnson", "updated analytics dashboard", "15 minutes ago"),
    (3, "Emma Wilson", "invited 3 team members", "1 hour ago"),
    (4, "Alex Turner", "exported monthly report", "2 hours ago"),
]

QUICK_ACTIONS = [
    QuickAction(title="Create Document", icon="file-text"),
    QuickAction(title="Invite Team Member", icon="users"),
    QuickAction(title="View Analytics", icon="bar-chart"),
]

STATUS_BADGES = [
    StatusBadge(label="Active", variant="default"),
    StatusBadge(label="Pro Plan", variant="secondary"),
]


def initials(name: str) -> str:
    """Initials of a display name, e.g. "Sarah Chen" -> "SC"."""
    return "".join(part[0] for part in name.split() if part)


class DashboardService:
    """Service for dashboard content."""

    def get_overview(self) -> DashboardResponse:
        """Stats, recent activity and quick actions for the landing dashboard."""
        return DashboardResponse(
            title="Dashboard",
            welcome="Welcome back! Here's an overview of your workspace.",
            stats=list(SAMPLE_STATS),
            recent_activity=[
                ActivityItem(id=id_, user=name, initials=initials(name), action=action, time=time)
                for id_, name, action, time in SAMPLE_ACTIVITY
            ],
            quick_actions=list(QUICK_ACTIONS),
            status=list(STATUS_BADGES),
        )

    def get_navigation(self, pathname: Optional[str] = None) -> NavigationResponse:
        """Sidebar items; only an exact href match is active."""
        return NavigationResponse(
            brand=BRAND_NAME,
            items=[
                NavigationItem(title=title, href=href, icon=icon, is_active=href == pathname)
                for title, href, icon in SIDEBAR_ITEMS
            ],
            tip_title="Pro Tip",
            tip_text="Press ⌘K for quick actions",
        )


# Singleton instance
dashboard_service = DashboardService()
