"""
Dashboard shell models.
"""
from typing import List, Literal
from pydantic import BaseModel


class StatCard(BaseModel):
    title: str
    value: str
    change: str
    trend: Literal["up", "down"]
    icon: str


class ActivityItem(BaseModel):
    id: int
    user: str
    initials: str
    action: str
    time: str


class QuickAction(BaseModel):
    title: str
    icon: str


class StatusBadge(BaseModel):
    label: str
    variant: Literal["default", "secondary"]


class DashboardResponse(BaseModel):
    """Response model for GET /dashboard."""
    title: str
    welcome: str
    stats: List[StatCard]
    recent_activity: List[ActivityItem]
    quick_actions: List[QuickAction]
    status: List[StatusBadge]


class NavigationItem(BaseModel):
    title: str
    href: str
    icon: str
    is_active: bool = False


class NavigationResponse(BaseModel):
    """Sidebar contents for the dashboard layout."""
    brand: str
    items: List[NavigationItem]
    tip_title: str
    tip_text: str
