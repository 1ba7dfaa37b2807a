"""
Dashboard router - content for the signed-in dashboard shell.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from hacktemplate.auth.dependencies import get_current_user
from hacktemplate.models import AuthUser, DashboardResponse, NavigationResponse
from hacktemplate.services import DashboardService, dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_dashboard_service() -> DashboardService:
    """Get the DashboardService instance."""
    return dashboard_service


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Stats cards, recent activity, quick actions and plan status."""
    return service.get_overview()


@router.get("/navigation", response_model=NavigationResponse)
async def get_navigation(
    pathname: Optional[str] = Query(None, description="Current frontend path, used to mark the active item"),
    user: AuthUser = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Sidebar items for the dashboard layout."""
    return service.get_navigation(pathname)
