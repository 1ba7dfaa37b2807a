"""
Service layer for business logic.
"""
from .ai_service import AIService, classify_provider_error, get_ai_service
from .auth_service import AuthService, validate_new_password
from .dashboard_service import DashboardService, dashboard_service
from .landing_service import get_landing_page

__all__ = [
    "AIService",
    "classify_provider_error",
    "get_ai_service",
    "AuthService",
    "validate_new_password",
    "DashboardService",
    "dashboard_service",
    "get_landing_page",
]
