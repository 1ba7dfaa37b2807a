"""
API routers for endpoint organization.
"""
from .health import router as health_router
from .marketing import router as marketing_router
from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .ai import router as ai_router

__all__ = [
    "health_router",
    "marketing_router",
    "auth_router",
    "dashboard_router",
    "ai_router",
]
