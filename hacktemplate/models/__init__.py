"""
HackTemplate API Models.

This module re-exports all model classes for convenient importing.
"""

# Auth models
from .auth import (
    LoginRequest,
    TokenResponse,
    RefreshTokenRequest,
    ForgotPasswordRequest,
    VerifyRecoveryRequest,
    ResetPasswordRequest,
    AuthActionResponse,
)

# User models
from .user import (
    AuthUser,
    MenuItem,
    UserProfileResponse,
    AuthMeResponse,
)

# AI models
from .ai import (
    ChatMessage,
    ChatRequest,
    AICapabilitiesResponse,
)

# Dashboard models
from .dashboard import (
    StatCard,
    ActivityItem,
    QuickAction,
    StatusBadge,
    DashboardResponse,
    NavigationItem,
    NavigationResponse,
)

# Marketing models
from .marketing import (
    NavLink,
    Hero,
    FeatureCard,
    TechItem,
    CallToAction,
    AuthState,
    LandingPageResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "TokenResponse",
    "RefreshTokenRequest",
    "ForgotPasswordRequest",
    "VerifyRecoveryRequest",
    "ResetPasswordRequest",
    "AuthActionResponse",
    # User
    "AuthUser",
    "MenuItem",
    "UserProfileResponse",
    "AuthMeResponse",
    # AI
    "ChatMessage",
    "ChatRequest",
    "AICapabilitiesResponse",
    # Dashboard
    "StatCard",
    "ActivityItem",
    "QuickAction",
    "StatusBadge",
    "DashboardResponse",
    "NavigationItem",
    "NavigationResponse",
    # Marketing
    "NavLink",
    "Hero",
    "FeatureCard",
    "TechItem",
    "CallToAction",
    "AuthState",
    "LandingPageResponse",
]
