"""
Landing service - content for the public marketing page.
"""
from typing import Optional

from hacktemplate.models.marketing import (
    AuthState,
    CallToAction,
    FeatureCard,
    Hero,
    LandingPageResponse,
    NavLink,
    TechItem,
)
from hacktemplate.models.user import AuthUser
from hacktemplate.services.dashboard_service import BRAND_NAME

GITHUB_URL = "https://github.com"

NAV_LINKS = [
    NavLink(title="Features", href="#features"),
    NavLink(title="Tech Stack", href="#tech"),
    NavLink(title="GitHub", href=GITHUB_URL, external=True),
]

HERO = Hero(
    title="Build 5 Apps in 5 Hours",
    subtitle=(
        "Production-ready starter with authentication, AI integration, "
        "and a dashboard shell. Clone, customize, ship."
    ),
    primary_cta=NavLink(title="Get Started", href="/dashboard"),
    secondary_cta=NavLink(title="View on GitHub", href=GITHUB_URL, external=True),
)

FEATURES = [
    FeatureCard(
        title="Authentication",
        description=(
            "Supabase auth with email/password and Google OAuth. "
            "Protected routes, session cookies and user helpers ready to use."
        ),
        icon="shield",
        bullets=["Email & OAuth login", "Protected routes", "Password recovery", "Session handling"],
    ),
    FeatureCard(
        title="AI Integration",
        description=(
            "Google Gemini integration with streaming responses. "
            "Ready-to-use AI endpoint with error handling."
        ),
        icon="rocket",
        bullets=["Gemini API integration", "Streaming responses", "System instructions", "Rate limit handling"],
    ),
    FeatureCard(
        title="Dashboard Shell",
        description=(
            "Sidebar navigation, stat cards and activity feed served as JSON, "
            "so any frontend can render them."
        ),
        icon="palette",
        bullets=["Sidebar navigation", "Stat cards", "Activity feed", "Quick actions"],
    ),
]

TECH_STACK = [
    TechItem(name="FastAPI", icon="code"),
    TechItem(name="Pydantic", icon="code"),
    TechItem(name="Supabase", icon="database"),
    TechItem(name="httpx", icon="palette"),
    TechItem(name="Google Gemini", icon="zap"),
    TechItem(name="Uvicorn", icon="shield"),
]

CTA = CallToAction(
    title="Ready to Build?",
    text="Stop reading, start shipping. Your next hackathon win is one clone away.",
    links=[
        NavLink(title="Open Dashboard", href="/dashboard"),
        NavLink(title="Sign In", href="/login"),
    ],
)

FOOTER = "Built for speed. Open source. Made with ❤️ for hackathons."


def get_landing_page(user: Optional[AuthUser] = None) -> LandingPageResponse:
    """Assemble the marketing page, personalised with the caller's auth state."""
    if user:
        auth = AuthState(signed_in=True, email=user.email, initials=user.initials)
    else:
        auth = AuthState(signed_in=False)

    return LandingPageResponse(
        brand=BRAND_NAME,
        nav=list(NAV_LINKS),
        hero=HERO,
        features_title="Everything You Need to Win",
        features_subtitle="Stop wasting time on boilerplate. Focus on your unique features.",
        features=list(FEATURES),
        tech_title="Modern Tech Stack",
        tech_subtitle="Built with the latest and greatest tools for maximum productivity",
        tech_stack=list(TECH_STACK),
        cta=CTA,
        footer=FOOTER,
        auth=auth,
    )
