"""
Marketing page models.
"""
from typing import List, Optional
from pydantic import BaseModel


class NavLink(BaseModel):
    title: str
    href: str
    external: bool = False


class Hero(BaseModel):
    title: str
    subtitle: str
    primary_cta: NavLink
    secondary_cta: NavLink


class FeatureCard(BaseModel):
    title: str
    description: str
    icon: str
    bullets: List[str]


class TechItem(BaseModel):
    name: str
    icon: str


class CallToAction(BaseModel):
    title: str
    text: str
    links: List[NavLink]


class AuthState(BaseModel):
    """Lets the frontend pick between "Sign In" and the avatar menu."""
    signed_in: bool
    email: Optional[str] = None
    initials: Optional[str] = None


class LandingPageResponse(BaseModel):
    """Response model for GET /."""
    brand: str
    nav: List[NavLink]
    hero: Hero
    features_title: str
    features_subtitle: str
    features: List[FeatureCard]
    tech_title: str
    tech_subtitle: str
    tech_stack: List[TechItem]
    cta: CallToAction
    footer: str
    auth: AuthState
