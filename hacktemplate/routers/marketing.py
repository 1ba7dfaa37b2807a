"""
Marketing router - public landing page content.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from hacktemplate.auth.dependencies import get_current_user_optional
from hacktemplate.models import AuthUser, LandingPageResponse
from hacktemplate.services import get_landing_page

router = APIRouter(tags=["Marketing"])


@router.get("/", response_model=LandingPageResponse)
async def landing_page(user: Optional[AuthUser] = Depends(get_current_user_optional)):
    """Hero, features, tech stack and CTA; anonymous callers are welcome."""
    return get_landing_page(user)
