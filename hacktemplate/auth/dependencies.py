"""
FastAPI authentication dependencies.

Provides dependency injection for authenticated endpoints.
"""
import logging
from typing import Optional

from fastapi import Depends, Request

from hacktemplate.auth.config import AUTH_COOKIE_NAME
from hacktemplate.auth.exceptions import AuthenticationError
from hacktemplate.auth.session import extract_session_token
from hacktemplate.auth.supabase_client import SupabaseAuthClient, supabase_auth
from hacktemplate.models.user import AuthUser

logger = logging.getLogger(__name__)


def get_auth_client() -> SupabaseAuthClient:
    """Get the shared Supabase Auth client."""
    return supabase_auth


def get_access_token(request: Request) -> str:
    """
    Get the session token from the Authorization header or session cookie.

    Raises:
        AuthenticationError: If the request carries no session
    """
    return extract_session_token(
        request.headers.get("authorization"),
        request.cookies,
        AUTH_COOKIE_NAME,
    )


async def get_current_user(
    access_token: str = Depends(get_access_token),
    client: SupabaseAuthClient = Depends(get_auth_client),
) -> AuthUser:
    """
    Get the current authenticated user.

    The token is verified by Supabase on every call; any failure to do so
    is reported to the caller as 401.

    Usage:
        @router.get("/protected")
        async def protected_endpoint(user: AuthUser = Depends(get_current_user)):
            return {"user": user.email}
    """
    try:
        data = await client.get_user(access_token)
    except AuthenticationError:
        raise
    except Exception as e:
        logger.error(f"Session verification failed: {e}")
        raise AuthenticationError()

    if not data or not data.get("id"):
        raise AuthenticationError()

    return AuthUser.model_validate(data)


async def get_current_user_optional(
    request: Request,
    client: SupabaseAuthClient = Depends(get_auth_client),
) -> Optional[AuthUser]:
    """Like get_current_user, but returns None for anonymous requests."""
    try:
        token = get_access_token(request)
        return await get_current_user(access_token=token, client=client)
    except AuthenticationError:
        return None
