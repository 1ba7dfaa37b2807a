"""
Authentication service - sign-in, sign-out and password recovery.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from hacktemplate.auth.config import (
    PASSWORD_MIN_LENGTH,
    PASSWORD_RESET_PATH,
    POST_RESET_REDIRECT,
)
from hacktemplate.auth.exceptions import AuthProviderError
from hacktemplate.auth.supabase_client import SupabaseAuthClient
from hacktemplate.config import FRONTEND_URL
from hacktemplate.exceptions import ValidationError
from hacktemplate.models.user import AuthUser, MenuItem

logger = logging.getLogger(__name__)

# Account dropdown entries shown next to the avatar
ACCOUNT_MENU = [
    MenuItem(title="Dashboard", href="/dashboard"),
    MenuItem(title="Settings", href="/dashboard/settings"),
]


def validate_new_password(password: str, confirm_password: str) -> None:
    """
    Check a new password the same way the reset form does.

    Raises:
        ValidationError: If the passwords differ or the password is too short
    """
    if password != confirm_password:
        raise ValidationError("Passwords do not match", field="confirm_password")

    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
            field="password",
        )


def _session_tokens(session: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the token fields of a Supabase session."""
    access_token = session.get("access_token")
    if not access_token:
        raise AuthProviderError("Failed to get access token", status_code=401)

    return {
        "access_token": access_token,
        "refresh_token": session.get("refresh_token") or "",
        "token_type": "bearer",
        "expires_in": session.get("expires_in", 3600),
        "expires_at": session.get("expires_at"),
    }


class AuthService:
    """Service for authentication operations."""

    def __init__(self, client: SupabaseAuthClient):
        self.client = client

    async def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Sign in with email and password.

        Returns:
            Dict containing tokens
        """
        session = await self.client.sign_in_with_password(email, password)
        return _session_tokens(session)

    async def refresh_tokens(self, refresh_token: str) -> Dict[str, Any]:
        """
        Refresh access token using refresh token.

        Returns:
            Dict containing new tokens
        """
        session = await self.client.refresh_session(refresh_token)
        return _session_tokens(session)

    async def logout(self, access_token: str) -> bool:
        """
        Log out the user (invalidate their session).

        Returns:
            True if successful
        """
        try:
            return await self.client.sign_out(access_token)
        except Exception as e:
            logger.error(f"Logout failed: {e}")
            return False

    def get_account_menu(self, user: AuthUser) -> list[MenuItem]:
        """Menu entries for the signed-in user's avatar dropdown."""
        return list(ACCOUNT_MENU)

    async def request_password_reset(self, email: str, redirect_to: Optional[str] = None) -> None:
        """
        Send a password recovery email.

        Provider failures, including an unreachable Supabase, are logged and
        not reported back, so the response does not reveal whether the
        account exists.
        """
        redirect_to = redirect_to or f"{FRONTEND_URL}{PASSWORD_RESET_PATH}"
        try:
            await self.client.send_password_recovery(email, redirect_to=redirect_to)
        except (AuthProviderError, httpx.HTTPError) as e:
            logger.warning(f"Password recovery email not sent: {e}")

    async def verify_recovery(self, token_hash: str) -> Dict[str, Any]:
        """
        Exchange an emailed recovery token for a session.

        Returns:
            Dict containing tokens for the recovery session
        """
        session = await self.client.verify_recovery(token_hash)
        return _session_tokens(session)

    async def reset_password(
        self,
        access_token: str,
        user: AuthUser,
        password: str,
        confirm_password: str,
    ) -> str:
        """
        Set a new password, then end the session.

        Returns:
            Where the frontend should send the user next

        Raises:
            ValidationError: If the new password is rejected locally
            AuthProviderError: If Supabase rejects the update
        """
        validate_new_password(password, confirm_password)

        await self.client.update_user(access_token, {"password": password})
        logger.info(f"Password reset for user {user.id}")

        # The user signs in again with the new password
        await self.logout(access_token)

        return POST_RESET_REDIRECT
