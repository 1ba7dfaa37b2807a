"""
Supabase Auth client wrapper.

Handles session verification, password sign-in, token refresh and
password recovery against the GoTrue REST API.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from hacktemplate.auth.config import SUPABASE_URL, SUPABASE_ANON_KEY
from hacktemplate.auth.exceptions import AuthProviderError, InvalidTokenError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull the human readable message out of a GoTrue error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("msg", "error_description", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"


class SupabaseAuthClient:
    """
    Client for interacting with Supabase Auth API.

    Every call opens a short-lived httpx.AsyncClient. Pass `transport` to
    route requests somewhere other than the network (used by the tests).
    """

    def __init__(
        self,
        base_url: str = SUPABASE_URL,
        anon_key: str = SUPABASE_ANON_KEY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.base_url = f"{base_url.rstrip('/')}/auth/v1"
        self.anon_key = anon_key
        self.transport = transport
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.anon_key) and self.base_url.startswith("http")

    def _get_headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        """Get headers for Supabase API requests."""
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token or self.anon_key}",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, timeout=self.timeout)

    async def get_user(self, access_token: str) -> Dict[str, Any]:
        """
        Get the user that owns an access token.

        This is the authoritative session check: the token is opaque to us
        and only Supabase can say whether it is still valid.

        Raises:
            InvalidTokenError: If Supabase rejects the token
            AuthProviderError: If Supabase fails for another reason
        """
        async with self._client() as client:
            response = await client.get(
                f"{self.base_url}/user",
                headers=self._get_headers(access_token),
            )

        if response.status_code in (401, 403):
            logger.warning(f"Session rejected by Supabase: {_error_message(response)}")
            raise InvalidTokenError()
        if response.status_code != 200:
            logger.error(f"Get user failed: {response.status_code} {response.text}")
            raise AuthProviderError(_error_message(response), status_code=502)

        return response.json()

    async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        """
        Exchange email and password for a session.

        Returns:
            Session data including access_token, refresh_token, user
        """
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/token",
                params={"grant_type": "password"},
                headers=self._get_headers(),
                json={"email": email, "password": password},
            )

        if response.status_code != 200:
            logger.warning(f"Password sign-in failed: {_error_message(response)}")
            raise AuthProviderError(_error_message(response), status_code=401)

        return response.json()

    async def refresh_session(self, refresh_token: str) -> Dict[str, Any]:
        """
        Refresh an access token using a refresh token.

        Returns:
            New session data with fresh access_token
        """
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/token",
                params={"grant_type": "refresh_token"},
                headers=self._get_headers(),
                json={"refresh_token": refresh_token},
            )

        if response.status_code != 200:
            logger.error(f"Token refresh failed: {response.text}")
            raise AuthProviderError(_error_message(response), status_code=401)

        return response.json()

    async def sign_out(self, access_token: str) -> bool:
        """
        Sign out a user (invalidate their session).

        Returns:
            True if Supabase revoked the session
        """
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/logout",
                headers=self._get_headers(access_token),
            )

        return response.status_code == 204

    async def send_password_recovery(self, email: str, redirect_to: Optional[str] = None) -> None:
        """
        Ask Supabase to email a password recovery link.

        Args:
            email: Account email
            redirect_to: Page the emailed link should land on
        """
        params = {"redirect_to": redirect_to} if redirect_to else None
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/recover",
                params=params,
                headers=self._get_headers(),
                json={"email": email},
            )

        if response.status_code != 200:
            logger.error(f"Password recovery request failed: {response.text}")
            raise AuthProviderError(_error_message(response), status_code=response.status_code)

    async def verify_recovery(self, token_hash: str) -> Dict[str, Any]:
        """
        Exchange the token_hash from a recovery email for a session.

        The returned session is allowed to set a new password.
        """
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/verify",
                headers=self._get_headers(),
                json={"type": "recovery", "token_hash": token_hash},
            )

        if response.status_code != 200:
            logger.warning(f"Recovery token verification failed: {_error_message(response)}")
            raise AuthProviderError(_error_message(response), status_code=401)

        return response.json()

    async def update_user(self, access_token: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update the signed-in user (e.g. {"password": "..."}).

        Returns:
            The updated user object
        """
        async with self._client() as client:
            response = await client.put(
                f"{self.base_url}/user",
                headers=self._get_headers(access_token),
                json=attributes,
            )

        if response.status_code != 200:
            logger.error(f"Update user failed: {response.text}")
            raise AuthProviderError(_error_message(response))

        return response.json()


# Singleton instance
supabase_auth = SupabaseAuthClient()
