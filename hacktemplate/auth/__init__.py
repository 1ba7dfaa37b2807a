"""
Authentication module for the HackTemplate API.

Sessions are owned by Supabase Auth; this package only extracts the
session token from a request and asks Supabase who it belongs to.
"""

from hacktemplate.auth.config import (
    SUPABASE_URL,
    SUPABASE_ANON_KEY,
    AUTH_COOKIE_NAME,
)
from hacktemplate.auth.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    AuthProviderError,
)
from hacktemplate.auth.dependencies import (
    get_auth_client,
    get_access_token,
    get_current_user,
    get_current_user_optional,
)

__all__ = [
    # Config
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "AUTH_COOKIE_NAME",
    # Exceptions
    "AuthenticationError",
    "InvalidTokenError",
    "AuthProviderError",
    # Dependencies
    "get_auth_client",
    "get_access_token",
    "get_current_user",
    "get_current_user_optional",
]
