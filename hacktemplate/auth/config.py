"""
Authentication configuration.

Centralizes Supabase Auth and session cookie settings.
"""
import os
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Supabase Configuration
# =============================================================================

# Supabase project URL (e.g., https://xxx.supabase.co)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "").rstrip("/")

# Supabase anonymous/public key (safe to expose in frontend)
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

# =============================================================================
# Session Cookie Configuration
# =============================================================================


def _default_cookie_name(supabase_url: str) -> str:
    """Supabase SSR names its cookie after the project ref (first host label)."""
    host = urlparse(supabase_url).hostname or ""
    project_ref = host.split(".")[0] if host else "local"
    return f"sb-{project_ref}-auth-token"


AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME") or _default_cookie_name(SUPABASE_URL)

# =============================================================================
# Password Recovery
# =============================================================================

# Frontend page the recovery email links back to
PASSWORD_RESET_PATH = "/reset-password"

# Where the frontend sends the user after a completed reset
POST_RESET_REDIRECT = "/login"

# Mirrors the minimum enforced by the reset form
PASSWORD_MIN_LENGTH = 6
