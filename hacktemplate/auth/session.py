"""
Session token extraction.

Browsers send the Supabase session as a cookie written by @supabase/ssr;
API clients send it as a bearer token. Both end up as one access token.
"""
import base64
import binascii
import json
import logging
from typing import Any, Mapping, Optional

from hacktemplate.auth.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

BASE64_PREFIX = "base64-"


def extract_bearer_token(authorization: str) -> str:
    """
    Extract the token from an Authorization header value.

    Raises:
        AuthenticationError: If the header is malformed
    """
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise AuthenticationError("Invalid authorization header format. Use: Bearer <token>")
    return parts[1]


def read_session_cookie(cookies: Mapping[str, str], cookie_name: str) -> Optional[str]:
    """
    Reassemble the raw session cookie value.

    Large sessions are split into `<name>.0`, `<name>.1`, ... chunks.
    """
    if cookie_name in cookies:
        return cookies[cookie_name]

    chunks = []
    index = 0
    while f"{cookie_name}.{index}" in cookies:
        chunks.append(cookies[f"{cookie_name}.{index}"])
        index += 1

    return "".join(chunks) if chunks else None


def decode_session_cookie(value: str) -> Optional[str]:
    """Return the access token stored in a session cookie value, if any."""
    if value.startswith(BASE64_PREFIX):
        encoded = value[len(BASE64_PREFIX):]
        encoded += "=" * (-len(encoded) % 4)
        try:
            value = base64.urlsafe_b64decode(encoded).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            logger.warning("Session cookie is not valid base64")
            return None

    try:
        session: Any = json.loads(value)
    except ValueError:
        logger.warning("Session cookie is not valid JSON")
        return None

    # Older helpers stored [access_token, refresh_token, ...]
    if isinstance(session, list):
        token = session[0] if session else None
    elif isinstance(session, dict):
        token = session.get("access_token")
    else:
        token = None

    return token if isinstance(token, str) and token else None


def extract_session_token(
    authorization: Optional[str],
    cookies: Mapping[str, str],
    cookie_name: str,
) -> str:
    """
    Extract the access token for the current request.

    The Authorization header wins when present; otherwise the Supabase
    session cookie is used.

    Raises:
        AuthenticationError: If no usable token is present
    """
    if authorization:
        return extract_bearer_token(authorization)

    raw = read_session_cookie(cookies, cookie_name)
    if raw:
        token = decode_session_cookie(raw)
        if token:
            return token

    raise AuthenticationError()
