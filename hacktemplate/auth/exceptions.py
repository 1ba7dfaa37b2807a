"""
Authentication exceptions.
"""
from typing import Any, Dict, Optional
from fastapi import status

from hacktemplate.exceptions import HackTemplateException


class AuthenticationError(HackTemplateException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class InvalidTokenError(AuthenticationError):
    """Raised when the identity provider rejects the session token."""

    def __init__(self, message: str = "Invalid or expired session", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class AuthProviderError(HackTemplateException):
    """Raised when a Supabase Auth call fails (bad credentials, weak password, ...)."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, status_code, details)
