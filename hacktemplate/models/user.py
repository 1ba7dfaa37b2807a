"""
User models.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class AuthUser(BaseModel):
    """User object as returned by Supabase Auth (fields we use)."""
    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = Field(default_factory=dict)
    app_metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None

    @property
    def avatar_url(self) -> Optional[str]:
        return self.user_metadata.get("avatar_url") or self.user_metadata.get("picture")

    @property
    def initials(self) -> str:
        """Avatar fallback: first letter of the email."""
        return self.email[0].upper() if self.email else "?"


class MenuItem(BaseModel):
    """Entry in the account dropdown."""
    title: str
    href: str


class UserProfileResponse(BaseModel):
    """Response model for the signed-in user."""
    id: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    initials: str
    last_sign_in_at: Optional[datetime] = None

    @classmethod
    def from_auth_user(cls, user: AuthUser) -> "UserProfileResponse":
        return cls(
            id=user.id,
            email=user.email,
            avatar_url=user.avatar_url,
            initials=user.initials,
            last_sign_in_at=user.last_sign_in_at,
        )


class AuthMeResponse(BaseModel):
    """Response model for /auth/me endpoint."""
    user: UserProfileResponse
    menu: List[MenuItem]
