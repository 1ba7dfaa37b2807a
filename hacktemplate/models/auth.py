"""
Authentication models.
"""
from typing import Optional
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request model for email/password sign-in."""
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Response model for authentication tokens."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token expiry in seconds")
    expires_at: Optional[int] = Field(None, description="Unix timestamp of expiry")


class RefreshTokenRequest(BaseModel):
    """Request model for refreshing tokens."""
    refresh_token: str


class ForgotPasswordRequest(BaseModel):
    """Request model for starting password recovery."""
    email: str = Field(..., min_length=3)


class VerifyRecoveryRequest(BaseModel):
    """Request model for exchanging the emailed recovery token."""
    token_hash: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    """Request model for setting a new password."""
    password: str
    confirm_password: str


class AuthActionResponse(BaseModel):
    """Generic response for auth actions."""
    success: bool = True
    message: Optional[str] = None
    redirect_to: Optional[str] = None
