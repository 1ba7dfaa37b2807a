"""
Authentication router - sign-in, session management and password recovery.
"""
import logging

from fastapi import APIRouter, Depends, Request

from hacktemplate.auth.dependencies import (
    get_access_token,
    get_auth_client,
    get_current_user,
)
from hacktemplate.auth.exceptions import AuthenticationError
from hacktemplate.auth.supabase_client import SupabaseAuthClient
from hacktemplate.models import (
    AuthActionResponse,
    AuthMeResponse,
    AuthUser,
    ForgotPasswordRequest,
    LoginRequest,
    RefreshTokenRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserProfileResponse,
    VerifyRecoveryRequest,
)
from hacktemplate.services import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# =============================================================================
# Dependencies
# =============================================================================

def get_auth_service(client: SupabaseAuthClient = Depends(get_auth_client)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(client)


# =============================================================================
# Session Endpoints
# =============================================================================

@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Sign in with email and password."""
    result = await service.sign_in(request.email, request.password)
    return TokenResponse(**result)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_tokens(
    request: RefreshTokenRequest,
    service: AuthService = Depends(get_auth_service),
):
    """
    Refresh access token.

    Use this endpoint when the access token is about to expire.
    """
    result = await service.refresh_tokens(request.refresh_token)
    return TokenResponse(**result)


@router.post("/logout", response_model=AuthActionResponse)
async def logout(
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    """
    Log out the current user.

    Always succeeds; the session is revoked when one is present.
    """
    try:
        token = get_access_token(request)
    except AuthenticationError:
        token = None

    if token:
        await service.logout(token)

    return AuthActionResponse(success=True, redirect_to="/")


@router.get("/me", response_model=AuthMeResponse)
async def get_me(
    user: AuthUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """Get the signed-in user and their account menu."""
    return AuthMeResponse(
        user=UserProfileResponse.from_auth_user(user),
        menu=service.get_account_menu(user),
    )


# =============================================================================
# Password Recovery
# =============================================================================

@router.post("/forgot-password", response_model=AuthActionResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Email a password recovery link."""
    await service.request_password_reset(request.email)
    return AuthActionResponse(
        success=True,
        message="If an account exists for this email, a password reset link has been sent.",
    )


@router.post("/verify-recovery", response_model=TokenResponse)
async def verify_recovery(
    request: VerifyRecoveryRequest,
    service: AuthService = Depends(get_auth_service),
):
    """
    Exchange the token from a recovery email for a session.

    The returned access token is what /auth/reset-password expects.
    """
    result = await service.verify_recovery(request.token_hash)
    return TokenResponse(**result)


@router.post("/reset-password", response_model=AuthActionResponse)
async def reset_password(
    request: ResetPasswordRequest,
    access_token: str = Depends(get_access_token),
    user: AuthUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """
    Set a new password for the signed-in (or recovering) user.

    The session is signed out afterwards; the user logs in again.
    """
    redirect_to = await service.reset_password(
        access_token,
        user,
        request.password,
        request.confirm_password,
    )
    return AuthActionResponse(
        success=True,
        message="Your password has been reset successfully.",
        redirect_to=redirect_to,
    )
