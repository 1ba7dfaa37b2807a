"""
Health check router.
"""
from fastapi import APIRouter, Depends

from hacktemplate.auth.dependencies import get_auth_client
from hacktemplate.auth.supabase_client import SupabaseAuthClient
from hacktemplate.config import ENVIRONMENT
from hacktemplate.services.ai_service import AIService, get_ai_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
    ai_service: AIService = Depends(get_ai_service),
):
    """Liveness check with configuration status.

    Makes no calls to Supabase or Gemini; it only reports whether their
    credentials are present.
    """
    return {
        "status": "healthy",
        "service": "hacktemplate-api",
        "environment": ENVIRONMENT,
        "auth_configured": auth_client.is_configured,
        "ai_configured": ai_service.is_configured,
    }
