"""
AI endpoints - authenticated streaming proxy to the LLM provider.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from pydantic import ValidationError as PydanticValidationError

from hacktemplate.auth.dependencies import get_current_user
from hacktemplate.config import AI_API_KEY_ENV, AI_DEFAULT_MODEL
from hacktemplate.exceptions import ConfigurationError, ValidationError
from hacktemplate.models.ai import AICapabilitiesResponse, ChatRequest
from hacktemplate.models.user import AuthUser
from hacktemplate.services.ai_service import AIService, get_ai_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["AI"])

INVALID_MESSAGES = "Invalid request: messages array required"


async def parse_chat_request(request: Request) -> ChatRequest:
    """
    Read and validate the chat body.

    Parsed by hand (not as a body parameter) so the session check runs
    first and every malformed body maps to 400.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Invalid request: body must be JSON")

    if not isinstance(payload, dict) or not isinstance(payload.get("messages"), list):
        raise ValidationError(INVALID_MESSAGES, field="messages")

    try:
        return ChatRequest.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        field = errors[0]["field"] if errors else None
        message = INVALID_MESSAGES if field and field.startswith("messages") else f"Invalid request: {field}"
        raise ValidationError(message, field=field, details={"errors": errors})


@router.post("/ai")
async def stream_completion(
    request: Request,
    user: AuthUser = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
):
    """
    Stream a chat completion.

    Body: {"messages": [{"role", "content"}], "model"?, "temperature"?}.
    Returns the provider's text stream as text/plain.
    """
    chat = await parse_chat_request(request)

    if not service.is_configured:
        logger.error(f"{AI_API_KEY_ENV} is not configured")
        raise ConfigurationError("AI service is not configured")

    stream = await service.stream_chat(
        chat.messages,
        model=chat.model,
        temperature=chat.temperature,
        user_id=user.id,
    )

    return StreamingResponse(
        stream,
        media_type="text/plain; charset=utf-8",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        }
    )


@router.get("/ai", response_model=AICapabilitiesResponse)
async def ai_capabilities(
    user: AuthUser = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
):
    """Report that the endpoint is up, plus the models and features on offer."""
    return AICapabilitiesResponse(
        user=user.email,
        models=service.available_models,
        features=service.features,
        default_model=AI_DEFAULT_MODEL,
        configured=service.is_configured,
    )
