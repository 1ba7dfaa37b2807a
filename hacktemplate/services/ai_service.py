"""
AI Service - streaming chat completions via Google Gemini.

Thin pass-through around the google-genai SDK: applies defaults, converts
the frontend's chat messages to Gemini contents, relays the token stream
and maps provider failures to HTTP-level errors.
"""
import logging
from typing import Any, AsyncIterator, List, Optional, Sequence, Tuple

from google import genai
from google.genai import errors, types

from hacktemplate.config import (
    AI_AVAILABLE_MODELS,
    AI_DEFAULT_MODEL,
    AI_DEFAULT_TEMPERATURE,
    AI_FEATURES,
    AI_MAX_RETRIES,
    AI_REQUEST_TIMEOUT,
    get_ai_api_key,
)
from hacktemplate.exceptions import (
    AIServiceError,
    ConfigurationError,
    HackTemplateException,
    RateLimitError,
    ValidationError,
)
from hacktemplate.models.ai import ChatMessage

logger = logging.getLogger(__name__)

# Gemini calls the assistant side of the conversation "model"
ROLE_MAP = {"user": "user", "assistant": "model"}


def classify_provider_error(exc: Exception) -> HackTemplateException:
    """
    Map a provider failure to the error returned to the caller.

    - 429 / RESOURCE_EXHAUSTED / "rate limit" -> RateLimitError (429)
    - rejected credentials -> ConfigurationError (500)
    - anything else -> AIServiceError (500)
    """
    if isinstance(exc, HackTemplateException):
        return exc

    code = None
    status_name = ""
    if isinstance(exc, errors.APIError):
        code = exc.code
        status_name = (exc.status or "").upper()

    message = str(exc).lower()

    if code == 429 or status_name == "RESOURCE_EXHAUSTED" or "rate limit" in message:
        return RateLimitError()
    if code in (401, 403) or "api key" in message:
        return ConfigurationError("AI service configuration error")
    return AIServiceError()


async def _prepend(first: Any, rest: AsyncIterator[Any]) -> AsyncIterator[Any]:
    """Re-attach an already consumed first chunk to its stream."""
    if first is not None:
        yield first
    async for chunk in rest:
        yield chunk


class AIService:
    """
    Service for streaming chat completions.

    The provider credential is resolved when the service is built (once per
    request), so a missing key is reported per request instead of at startup.
    """

    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None):
        self.api_key = api_key
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) or self._client is not None

    @property
    def available_models(self) -> List[str]:
        return list(AI_AVAILABLE_MODELS)

    @property
    def features(self) -> List[str]:
        return list(AI_FEATURES)

    @property
    def client(self):
        """Lazily create the genai client; only valid when configured."""
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError("AI service is not configured")
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(
                    timeout=AI_REQUEST_TIMEOUT * 1000,
                    retry_options=types.HttpRetryOptions(attempts=AI_MAX_RETRIES + 1),
                ),
            )
        return self._client

    def to_provider_request(
        self,
        messages: Sequence[ChatMessage],
    ) -> Tuple[List[types.Content], Optional[str]]:
        """
        Convert chat messages to Gemini contents plus a system instruction.

        Raises:
            ValidationError: If nothing but system messages remain
        """
        system_parts = []
        contents = []
        for message in messages:
            if message.role == "system":
                system_parts.append(message.content)
                continue
            contents.append(
                types.Content(role=ROLE_MAP[message.role], parts=[types.Part(text=message.content)])
            )

        if not contents:
            raise ValidationError(
                "Invalid request: at least one user or assistant message required",
                field="messages",
            )

        system_instruction = "\n\n".join(system_parts) if system_parts else None
        return contents, system_instruction

    async def stream_chat(
        self,
        messages: Sequence[ChatMessage],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        user_id: Optional[str] = None,
    ) -> AsyncIterator[str]:
        """
        Start a streamed completion and return an iterator over its text.

        The first chunk is awaited before returning, so errors the provider
        reports up front (rate limits, bad keys) are raised here, while the
        caller can still choose the HTTP status.

        Raises:
            ConfigurationError: If no credential is configured
            RateLimitError: If the provider is rate limiting
            AIServiceError: For any other provider failure
        """
        if not self.is_configured:
            raise ConfigurationError("AI service is not configured")

        model = model or AI_DEFAULT_MODEL
        temperature = AI_DEFAULT_TEMPERATURE if temperature is None else temperature
        contents, system_instruction = self.to_provider_request(messages)

        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system_instruction,
        )

        try:
            stream = await self.client.aio.models.generate_content_stream(
                model=model,
                contents=contents,
                config=config,
            )
            iterator = stream.__aiter__()
            try:
                first = await iterator.__anext__()
            except StopAsyncIteration:
                first = None
        except Exception as e:
            logger.error(f"AI API error: {e}")
            raise classify_provider_error(e) from e

        return self._relay(first, iterator, model, user_id)

    async def _relay(
        self,
        first: Any,
        iterator: AsyncIterator[Any],
        model: str,
        user_id: Optional[str],
    ) -> AsyncIterator[str]:
        """Yield chunk text unmodified; log usage once the stream finishes."""
        usage = None
        try:
            async for chunk in _prepend(first, iterator):
                if getattr(chunk, "usage_metadata", None) is not None:
                    usage = chunk.usage_metadata
                text = getattr(chunk, "text", None)
                if text:
                    yield text
        except Exception as e:
            # Headers are already sent; the status can no longer change
            logger.error(f"AI stream interrupted for user {user_id}: {e}")
            return

        tokens = getattr(usage, "total_token_count", None)
        logger.info(f"AI request completed: user_id={user_id} model={model} tokens={tokens}")


def get_ai_service() -> AIService:
    """Build the AI service with the currently configured credential."""
    return AIService(api_key=get_ai_api_key())
