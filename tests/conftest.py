"""
Pytest fixtures for HackTemplate API tests.

The app runs in-process over httpx.ASGITransport. Supabase and Gemini are
replaced with fakes through FastAPI dependency overrides.
"""
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import httpx
import pytest

from app import app as fastapi_app
from hacktemplate.auth.dependencies import get_auth_client
from hacktemplate.auth.exceptions import AuthProviderError, InvalidTokenError
from hacktemplate.services.ai_service import AIService, get_ai_service

VALID_TOKEN = "valid-access-token"

TEST_USER = {
    "id": "8d0fd2b3-9ca7-4b9e-a5d5-2b1b1f3f6c11",
    "email": "ada@example.com",
    "user_metadata": {"avatar_url": "https://example.com/ada.png"},
    "app_metadata": {"provider": "email"},
    "created_at": "2026-01-01T00:00:00Z",
    "last_sign_in_at": "2026-10-01T12:00:00Z",
}


class FakeAuthClient:
    """Stands in for SupabaseAuthClient; accepts only VALID_TOKEN."""

    is_configured = True

    def __init__(self):
        self.signed_out: List[str] = []
        self.updates: List[Dict[str, Any]] = []
        self.recovery_emails: List[Dict[str, Any]] = []
        self.update_error: Optional[AuthProviderError] = None

    async def get_user(self, access_token: str) -> Dict[str, Any]:
        if access_token != VALID_TOKEN:
            raise InvalidTokenError()
        return dict(TEST_USER)

    async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
        if password != "correct-horse":
            raise AuthProviderError("Invalid login credentials", status_code=401)
        return {"access_token": VALID_TOKEN, "refresh_token": "refresh-1", "expires_in": 3600, "expires_at": 1790000000}

    async def refresh_session(self, refresh_token: str) -> Dict[str, Any]:
        if refresh_token != "refresh-1":
            raise AuthProviderError("Invalid Refresh Token", status_code=401)
        return {"access_token": VALID_TOKEN, "refresh_token": "refresh-2", "expires_in": 3600}

    async def sign_out(self, access_token: str) -> bool:
        self.signed_out.append(access_token)
        return True

    async def send_password_recovery(self, email: str, redirect_to: Optional[str] = None) -> None:
        self.recovery_emails.append({"email": email, "redirect_to": redirect_to})

    async def verify_recovery(self, token_hash: str) -> Dict[str, Any]:
        if token_hash != "recovery-hash":
            raise AuthProviderError("Token has expired or is invalid", status_code=401)
        return {"access_token": VALID_TOKEN, "refresh_token": "refresh-1", "expires_in": 3600}

    async def update_user(self, access_token: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        if self.update_error:
            raise self.update_error
        self.updates.append(attributes)
        return dict(TEST_USER)


class FakeModels:
    """Mimics client.aio.models.generate_content_stream."""

    def __init__(self, chunks=None, error: Optional[Exception] = None, fail_after: Optional[int] = None):
        self.chunks = chunks or []
        self.error = error
        self.fail_after = fail_after
        self.calls: List[Dict[str, Any]] = []

    async def generate_content_stream(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None and self.fail_after is None:
            raise self.error
        return self._stream()

    async def _stream(self):
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index == self.fail_after:
                raise self.error
            yield chunk


def make_chunk(text: Optional[str], total_tokens: Optional[int] = None):
    usage = SimpleNamespace(total_token_count=total_tokens) if total_tokens is not None else None
    return SimpleNamespace(text=text, usage_metadata=usage)


def make_genai_client(models: FakeModels):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


@pytest.fixture
def auth_client() -> FakeAuthClient:
    return FakeAuthClient()


@pytest.fixture
def genai_models() -> FakeModels:
    return FakeModels(chunks=[make_chunk("Hello"), make_chunk(", "), make_chunk("world", total_tokens=12)])


@pytest.fixture
def ai_service(genai_models: FakeModels) -> AIService:
    return AIService(client=make_genai_client(genai_models))


@pytest.fixture
def app(auth_client: FakeAuthClient, ai_service: AIService):
    """The FastAPI app with Supabase and Gemini swapped for fakes."""
    fastapi_app.dependency_overrides[get_auth_client] = lambda: auth_client
    fastapi_app.dependency_overrides[get_ai_service] = lambda: ai_service
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Async HTTP client bound to the in-process app."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver", timeout=30.0) as client:
        yield client


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
