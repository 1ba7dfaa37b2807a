"""
Tests for the Supabase Auth client against a mocked GoTrue API.
"""
import json
import logging

import httpx
import pytest

from hacktemplate.auth.exceptions import AuthProviderError, InvalidTokenError
from hacktemplate.auth.supabase_client import SupabaseAuthClient

BASE = "https://abcdefgh.supabase.co"


def make_client(handler) -> SupabaseAuthClient:
    return SupabaseAuthClient(base_url=BASE, anon_key="anon-key", transport=httpx.MockTransport(handler))


class TestGetUser:

    @pytest.mark.asyncio
    async def test_returns_user_for_valid_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["authorization"]
            seen["apikey"] = request.headers["apikey"]
            return httpx.Response(200, json={"id": "user-1", "email": "ada@example.com"})

        user = await make_client(handler).get_user("user-token")

        assert user["id"] == "user-1"
        assert seen == {
            "url": f"{BASE}/auth/v1/user",
            "auth": "Bearer user-token",
            "apikey": "anon-key",
        }

    @pytest.mark.asyncio
    async def test_rejected_token_raises_invalid_token(self):
        def handler(request):
            return httpx.Response(401, json={"code": 401, "msg": "invalid JWT"})

        with pytest.raises(InvalidTokenError):
            await make_client(handler).get_user("bad")

    @pytest.mark.asyncio
    async def test_provider_outage_raises_provider_error(self):
        def handler(request):
            return httpx.Response(500, text="upstream down")

        with pytest.raises(AuthProviderError) as exc_info:
            await make_client(handler).get_user("tok")
        assert exc_info.value.status_code == 502


class TestPasswordFlows:

    @pytest.mark.asyncio
    async def test_sign_in_failure_carries_provider_message(self):
        def handler(request):
            assert request.url.params["grant_type"] == "password"
            return httpx.Response(400, json={"error": "invalid_grant", "error_description": "Invalid login credentials"})

        with pytest.raises(AuthProviderError) as exc_info:
            await make_client(handler).sign_in_with_password("ada@example.com", "wrong")

        assert exc_info.value.message == "Invalid login credentials"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_sign_in_failure_log_omits_email(self, caplog):
        def handler(request):
            return httpx.Response(400, json={"error": "invalid_grant", "error_description": "Invalid login credentials"})

        with caplog.at_level(logging.WARNING, logger="hacktemplate.auth.supabase_client"):
            with pytest.raises(AuthProviderError):
                await make_client(handler).sign_in_with_password("ada@example.com", "wrong")

        assert "Invalid login credentials" in caplog.text
        assert "ada@example.com" not in caplog.text

    @pytest.mark.asyncio
    async def test_recovery_email_sends_redirect(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["redirect_to"] = request.url.params.get("redirect_to")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={})

        await make_client(handler).send_password_recovery(
            "ada@example.com", redirect_to="http://localhost:3000/reset-password"
        )

        assert seen == {
            "path": "/auth/v1/recover",
            "redirect_to": "http://localhost:3000/reset-password",
            "body": {"email": "ada@example.com"},
        }

    @pytest.mark.asyncio
    async def test_verify_recovery_posts_token_hash(self):
        def handler(request):
            assert request.url.path == "/auth/v1/verify"
            assert json.loads(request.content) == {"type": "recovery", "token_hash": "hash-1"}
            return httpx.Response(200, json={"access_token": "recovery-session", "refresh_token": "r"})

        session = await make_client(handler).verify_recovery("hash-1")
        assert session["access_token"] == "recovery-session"

    @pytest.mark.asyncio
    async def test_update_user_puts_attributes(self):
        def handler(request):
            assert request.method == "PUT"
            assert request.headers["authorization"] == "Bearer user-token"
            assert json.loads(request.content) == {"password": "new-secret"}
            return httpx.Response(200, json={"id": "user-1"})

        user = await make_client(handler).update_user("user-token", {"password": "new-secret"})
        assert user["id"] == "user-1"

    @pytest.mark.asyncio
    async def test_weak_password_is_reported(self):
        def handler(request):
            return httpx.Response(422, json={"code": 422, "error_code": "weak_password", "msg": "Password is known to be weak"})

        with pytest.raises(AuthProviderError) as exc_info:
            await make_client(handler).update_user("user-token", {"password": "password"})

        assert exc_info.value.message == "Password is known to be weak"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_sign_out(self):
        def handler(request):
            assert request.url.path == "/auth/v1/logout"
            return httpx.Response(204)

        assert await make_client(handler).sign_out("user-token") is True


def test_unconfigured_client():
    assert SupabaseAuthClient(base_url="", anon_key="").is_configured is False
