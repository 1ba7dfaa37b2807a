"""
Tests for the marketing page, dashboard shell and health endpoints.
"""
import pytest

import httpx

from hacktemplate.services.dashboard_service import initials


class TestDashboard:

    @pytest.mark.asyncio
    async def test_requires_session(self, client: httpx.AsyncClient):
        resp = await client.get("/dashboard")
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_overview(self, client: httpx.AsyncClient, auth_headers):
        resp = await client.get("/dashboard", headers=auth_headers)

        assert resp.status_code == 200
        data = resp.json()
        assert [s["title"] for s in data["stats"]] == ["Total Users", "Documents", "Analytics", "Active Now"]
        assert data["stats"][2]["trend"] == "down"
        assert data["recent_activity"][0]["initials"] == "SC"
        assert [b["label"] for b in data["status"]] == ["Active", "Pro Plan"]

    @pytest.mark.asyncio
    async def test_navigation_marks_only_exact_match(self, client: httpx.AsyncClient, auth_headers):
        resp = await client.get("/dashboard/navigation", params={"pathname": "/dashboard/team"}, headers=auth_headers)

        assert resp.status_code == 200
        items = resp.json()["items"]
        assert [i["title"] for i in items if i["is_active"]] == ["Team"]

    @pytest.mark.asyncio
    async def test_navigation_nested_path_is_not_active(self, client: httpx.AsyncClient, auth_headers):
        resp = await client.get(
            "/dashboard/navigation",
            params={"pathname": "/dashboard/team/invite"},
            headers=auth_headers,
        )

        assert not any(i["is_active"] for i in resp.json()["items"])


class TestLandingPage:

    @pytest.mark.asyncio
    async def test_anonymous(self, client: httpx.AsyncClient):
        resp = await client.get("/")

        assert resp.status_code == 200
        data = resp.json()
        assert data["brand"] == "HackTemplate"
        assert data["hero"]["title"] == "Build 5 Apps in 5 Hours"
        assert len(data["features"]) == 3
        assert data["auth"] == {"signed_in": False, "email": None, "initials": None}

    @pytest.mark.asyncio
    async def test_signed_in(self, client: httpx.AsyncClient, auth_headers):
        resp = await client.get("/", headers=auth_headers)

        assert resp.json()["auth"] == {"signed_in": True, "email": "ada@example.com", "initials": "A"}

    @pytest.mark.asyncio
    async def test_bad_session_is_treated_as_anonymous(self, client: httpx.AsyncClient):
        resp = await client.get("/", headers={"Authorization": "Bearer stale"})

        assert resp.status_code == 200
        assert resp.json()["auth"]["signed_in"] is False


@pytest.mark.asyncio
async def test_health(client: httpx.AsyncClient):
    resp = await client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["auth_configured"] is True
    assert data["ai_configured"] is True


def test_initials():
    assert initials("Sarah Chen") == "SC"
    assert initials("Cher") == "C"
