"""
End-to-end tests for the deployed status endpoints.

These tests call a deployed API Gateway stage over HTTP and only run when
API_BASE_URL is set, e.g. API_BASE_URL=https://abc123.execute-api.us-east-1.amazonaws.com/prod
"""

import os

import httpx
import pytest

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(not os.environ.get("API_BASE_URL"), reason="API_BASE_URL not set"),
]


@pytest.fixture
def integration_client():
    """HTTP client for the deployed stage."""
    with httpx.Client(base_url=os.environ.get("API_BASE_URL", ""), timeout=30.0) as client:
        yield client


class TestDiscordPresenceAPI:
    """End-to-end tests for the presence endpoint."""

    def test_missing_user_id(self, integration_client: httpx.Client):
        response = integration_client.get("/api/discord-presence")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_known_user(self, integration_client: httpx.Client):
        # Lanyard's own author account is always monitored
        response = integration_client.get("/api/discord-presence", params={"userId": "94490510688792576"})

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, max-age=10"
        result = response.json()
        assert result["success"] is True
        assert result["status"] in {"online", "idle", "dnd", "offline"}
        assert result["user"]["avatar"].startswith("https://cdn.discordapp.com/")


class TestFiveMStatusAPI:
    """End-to-end tests for the FiveM endpoint."""

    def test_always_200(self, integration_client: httpx.Client):
        response = integration_client.get("/api/fivem-status", params={"code": "zzzzzz"})

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        result = response.json()
        assert set(result) == {"online", "players", "maxPlayers", "hostname", "gametype", "mapname"}


class TestTwitchStatusAPI:
    """End-to-end tests for the Twitch endpoint."""

    def test_missing_username(self, integration_client: httpx.Client):
        response = integration_client.get("/api/twitch-status")

        assert response.status_code == 400

    def test_status_shape(self, integration_client: httpx.Client):
        response = integration_client.get("/api/twitch-status", params={"username": "twitch"})

        assert response.status_code == 200
        result = response.json()
        assert isinstance(result["isLive"], bool)
        if not result["isLive"]:
            assert result["title"] is None
            assert result["viewerCount"] is None
