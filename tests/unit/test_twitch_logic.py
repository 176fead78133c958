"""
Unit tests for the Twitch live-status logic.
"""

from unittest.mock import Mock, call

import pytest

from service.dal import UpstreamStatusError
from service.logic.twitch import build_stream_status, fetch_stream_status, not_configured_status
from service.models.input import TwitchStreamsResponse


class TestBuildStreamStatus:
    """Test cases for the stream record reshape."""

    def test_empty_list_is_offline_with_nulls(self):
        status = build_stream_status(TwitchStreamsResponse(data=[]))

        assert status.to_body() == {"isLive": False, "title": None, "game": None, "viewerCount": None}

    def test_first_stream_is_used(self):
        streams = TwitchStreamsResponse.model_validate({
            "data": [
                {"user_login": "shroud", "title": "First", "game_name": "VALORANT", "viewer_count": 15234},
                {"user_login": "shroud", "title": "Second", "game_name": "Other", "viewer_count": 1},
            ],
        })

        status = build_stream_status(streams)

        assert status.is_live is True
        assert status.title == "First"
        assert status.game == "VALORANT"
        assert status.viewer_count == 15234


class TestNotConfiguredStatus:

    def test_degraded_body(self):
        body = not_configured_status().to_body()

        assert body["isLive"] is False
        assert body["message"] == "Twitch API credentials not configured"


class TestFetchStreamStatus:
    """Test cases for the two-step exchange."""

    def test_token_then_streams(self):
        client = Mock()
        client.get_app_token.return_value = "token-abc"
        client.get_streams.return_value = TwitchStreamsResponse.model_validate(
            {"data": [{"title": "Live!", "game_name": "Chess", "viewer_count": 10}]}
        )

        status = fetch_stream_status("gothamchess", client)

        assert client.method_calls == [call.get_app_token(), call.get_streams("gothamchess", "token-abc")]
        assert status.is_live is True
        assert status.game == "Chess"

    def test_token_failure_propagates(self):
        client = Mock()
        client.get_app_token.side_effect = UpstreamStatusError("twitch", 401)

        with pytest.raises(UpstreamStatusError):
            fetch_stream_status("gothamchess", client)

        client.get_streams.assert_not_called()
