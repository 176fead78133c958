"""
Twitch Helix client.

Performs the client-credentials exchange for an app access token and the
streams-by-login query. The token can optionally be reused across warm
invocations of the same container until shortly before it expires.
"""

import time
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from service.dal import BaseUpstreamClient
from service.handlers.utils.observability import logger, tracer
from service.models.input import TwitchAppToken, TwitchStreamsResponse

TWITCH_TOKEN_URL = 'https://id.twitch.tv/oauth2/token'
TWITCH_STREAMS_URL = 'https://api.twitch.tv/helix/streams'

# Refresh this many seconds before Twitch says the token expires
TOKEN_EXPIRY_MARGIN_SECONDS = 60


@dataclass
class CachedToken:
    """App access token kept in a warm container."""

    access_token: str
    expires_at: float

    @property
    def is_expired(self) -> bool:
        return time.monotonic() >= self.expires_at


# Keyed by client id, lives as long as the Lambda container
_token_cache: Dict[str, CachedToken] = {}


def clear_token_cache() -> None:
    _token_cache.clear()


class TwitchClient(BaseUpstreamClient):
    """Client for the two Twitch calls behind the stream status endpoint."""

    service_name = 'twitch'

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        reuse_token: bool = False,
    ) -> None:
        """
        Initialize the Twitch client.

        Args:
            client_id: Twitch application client id
            client_secret: Twitch application client secret
            http_client: Shared httpx client
            timeout: Timeout used when no httpx client is supplied
            reuse_token: Keep the app token for its validity window instead of
                exchanging credentials on every call
        """
        super().__init__(http_client=http_client, timeout=timeout)
        self.client_id = client_id
        self.client_secret = client_secret
        self.reuse_token = reuse_token

    @tracer.capture_method
    def get_app_token(self) -> str:
        """
        Obtain an app access token through the client-credentials grant.

        Raises:
            UpstreamStatusError: The token endpoint answered with a non-2xx status
            UpstreamPayloadError: No access_token in the response
        """
        if self.reuse_token:
            cached = _token_cache.get(self.client_id)
            if cached and not cached.is_expired:
                logger.debug('Reusing cached Twitch app token')
                return cached.access_token

        response = self.http.post(
            TWITCH_TOKEN_URL,
            params={
                'client_id': self.client_id,
                'client_secret': self.client_secret,
                'grant_type': 'client_credentials',
            },
        )
        self._ensure_success(response)
        token = self._parse(response, TwitchAppToken)

        if self.reuse_token:
            lifetime = max(token.expires_in - TOKEN_EXPIRY_MARGIN_SECONDS, 0)
            _token_cache[self.client_id] = CachedToken(
                access_token=token.access_token,
                expires_at=time.monotonic() + lifetime,
            )

        return token.access_token

    @tracer.capture_method
    def get_streams(self, username: str, access_token: str) -> TwitchStreamsResponse:
        """
        Query live streams for a channel login.

        Args:
            username: Channel login name
            access_token: App access token from ``get_app_token``

        Returns:
            Helix streams envelope; ``data`` is empty when the channel is offline
        """
        response = self.http.get(
            TWITCH_STREAMS_URL,
            params={'user_login': username},
            headers={
                'Client-ID': self.client_id,
                'Authorization': f'Bearer {access_token}',
            },
        )
        self._ensure_success(response)
        return self._parse(response, TwitchStreamsResponse)
