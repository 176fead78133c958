"""
Lanyard client for Discord presence lookups.
"""

from urllib.parse import quote

from service.dal import BaseUpstreamClient
from service.handlers.utils.observability import logger, tracer
from service.models.input import LanyardResponse

LANYARD_USER_URL = 'https://api.lanyard.rest/v1/users/{user_id}'


class LanyardClient(BaseUpstreamClient):
    """Fetches a user's presence from the Lanyard REST API."""

    service_name = 'lanyard'

    @tracer.capture_method
    def get_presence(self, user_id: str) -> LanyardResponse:
        """
        Fetch presence data for a Discord user.

        Args:
            user_id: Discord user id (snowflake)

        Returns:
            Parsed Lanyard envelope; ``success`` may still be false

        Raises:
            UpstreamStatusError: Lanyard answered with a non-2xx status
            UpstreamPayloadError: The body could not be parsed
            httpx.HTTPError: The request itself failed
        """
        url = LANYARD_USER_URL.format(user_id=quote(user_id, safe=''))
        response = self.http.get(url)
        self._ensure_success(response)

        envelope = self._parse(response, LanyardResponse)
        logger.debug('Lanyard presence fetched', extra={'user_id': user_id, 'success': envelope.success})
        return envelope
