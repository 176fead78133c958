"""
FiveM server-list client.
"""

from urllib.parse import quote

from service.dal import BaseUpstreamClient
from service.handlers.utils.observability import tracer
from service.models.input import FiveMServerResponse

FIVEM_SERVER_URL = 'https://servers-frontend.fivem.net/api/servers/single/{code}'


class FiveMClient(BaseUpstreamClient):
    """Looks up a single FiveM server by join code."""

    service_name = 'fivem'

    @tracer.capture_method
    def get_server(self, code: str) -> FiveMServerResponse:
        """
        Fetch the server-list entry for a join code.

        Raises:
            UpstreamStatusError: The server list answered with a non-2xx status
            UpstreamPayloadError: The body could not be parsed
            httpx.HTTPError: The request itself failed
        """
        response = self.http.get(FIVEM_SERVER_URL.format(code=quote(code, safe='')))
        self._ensure_success(response)
        return self._parse(response, FiveMServerResponse)
