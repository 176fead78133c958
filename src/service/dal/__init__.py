"""
Upstream access layer for the status endpoints.

Each third-party API gets one client class built on a shared base that owns
an ``httpx.Client``. Clients return validated input models and raise
``UpstreamError`` subclasses for non-success statuses and malformed payloads;
transport failures surface as ``httpx.HTTPError``.
"""

from abc import ABC
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from service.handlers.utils.observability import logger

USER_AGENT = 'status-endpoints/1.0'

ModelT = TypeVar('ModelT', bound=BaseModel)


class UpstreamError(Exception):
    """Base class for upstream API failures."""

    def __init__(self, service_name: str, message: str):
        super().__init__(f'{service_name}: {message}')
        self.service_name = service_name


class UpstreamStatusError(UpstreamError):
    """The upstream answered with a non-2xx HTTP status."""

    def __init__(self, service_name: str, status_code: int):
        super().__init__(service_name, f'HTTP {status_code}')
        self.status_code = status_code


class UpstreamPayloadError(UpstreamError):
    """The upstream body was not JSON or did not match the expected shape."""


def create_http_client(timeout: Optional[float] = None) -> httpx.Client:
    """
    Create the HTTP client used for upstream calls.

    Args:
        timeout: Seconds before an upstream call is abandoned; None leaves the
            call bounded only by the Lambda timeout

    Returns:
        Configured httpx client
    """
    return httpx.Client(
        timeout=timeout,
        headers={'User-Agent': USER_AGENT, 'Accept': 'application/json'},
    )


class BaseUpstreamClient(ABC):
    """Abstract base class for upstream API clients."""

    service_name: str = 'upstream'

    def __init__(self, http_client: Optional[httpx.Client] = None, timeout: Optional[float] = None) -> None:
        """
        Initialize the client.

        Args:
            http_client: Pre-built httpx client (tests pass one with a MockTransport)
            timeout: Timeout used when the client builds its own httpx client
        """
        self.http = http_client or create_http_client(timeout)

    def _ensure_success(self, response: httpx.Response) -> None:
        if not response.is_success:
            logger.warning(
                'Upstream returned non-success status',
                extra={
                    'upstream': self.service_name,
                    'status_code': response.status_code,
                    'url': str(response.request.url),
                },
            )
            raise UpstreamStatusError(self.service_name, response.status_code)

    def _parse(self, response: httpx.Response, model: Type[ModelT]) -> ModelT:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        try:
            return model.model_validate(response.json())
        except ValueError as exc:
            raise UpstreamPayloadError(self.service_name, f'unexpected payload: {exc}') from exc


__all__ = [
    'BaseUpstreamClient',
    'UpstreamError',
    'UpstreamPayloadError',
    'UpstreamStatusError',
    'create_http_client',
    'USER_AGENT',
]
