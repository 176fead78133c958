"""
Business logic for the FiveM server status endpoint.

This endpoint fails soft: every failure on the fetch/parse path becomes an
"offline" record instead of an error status.
"""

from service.dal.fivem_client import FiveMClient
from service.handlers.utils.observability import logger, tracer
from service.models.input import FiveMServerFields, FiveMServerResponse
from service.models.output import FiveMStatusOutput

DEFAULT_HOSTNAME = 'Unknown Server'
DEFAULT_GAMETYPE = 'Unknown'
DEFAULT_MAPNAME = 'Unknown'
OFFLINE_HOSTNAME = 'Server Offline'


def normalize_server(payload: FiveMServerResponse) -> FiveMServerFields:
    """Pick the server fields: the ``Data`` wrapper when present, else the top level."""
    if payload.data is not None:
        return payload.data
    return payload


def build_server_status(payload: FiveMServerResponse) -> FiveMStatusOutput:
    fields = normalize_server(payload)
    return FiveMStatusOutput(
        online=True,
        players=fields.clients or 0,
        max_players=fields.max_clients or 0,
        hostname=fields.hostname or DEFAULT_HOSTNAME,
        gametype=fields.gametype or DEFAULT_GAMETYPE,
        mapname=fields.mapname or DEFAULT_MAPNAME,
    )


def offline_status() -> FiveMStatusOutput:
    return FiveMStatusOutput(
        online=False,
        players=0,
        max_players=0,
        hostname=OFFLINE_HOSTNAME,
        gametype=DEFAULT_GAMETYPE,
        mapname=DEFAULT_MAPNAME,
    )


@tracer.capture_method
def fetch_server_status(code: str, client: FiveMClient) -> FiveMStatusOutput:
    """
    Look up a server and reshape it, reporting any failure as offline.

    Args:
        code: FiveM join code
        client: Server-list client

    Returns:
        Online record, or the offline record on any error
    """
    try:
        payload = client.get_server(code)
        return build_server_status(payload)
    except Exception as e:
        logger.warning('FiveM lookup failed, reporting server offline', extra={
            'code': code,
            'error': str(e),
            'error_type': type(e).__name__,
        })
        return offline_status()
