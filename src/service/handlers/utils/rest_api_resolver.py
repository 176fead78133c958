"""
REST API resolver utilities for the status endpoint handlers.

Each Lambda function owns one API Gateway REST resolver with a single GET
route; the path constants and query-string helpers live here.
"""

from typing import Optional

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError

from service.handlers.utils.responses import create_error_response

# API path constants
DISCORD_PRESENCE_PATH = '/api/discord-presence'
FIVEM_STATUS_PATH = '/api/fivem-status'
TWITCH_STATUS_PATH = '/api/twitch-status'

# Stage prefixes stripped when the API is called through its execute-api URL
STAGE_PREFIXES = ['/prod', '/staging', '/dev']


def create_resolver() -> APIGatewayRestResolver:
    """
    Create the API Gateway REST resolver for one handler module.

    Unknown routes get an explicit 404 handler so that catch-all exception
    handlers registered by the handler modules never see them.
    """
    app = APIGatewayRestResolver(strip_prefixes=STAGE_PREFIXES)

    @app.not_found
    def handle_not_found(error: NotFoundError) -> Response:
        return create_error_response(status_code=404, message='Not found')

    return app


def get_query_param(app: APIGatewayRestResolver, name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Read a query string parameter from the current event.

    Args:
        app: Resolver holding the current event
        name: Parameter name (case-sensitive)
        default: Returned when the parameter is absent or empty

    Returns:
        The parameter value as sent or ``default``
    """
    query_params = app.current_event.query_string_parameters or {}
    value = query_params.get(name)
    if not value:
        return default
    return value
