"""
Twitch Status Handler - Lambda function for GET /api/twitch-status.

Reports whether a Twitch channel is live. Credentials come from the
environment on every invocation; without them the endpoint answers 200
with a degraded body instead of an error.
"""

import os
from typing import Any, Dict, Optional

import httpx
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import create_http_client
from service.dal.twitch_client import TwitchClient
from service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from service.handlers.utils.errors import MissingParameterError
from service.handlers.utils.observability import count, logger, metrics, tracer
from service.handlers.utils.responses import (
    create_api_response,
    create_error_response,
    internal_error_proxy_response,
)
from service.handlers.utils.rest_api_resolver import TWITCH_STATUS_PATH, create_resolver, get_query_param
from service.logic.twitch import fetch_stream_status, not_configured_status

SUCCESS_CACHE_SECONDS = 60
FAILURE_MESSAGE = "Failed to fetch Twitch status"

app = create_resolver()

# Shared connection pool; credentials are bound per invocation
_http_client: Optional[httpx.Client] = None


def get_twitch_client(settings: HandlerEnvVars) -> TwitchClient:
    """Build a Twitch client from the current credentials over the shared HTTP pool."""
    global _http_client

    if _http_client is None:
        _http_client = create_http_client(settings.UPSTREAM_TIMEOUT_SECONDS)

    return TwitchClient(
        client_id=settings.TWITCH_CLIENT_ID or "",
        client_secret=settings.TWITCH_CLIENT_SECRET or "",
        http_client=_http_client,
        reuse_token=settings.twitch_token_cache_enabled,
    )


@app.exception_handler(MissingParameterError)
def handle_missing_parameter(error: MissingParameterError) -> Response:
    logger.warning("Twitch status request rejected", extra=error.to_dict())
    count("TwitchStatus400")
    return create_error_response(status_code=400, message=error.user_message)


@app.exception_handler(Exception)
def handle_unexpected_error(error: Exception) -> Response:
    """Every other failure, upstream or local, is a 500 without cache headers."""
    logger.exception("Twitch status lookup failed", extra={
        "error": str(error),
        "error_type": type(error).__name__,
    })
    count("TwitchStatusError")
    return create_error_response(status_code=500, message=FAILURE_MESSAGE)


@app.get(TWITCH_STATUS_PATH)
@tracer.capture_method
def get_twitch_status() -> Response:
    """
    Twitch live status.

    Query parameters:
        username: Channel login (required)

    Returns:
        200 with the stream record, or 200 degraded when credentials are missing
    """
    username = get_query_param(app, "username")
    if username is None:
        raise MissingParameterError("username")

    tracer.put_annotation("username", username)

    settings = get_handler_env_vars()
    if not settings.twitch_configured:
        logger.warning("Twitch credentials are not configured, returning degraded status")
        count("TwitchStatusDegraded")
        return create_api_response(status_code=200, body=not_configured_status().to_body())

    status = fetch_stream_status(username=username, client=get_twitch_client(settings))

    count("TwitchStatusSuccess")
    return create_api_response(
        status_code=200,
        body=status.to_body(),
        cache_max_age=SUCCESS_CACHE_SECONDS,
    )


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    try:
        count("RequestCount")
        tracer.put_annotation("service", "twitch-status")
        tracer.put_annotation("environment", os.environ.get("ENVIRONMENT", "unknown"))

        return app.resolve(event, context)

    except Exception as e:
        count("RequestError")
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})
        return internal_error_proxy_response(context.aws_request_id)
