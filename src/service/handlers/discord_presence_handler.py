"""
Discord Presence Handler - Lambda function for GET /api/discord-presence.

Looks up a user's presence through Lanyard and returns the reshaped
presence record. Failures are reported with 400/404/500 statuses.
"""

import os
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal.lanyard_client import LanyardClient
from service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from service.handlers.utils.errors import MissingParameterError, StatusEndpointError
from service.handlers.utils.observability import count, logger, metrics, tracer
from service.handlers.utils.responses import (
    create_api_response,
    create_error_response,
    internal_error_proxy_response,
)
from service.handlers.utils.rest_api_resolver import DISCORD_PRESENCE_PATH, create_resolver, get_query_param
from service.logic.presence import lookup_presence

SUCCESS_CACHE_SECONDS = 10

app = create_resolver()

# Reused across warm invocations
_lanyard_client: Optional[LanyardClient] = None


def get_lanyard_client(settings: HandlerEnvVars) -> LanyardClient:
    """Get or create the container-wide Lanyard client."""
    global _lanyard_client

    if _lanyard_client is None:
        _lanyard_client = LanyardClient(timeout=settings.UPSTREAM_TIMEOUT_SECONDS)

    return _lanyard_client


@app.exception_handler(StatusEndpointError)
def handle_status_endpoint_error(error: StatusEndpointError) -> Response:
    """Convert handler errors into ``{"success": false, "error": ...}`` responses."""
    logger.warning("Presence lookup failed", extra=error.to_dict())
    count(f"PresenceLookup{error.status_code}")

    return create_error_response(
        status_code=error.status_code,
        message=error.user_message,
        cache_max_age=error.cache_max_age,
        extra_fields={"success": False},
    )


@app.exception_handler(Exception)
def handle_unexpected_error(error: Exception) -> Response:
    logger.exception("Unexpected error in presence handler", extra={"error": str(error)})
    count("UnexpectedError")

    return create_error_response(
        status_code=500,
        message="Internal server error",
        extra_fields={"success": False},
    )


@app.get(DISCORD_PRESENCE_PATH)
@tracer.capture_method
def get_discord_presence() -> Response:
    """
    Discord presence lookup.

    Query parameters:
        userId: Discord user id (required)

    Returns:
        200 with the presence record, cached for 10 seconds
    """
    user_id = get_query_param(app, "userId")
    if user_id is None:
        raise MissingParameterError("userId")

    tracer.put_annotation("user_id", user_id)
    logger.info("Presence lookup requested", extra={"user_id": user_id})

    settings = get_handler_env_vars()
    presence = lookup_presence(user_id=user_id, client=get_lanyard_client(settings))

    count("PresenceLookupSuccess")
    return create_api_response(
        status_code=200,
        body=presence.to_body(),
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
        tracer.put_annotation("service", "discord-presence")
        tracer.put_annotation("environment", os.environ.get("ENVIRONMENT", "unknown"))

        return app.resolve(event, context)

    except Exception as e:
        count("RequestError")
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})
        return internal_error_proxy_response(context.aws_request_id)
