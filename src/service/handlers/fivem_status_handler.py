"""
FiveM Status Handler - Lambda function for GET /api/fivem-status.

Reports whether a FiveM server is up. This endpoint never answers with a
non-200 status: failures are encoded as ``online: false``.
"""

import os
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal.fivem_client import FiveMClient
from service.handlers.models.env_vars import HandlerEnvVars, get_handler_env_vars
from service.handlers.utils.observability import count, logger, metrics, tracer
from service.handlers.utils.responses import CORS_HEADERS, cache_control, create_api_response, proxy_response
from service.handlers.utils.rest_api_resolver import FIVEM_STATUS_PATH, create_resolver, get_query_param
from service.logic.fivem import fetch_server_status, offline_status
from service.models.output import FiveMStatusOutput

ONLINE_CACHE_SECONDS = 30
OFFLINE_CACHE_SECONDS = 60

app = create_resolver()

_fivem_client: Optional[FiveMClient] = None


def get_fivem_client(settings: HandlerEnvVars) -> FiveMClient:
    """Get or create the container-wide FiveM client."""
    global _fivem_client

    if _fivem_client is None:
        _fivem_client = FiveMClient(timeout=settings.UPSTREAM_TIMEOUT_SECONDS)

    return _fivem_client


def status_response(status: FiveMStatusOutput) -> Response:
    """200 response with cross-origin access and an online/offline cache window."""
    return create_api_response(
        status_code=200,
        body=status.to_body(),
        cache_max_age=ONLINE_CACHE_SECONDS if status.online else OFFLINE_CACHE_SECONDS,
        cors_enabled=True,
    )


@app.exception_handler(Exception)
def handle_unexpected_error(error: Exception) -> Response:
    logger.exception("Unexpected error in FiveM handler, reporting offline", extra={"error": str(error)})
    count("UnexpectedError")
    return status_response(offline_status())


@app.get(FIVEM_STATUS_PATH)
@tracer.capture_method
def get_fivem_status() -> Response:
    """
    FiveM server status.

    Query parameters:
        code: FiveM join code (optional)

    Returns:
        200 with the server record
    """
    settings = get_handler_env_vars()
    code = get_query_param(app, "code", default=settings.FIVEM_DEFAULT_SERVER_CODE)

    tracer.put_annotation("server_code", code)
    logger.info("FiveM status requested", extra={"code": code})

    status = fetch_server_status(code=code, client=get_fivem_client(settings))

    count("FiveMServerOnline" if status.online else "FiveMServerOffline")
    return status_response(status)


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
        tracer.put_annotation("service", "fivem-status")
        tracer.put_annotation("environment", os.environ.get("ENVIRONMENT", "unknown"))

        return app.resolve(event, context)

    except Exception as e:
        count("RequestError")
        logger.exception("Unhandled error in lambda handler, reporting offline", extra={"error": str(e)})
        return proxy_response(
            status_code=200,
            body=offline_status().to_body(),
            request_id=context.aws_request_id,
            headers={**CORS_HEADERS, **cache_control(OFFLINE_CACHE_SECONDS)},
        )
