"""
Response helpers for API Gateway handlers.

Builds Powertools ``Response`` objects with a JSON body, a request id and
optional public caching hints.
"""

import json
import uuid
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response, content_types

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "OPTIONS,GET",
}


def cache_control(max_age: int) -> Dict[str, str]:
    """Public caching header for the given number of seconds."""
    return {"Cache-Control": f"public, max-age={max_age}"}


def create_api_response(
    status_code: int,
    body: Any,
    cache_max_age: Optional[int] = None,
    headers: Optional[Dict[str, str]] = None,
    cors_enabled: bool = False,
) -> Response:
    """Create a JSON API Gateway response."""

    response_headers = {
        "X-Request-ID": str(uuid.uuid4()),
    }

    if cors_enabled:
        response_headers.update(CORS_HEADERS)

    if cache_max_age is not None:
        response_headers.update(cache_control(cache_max_age))

    if headers:
        response_headers.update(headers)

    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=body if isinstance(body, str) else json.dumps(body),
        headers=response_headers,
    )


def proxy_response(
    status_code: int,
    body: Any,
    request_id: str,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Raw API Gateway proxy response for use outside the resolver."""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": content_types.APPLICATION_JSON,
            "X-Request-ID": request_id,
            **(headers or {}),
        },
        "body": json.dumps(body),
        "isBase64Encoded": False,
    }


def internal_error_proxy_response(request_id: str) -> Dict[str, Any]:
    return proxy_response(500, {"error": "Internal server error"}, request_id)


def create_error_response(
    status_code: int,
    message: str,
    cache_max_age: Optional[int] = None,
    extra_fields: Optional[Dict[str, Any]] = None,
    cors_enabled: bool = False,
) -> Response:
    """Error response whose body is ``{"error": message}`` plus any extra fields."""
    body: Dict[str, Any] = dict(extra_fields or {})
    body["error"] = message
    return create_api_response(
        status_code=status_code,
        body=body,
        cache_max_age=cache_max_age,
        cors_enabled=cors_enabled,
    )
