"""
Pytest configuration and shared fixtures for the status endpoints.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import httpx
import pytest

# Test environment configuration, applied before handler modules are imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "ENVIRONMENT": "test",
    "POWERTOOLS_SERVICE_NAME": "test-status-endpoints",
    "POWERTOOLS_METRICS_NAMESPACE": "TestStatusEndpoints",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})
os.environ.pop("TWITCH_CLIENT_ID", None)
os.environ.pop("TWITCH_CLIENT_SECRET", None)


@dataclass
class FakeLambdaContext:
    """Minimal Lambda context accepted by Powertools decorators."""

    function_name: str = "test-status-function"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-status-function"
    aws_request_id: str = "test-request-id-123"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a Lambda context for testing."""
    return FakeLambdaContext()


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy GET events."""

    def make_event(path: str, query: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return {
            "resource": path,
            "path": path,
            "httpMethod": "GET",
            "headers": {
                "Accept": "application/json",
                "User-Agent": "pytest/test-agent",
            },
            "multiValueHeaders": {
                "Accept": ["application/json"],
                "User-Agent": ["pytest/test-agent"],
            },
            "queryStringParameters": query,
            "multiValueQueryStringParameters": {k: [v] for k, v in query.items()} if query else None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-12345",
                "stage": "prod",
                "resourceId": "abc123",
                "resourcePath": path,
                "httpMethod": "GET",
                "apiId": "testapi123",
                "accountId": "123456789012",
                "path": f"/prod{path}",
                "protocol": "HTTP/1.1",
                "requestTime": "20/Sep/2024:12:00:00 +0000",
                "requestTimeEpoch": 1726833600,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "pytest/test-agent",
                },
            },
            "body": None,
            "isBase64Encoded": False,
        }

    return make_event


@pytest.fixture
def mock_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Factory for httpx clients whose requests are answered by a function."""
    clients = []

    def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield make_client

    for client in clients:
        client.close()


def response_header(response: Dict[str, Any], name: str) -> Optional[str]:
    """Read a header from a proxy response, single- or multi-value form."""
    headers = response.get("headers") or {}
    if name in headers:
        return headers[name]
    values = (response.get("multiValueHeaders") or {}).get(name)
    return values[0] if values else None


@pytest.fixture(autouse=True)
def reset_token_cache():
    """Reset the Twitch token cache between tests."""
    from service.dal.twitch_client import clear_token_cache

    clear_token_cache()
    yield
    clear_token_cache()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
