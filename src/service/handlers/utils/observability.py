"""
Shared Powertools instances for the status endpoint handlers.

Every handler logs, traces and emits metrics through the objects defined
here so that the three Lambda functions report under one namespace.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics, MetricUnit
from aws_lambda_powertools.tracing import Tracer

SERVICE_NAME = os.environ.get('POWERTOOLS_SERVICE_NAME', 'status-endpoints')
METRICS_NAMESPACE = os.environ.get('POWERTOOLS_METRICS_NAMESPACE', 'StatusEndpoints')

# JSON structured logs, level from LOG_LEVEL
logger: Logger = Logger(service=SERVICE_NAME)

# Disabled outside Lambda or with POWERTOOLS_TRACE_DISABLED=true
tracer: Tracer = Tracer(service=SERVICE_NAME)

metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)


def count(name: str, value: int = 1) -> None:
    """Add a Count metric to the current invocation."""
    metrics.add_metric(name=name, unit=MetricUnit.Count, value=value)
