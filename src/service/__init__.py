"""
Status Endpoints Service Module.

Shared implementation behind the three Lambda functions, following a
three-layer layout:

- handlers: API Gateway routes, error to HTTP mapping, cache headers
- logic: reshaping of upstream payloads into response records
- dal: httpx clients for the upstream APIs
- models: Pydantic models for upstream payloads and response bodies
"""

__version__ = "1.0.0"
__description__ = "Serverless status endpoints for Discord, FiveM and Twitch"

# Re-export commonly used classes for convenience
from service.models.output import FiveMStatusOutput, PresenceOutput, TwitchStatusOutput
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "FiveMStatusOutput",
    "PresenceOutput",
    "TwitchStatusOutput",
    "logger",
    "tracer",
    "metrics",
]
