"""
AWS Lambda Handlers Module.

One module per Lambda function, each owning an API Gateway REST resolver
with a single GET route:

- discord_presence_handler: GET /api/discord-presence
- fivem_status_handler: GET /api/fivem-status
- twitch_status_handler: GET /api/twitch-status

Handler modules are imported by their entry points, not from here, so that
each function only loads the code it serves.
"""

__version__ = "1.0.0"

from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
