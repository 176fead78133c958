"""
Business logic for the Twitch live-status endpoint.
"""

from service.dal.twitch_client import TwitchClient
from service.handlers.utils.observability import logger, tracer
from service.models.input import TwitchStreamsResponse
from service.models.output import TwitchStatusOutput

NOT_CONFIGURED_MESSAGE = 'Twitch API credentials not configured'


def build_stream_status(streams: TwitchStreamsResponse) -> TwitchStatusOutput:
    """Live iff Helix returned at least one stream; details come from the first."""
    if not streams.data:
        return TwitchStatusOutput(is_live=False)

    stream = streams.data[0]
    return TwitchStatusOutput(
        is_live=True,
        title=stream.title,
        game=stream.game_name,
        viewer_count=stream.viewer_count,
    )


def not_configured_status() -> TwitchStatusOutput:
    return TwitchStatusOutput(is_live=False, message=NOT_CONFIGURED_MESSAGE)


@tracer.capture_method
def fetch_stream_status(username: str, client: TwitchClient) -> TwitchStatusOutput:
    """
    Exchange credentials for a token, then query the channel's live stream.

    Errors from either call propagate to the caller.
    """
    access_token = client.get_app_token()
    streams = client.get_streams(username, access_token)
    status = build_stream_status(streams)

    logger.info('Twitch status resolved', extra={'username': username, 'is_live': status.is_live})
    return status
