"""
Business logic for the Discord presence endpoint.

Turns a Lanyard presence object into the presence record served to
clients and classifies Lanyard failures into handler errors.
"""

from typing import List, Optional

from service.dal import UpstreamStatusError
from service.dal.lanyard_client import LanyardClient
from service.handlers.utils.errors import UpstreamNotFoundError, UpstreamServiceError
from service.handlers.utils.observability import logger, tracer
from service.models.input import (
    ActivityTimestamps,
    DiscordActivity,
    DiscordUser,
    LanyardPresence,
    SpotifyListening,
)
from service.models.output import (
    Activity,
    CustomStatus,
    CustomStatusEmoji,
    Platforms,
    PresenceOutput,
    PresenceStatus,
    PresenceUser,
    SpotifyTrack,
    Timestamps,
)

CUSTOM_STATUS_TYPE = 4
SPOTIFY_ACTIVITY_NAME = 'Spotify'

DISCORD_CDN = 'https://cdn.discordapp.com'
DISCORD_MEDIA_PROXY = 'https://media.discordapp.net'
ANIMATED_AVATAR_PREFIX = 'a_'
EXTERNAL_ASSET_PREFIX = 'mp:'
DEFAULT_AVATAR_COUNT = 5

NOT_FOUND_MESSAGE = 'User not found or not monitored by Lanyard'
UPSTREAM_FAILURE_MESSAGE = 'Failed to fetch Discord presence'
NOT_FOUND_CACHE_SECONDS = 30


def resolve_display_name(user: DiscordUser) -> str:
    return user.display_name or user.global_name or user.username


def build_avatar_url(user: DiscordUser) -> str:
    """
    CDN URL of the user's avatar.

    Animated hashes (``a_`` prefix) get a gif, other hashes a png. Without a
    hash the default embed avatar is chosen by ``discriminator % 5``.
    """
    if user.avatar:
        extension = 'gif' if user.avatar.startswith(ANIMATED_AVATAR_PREFIX) else 'png'
        return f'{DISCORD_CDN}/avatars/{user.id}/{user.avatar}.{extension}'

    try:
        discriminator = int(user.discriminator)
    except (TypeError, ValueError):
        discriminator = 0
    return f'{DISCORD_CDN}/embed/avatars/{discriminator % DEFAULT_AVATAR_COUNT}.png'


def select_main_activity(activities: List[DiscordActivity]) -> Optional[DiscordActivity]:
    """First activity that is neither a custom status nor the Spotify entry."""
    return next(
        (a for a in activities if a.type != CUSTOM_STATUS_TYPE and a.name != SPOTIFY_ACTIVITY_NAME),
        None,
    )


def select_custom_status(activities: List[DiscordActivity]) -> Optional[DiscordActivity]:
    return next((a for a in activities if a.type == CUSTOM_STATUS_TYPE), None)


def resolve_activity_image(activity: DiscordActivity) -> Optional[str]:
    """
    Large-image URL for an activity.

    ``mp:`` assets are external images served through the media proxy;
    anything else is an application asset on the CDN.
    """
    large_image = activity.assets.large_image if activity.assets else None
    if large_image and large_image.startswith(EXTERNAL_ASSET_PREFIX):
        return f'{DISCORD_MEDIA_PROXY}/{large_image[len(EXTERNAL_ASSET_PREFIX):]}'
    if activity.application_id and large_image:
        return f'{DISCORD_CDN}/app-assets/{activity.application_id}/{large_image}.png'
    return None


def _timestamps(timestamps: Optional[ActivityTimestamps]) -> Optional[Timestamps]:
    if timestamps is None:
        return None
    return Timestamps(start=timestamps.start, end=timestamps.end)


def _status(value: str) -> PresenceStatus:
    try:
        return PresenceStatus(value)
    except ValueError:
        return PresenceStatus.OFFLINE


def _activity(activity: Optional[DiscordActivity]) -> Optional[Activity]:
    if activity is None:
        return None
    return Activity(
        name=activity.name,
        type=activity.type,
        details=activity.details,
        state=activity.state,
        application_id=activity.application_id,
        image=resolve_activity_image(activity),
        timestamps=_timestamps(activity.timestamps),
    )


def _custom_status(activity: Optional[DiscordActivity]) -> Optional[CustomStatus]:
    if activity is None:
        return None
    emoji = None
    if activity.emoji is not None:
        emoji = CustomStatusEmoji(
            name=activity.emoji.name,
            id=activity.emoji.id,
            animated=activity.emoji.animated,
        )
    return CustomStatus(text=activity.state, emoji=emoji)


def _spotify(listening: bool, spotify: Optional[SpotifyListening]) -> Optional[SpotifyTrack]:
    if not listening or spotify is None:
        return None
    return SpotifyTrack(
        song=spotify.song,
        artist=spotify.artist,
        album=spotify.album,
        album_art=spotify.album_art_url,
        track_id=spotify.track_id,
        timestamps=_timestamps(spotify.timestamps),
    )


def build_presence(presence: LanyardPresence) -> PresenceOutput:
    """Reshape a Lanyard presence object into the client presence record."""
    user = presence.discord_user

    return PresenceOutput(
        user=PresenceUser(
            id=user.id,
            username=user.username,
            display_name=resolve_display_name(user),
            discriminator=user.discriminator,
            avatar=build_avatar_url(user),
        ),
        status=_status(presence.discord_status),
        platforms=Platforms(
            desktop=presence.active_on_discord_desktop,
            mobile=presence.active_on_discord_mobile,
            web=presence.active_on_discord_web,
        ),
        custom_status=_custom_status(select_custom_status(presence.activities)),
        activity=_activity(select_main_activity(presence.activities)),
        spotify=_spotify(presence.listening_to_spotify, presence.spotify),
    )


@tracer.capture_method
def lookup_presence(user_id: str, client: LanyardClient) -> PresenceOutput:
    """
    Fetch and reshape presence data for a Discord user.

    Raises:
        UpstreamNotFoundError: Lanyard answered with a non-success HTTP status
        UpstreamServiceError: Lanyard reported ``success: false``
    """
    try:
        envelope = client.get_presence(user_id)
    except UpstreamStatusError as exc:
        raise UpstreamNotFoundError(
            service_name=exc.service_name,
            upstream_status=exc.status_code,
            user_message=NOT_FOUND_MESSAGE,
            cache_max_age=NOT_FOUND_CACHE_SECONDS,
        ) from exc

    if not envelope.success or envelope.data is None:
        raise UpstreamServiceError(
            service_name=client.service_name,
            message='Lanyard reported an unsuccessful lookup',
            user_message=UPSTREAM_FAILURE_MESSAGE,
        )

    output = build_presence(envelope.data)
    logger.info('Presence reshaped', extra={
        'user_id': user_id,
        'status': output.status.value,
        'has_activity': output.activity is not None,
        'has_spotify': output.spotify is not None,
    })
    return output
