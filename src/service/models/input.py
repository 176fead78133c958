"""
Input models for upstream API payloads using Pydantic.

Each upstream response is validated into one of these models before the
logic layer reshapes it. Unknown upstream fields are ignored.
"""

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UpstreamModel(BaseModel):
    """Base model for third-party payloads."""

    model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True, populate_by_name=True)


# --- Lanyard (Discord presence) ---


class DiscordUser(UpstreamModel):
    id: str
    username: str = ''
    global_name: Optional[str] = None
    display_name: Optional[str] = None
    avatar: Optional[str] = None
    discriminator: str = '0'


class ActivityTimestamps(UpstreamModel):
    start: Optional[int] = None
    end: Optional[int] = None


class ActivityAssets(UpstreamModel):
    large_image: Optional[str] = None
    large_text: Optional[str] = None
    small_image: Optional[str] = None
    small_text: Optional[str] = None


class ActivityEmoji(UpstreamModel):
    name: Optional[str] = None
    id: Optional[str] = None
    animated: bool = False


class DiscordActivity(UpstreamModel):
    """A single entry of the Lanyard ``activities`` list."""

    name: str = ''
    type: int = 0
    state: Optional[str] = None
    details: Optional[str] = None
    application_id: Optional[str] = None
    assets: Optional[ActivityAssets] = None
    timestamps: Optional[ActivityTimestamps] = None
    emoji: Optional[ActivityEmoji] = None


class SpotifyListening(UpstreamModel):
    track_id: Optional[str] = None
    song: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    album_art_url: Optional[str] = None
    timestamps: Optional[ActivityTimestamps] = None


class LanyardPresence(UpstreamModel):
    """The ``data`` object of a Lanyard user lookup."""

    discord_user: DiscordUser
    discord_status: str = 'offline'
    activities: List[DiscordActivity] = Field(default_factory=list)
    listening_to_spotify: bool = False
    spotify: Optional[SpotifyListening] = None
    active_on_discord_desktop: bool = False
    active_on_discord_mobile: bool = False
    active_on_discord_web: bool = False


class LanyardResponse(UpstreamModel):
    success: bool = False
    data: Optional[LanyardPresence] = None


# --- FiveM server list ---


class FiveMServerFields(UpstreamModel):
    """Server fields as they appear either under ``Data`` or at the top level."""

    clients: Optional[int] = None
    sv_maxclients: Optional[int] = None
    sv_maxclients_camel: Annotated[Optional[int], Field(alias='svMaxclients')] = None
    hostname: Optional[str] = None
    gametype: Optional[str] = None
    mapname: Optional[str] = None

    @property
    def max_clients(self) -> Optional[int]:
        if self.sv_maxclients is not None:
            return self.sv_maxclients
        return self.sv_maxclients_camel


class FiveMServerResponse(FiveMServerFields):
    """Single-server lookup, optionally wrapping its fields in ``Data``."""

    data: Annotated[Optional[FiveMServerFields], Field(alias='Data')] = None


# --- Twitch Helix ---


class TwitchAppToken(UpstreamModel):
    """Client-credentials token response."""

    access_token: Annotated[str, Field(min_length=1)]
    expires_in: int = 0
    token_type: str = 'bearer'


class TwitchStream(UpstreamModel):
    title: Optional[str] = None
    game_name: Optional[str] = None
    viewer_count: Optional[int] = None


class TwitchStreamsResponse(UpstreamModel):
    data: List[TwitchStream] = Field(default_factory=list)
