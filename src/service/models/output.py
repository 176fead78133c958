"""
Output models for API responses using Pydantic.

Fields are declared in snake_case and serialized in camelCase, which is
what the browser widgets consuming these endpoints expect.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for response bodies."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, keeping explicit nulls."""
        return self.model_dump(by_alias=True, mode='json')


class PresenceStatus(str, Enum):
    """Discord online status."""
    ONLINE = 'online'
    IDLE = 'idle'
    DND = 'dnd'
    OFFLINE = 'offline'


class Timestamps(ApiModel):
    start: Optional[int] = None
    end: Optional[int] = None


class PresenceUser(ApiModel):
    id: Annotated[str, Field(description='Discord user id', examples=['94490510688792576'])]
    username: str
    display_name: Annotated[str, Field(description='display_name, else global_name, else username')]
    discriminator: str
    avatar: Annotated[str, Field(description='Absolute CDN URL of the avatar image')]


class Platforms(ApiModel):
    desktop: bool = False
    mobile: bool = False
    web: bool = False


class CustomStatusEmoji(ApiModel):
    name: Optional[str] = None
    id: Optional[str] = None
    animated: bool = False


class CustomStatus(ApiModel):
    text: Optional[str] = None
    emoji: Optional[CustomStatusEmoji] = None


class Activity(ApiModel):
    name: str
    type: int
    details: Optional[str] = None
    state: Optional[str] = None
    application_id: Optional[str] = None
    image: Annotated[Optional[str], Field(description='Resolved large-image URL')] = None
    timestamps: Optional[Timestamps] = None


class SpotifyTrack(ApiModel):
    song: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    album_art: Optional[str] = None
    track_id: Optional[str] = None
    timestamps: Optional[Timestamps] = None


class PresenceOutput(ApiModel):
    """Response body of GET /api/discord-presence."""

    success: bool = True
    user: PresenceUser
    status: PresenceStatus
    platforms: Platforms
    custom_status: Optional[CustomStatus] = None
    activity: Optional[Activity] = None
    spotify: Optional[SpotifyTrack] = None


class FiveMStatusOutput(ApiModel):
    """Response body of GET /api/fivem-status."""

    online: bool
    players: Annotated[int, Field(ge=0)] = 0
    max_players: Annotated[int, Field(ge=0)] = 0
    hostname: str
    gametype: str
    mapname: str


class TwitchStatusOutput(ApiModel):
    """Response body of GET /api/twitch-status."""

    is_live: bool
    title: Optional[str] = None
    game: Optional[str] = None
    viewer_count: Optional[int] = None
    message: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        body = super().to_body()
        # message only appears on the degraded path
        if self.message is None:
            body.pop('message')
        return body
