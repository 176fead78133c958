"""
Service Models Package

Pydantic models for upstream payloads (input) and response bodies (output).
"""

from .input import (
    DiscordActivity,
    DiscordUser,
    FiveMServerFields,
    FiveMServerResponse,
    LanyardPresence,
    LanyardResponse,
    TwitchAppToken,
    TwitchStreamsResponse,
)
from .output import (
    Activity,
    CustomStatus,
    FiveMStatusOutput,
    PresenceOutput,
    PresenceStatus,
    SpotifyTrack,
    TwitchStatusOutput,
)

__all__ = [
    # Upstream payloads
    "DiscordActivity",
    "DiscordUser",
    "FiveMServerFields",
    "FiveMServerResponse",
    "LanyardPresence",
    "LanyardResponse",
    "TwitchAppToken",
    "TwitchStreamsResponse",

    # Response bodies
    "Activity",
    "CustomStatus",
    "FiveMStatusOutput",
    "PresenceOutput",
    "PresenceStatus",
    "SpotifyTrack",
    "TwitchStatusOutput",
]
