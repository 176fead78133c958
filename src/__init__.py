"""
Status Endpoints - Source Package

Serverless HTTP endpoints that reshape third-party status APIs (Discord
presence via Lanyard, FiveM server list, Twitch Helix) into small JSON
payloads for browser widgets.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
