"""Payload for the API health-check."""

from asset_planner import __version__
from asset_planner.schemas.ping import PingResponse


def get_ping() -> PingResponse:
    """Report liveness together with the running package version."""
    return PingResponse(message="pong", version=__version__)
