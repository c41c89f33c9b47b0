"""
FPL API - Async client for the Fantasy Premier League API

This package provides:
- An async client with one method per public FPL endpoint
- Typed dataclass records for players, teams, gameweeks, fixtures, users and leagues
- A small error hierarchy separating network, HTTP status and decode failures
"""

__version__ = "1.0.0"

from .config import Config, setup_logging
from .fpl_client import (
    FPLClient,
    FPLAPIError,
    NetworkError,
    HTTPStatusError,
    DecodeError,
)
from .models import (
    BootstrapStatic,
    ClassicLeague,
    Fixture,
    Gameweek,
    H2HLeague,
    LiveGameweek,
    Player,
    Position,
    Team,
    Transfer,
    User,
    UserPicks,
)

__all__ = [
    "Config",
    "setup_logging",
    "FPLClient",
    "FPLAPIError",
    "NetworkError",
    "HTTPStatusError",
    "DecodeError",
    "BootstrapStatic",
    "ClassicLeague",
    "Fixture",
    "Gameweek",
    "H2HLeague",
    "LiveGameweek",
    "Player",
    "Position",
    "Team",
    "Transfer",
    "User",
    "UserPicks",
]
