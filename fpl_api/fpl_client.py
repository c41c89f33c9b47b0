"""
FPL API Client for the public Fantasy Premier League API.

Every method is a single GET round trip: the JSON body is decoded into the
dataclasses in ``models`` or the failure is raised as an ``FPLAPIError``.
"""

import asyncio
import logging
from typing import Any, Callable, Iterable, Optional, TypeVar

import aiohttp

from .config import Config
from .models import (
    BootstrapStatic,
    ClassicLeague,
    Fixture,
    Gameweek,
    H2HLeague,
    LiveGameweek,
    Player,
    Team,
    Transfer,
    User,
    UserPicks,
    parse_list,
)


T = TypeVar("T")


# =============================================================================
# Exceptions
# =============================================================================

class FPLAPIError(Exception):
    """Base exception for FPL API errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class NetworkError(FPLAPIError):
    """Raised when the request never produced a response (DNS, connection, timeout)."""
    pass


class HTTPStatusError(FPLAPIError):
    """Raised when the API answers with a non-2xx status code."""
    pass


class DecodeError(FPLAPIError):
    """Raised when a successful response body does not match the expected shape."""
    pass


# =============================================================================
# FPL Client
# =============================================================================

class FPLClient:
    """
    Async client for the public FPL API.

    Holds one aiohttp session for connection reuse and nothing else: no
    response is cached, so every call reflects the API at the time it is made.

    Usage:
        async with FPLClient() as client:
            players = await client.get_all_players()
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the FPL client.

        Args:
            config: Client configuration. Defaults to ``Config()``.
        """
        self.config = config or Config()
        self.logger = logging.getLogger("fpl_api.client")
        self._session: Optional[aiohttp.ClientSession] = None

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "FPLClient":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    # -------------------------------------------------------------------------
    # Session Management
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        """Initialize the HTTP session."""
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/json, text/plain, */*",
                    "Accept-Language": "en-US,en;q=0.9",
                }
            )
            self.logger.debug("HTTP session created")

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
            self.logger.debug("HTTP session closed")

    @property
    def is_connected(self) -> bool:
        return self._session is not None and not self._session.closed

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def _url(self, endpoint: str) -> str:
        return f"{self.config.api_base_url}/{endpoint.lstrip('/')}"

    async def _request(self, endpoint: str) -> tuple[int, Any]:
        """
        GET an endpoint and return its decoded JSON body.

        Args:
            endpoint: Path relative to the API base URL.

        Returns:
            The response status and the parsed JSON document.

        Raises:
            NetworkError: If the request fails before a response arrives.
            HTTPStatusError: If the response status is not 2xx.
            DecodeError: If the body is not valid JSON.
        """
        if self._session is None:
            await self.connect()

        url = self._url(endpoint)
        self.logger.debug(f"Request: GET {url}")

        try:
            async with self._session.get(url) as response:
                if not 200 <= response.status < 300:
                    # Error pages from proxies are not always UTF-8
                    text = await response.text(errors="replace")
                    self.logger.error(f"API error {response.status} for {url}")
                    raise HTTPStatusError(
                        f"Failed when making request to {url}: status {response.status}: {text[:200]}",
                        status_code=response.status,
                        url=url,
                    )

                try:
                    return response.status, await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError) as e:
                    self.logger.warning(f"Invalid JSON from {url}: {e}")
                    raise DecodeError(
                        f"Failed when decoding response from {url}: {e}",
                        status_code=response.status,
                        url=url,
                    ) from e

        except aiohttp.ClientError as e:
            self.logger.error(f"Request failed: {type(e).__name__}: {e}")
            raise NetworkError(f"Failed when making request to {url}: {e}", url=url) from e

        except asyncio.TimeoutError as e:
            self.logger.error(f"Request timed out: {url}")
            raise NetworkError(
                f"Request to {url} timed out after {self.config.request_timeout}s", url=url
            ) from e

    async def _fetch(self, endpoint: str, parse: Callable[[Any], T]) -> T:
        """
        GET an endpoint and build a typed result from its JSON body.

        Raises:
            DecodeError: If ``parse`` rejects the document's shape.
        """
        status, data = await self._request(endpoint)
        try:
            return parse(data)
        except (KeyError, TypeError, ValueError) as e:
            url = self._url(endpoint)
            self.logger.warning(f"Unexpected response shape from {url}: {type(e).__name__}: {e}")
            raise DecodeError(
                f"Failed when decoding response from {url}: {type(e).__name__}: {e}",
                status_code=status,
                url=url,
            ) from e

    # -------------------------------------------------------------------------
    # Bootstrap Static Data
    # -------------------------------------------------------------------------

    async def get_bootstrap_static(self) -> BootstrapStatic:
        """
        Get the bootstrap-static document.

        Contains all players, teams, gameweeks and game settings.
        """
        return await self._fetch("bootstrap-static/", BootstrapStatic.from_api)

    # -------------------------------------------------------------------------
    # Player Data
    # -------------------------------------------------------------------------

    async def get_all_players(self) -> list[Player]:
        """Get every player in the game."""
        data = await self.get_bootstrap_static()
        self.logger.debug(f"Loaded {len(data.elements)} players")
        return data.elements

    async def get_players(self, player_ids: Iterable[int]) -> list[Player]:
        """
        Get the players whose IDs are in ``player_ids``.

        Results keep the API's ordering, not the order of ``player_ids``.
        """
        wanted = set(player_ids)
        if not wanted:
            return []
        players = await self.get_all_players()
        return [p for p in players if p.id in wanted]

    async def get_player(self, player_id: int) -> Optional[Player]:
        """Get a specific player by ID."""
        players = await self.get_all_players()
        for player in players:
            if player.id == player_id:
                return player
        return None

    # -------------------------------------------------------------------------
    # Team Data
    # -------------------------------------------------------------------------

    async def get_all_teams(self) -> list[Team]:
        """Get all Premier League teams."""
        data = await self.get_bootstrap_static()
        self.logger.debug(f"Loaded {len(data.teams)} teams")
        return data.teams

    async def get_teams(self, team_ids: Iterable[int]) -> list[Team]:
        """Get the teams whose IDs are in ``team_ids``."""
        wanted = set(team_ids)
        if not wanted:
            return []
        teams = await self.get_all_teams()
        return [t for t in teams if t.id in wanted]

    async def get_team(self, team_id: int) -> Optional[Team]:
        """Get a specific team by ID."""
        teams = await self.get_all_teams()
        for team in teams:
            if team.id == team_id:
                return team
        return None

    # -------------------------------------------------------------------------
    # Gameweek Data
    # -------------------------------------------------------------------------

    async def get_static_gameweeks(self) -> list[Gameweek]:
        """Get all gameweeks with their deadlines and summary stats."""
        data = await self.get_bootstrap_static()
        return data.events

    async def get_static_gameweek(self, gameweek_id: int) -> Optional[Gameweek]:
        """Get a single gameweek from bootstrap-static by ID."""
        gameweeks = await self.get_static_gameweeks()
        for gw in gameweeks:
            if gw.id == gameweek_id:
                return gw
        return None

    async def get_current_gameweek(self) -> Optional[Gameweek]:
        """
        Get the gameweek the API marks as current.

        Falls back to the next gameweek before the season starts; returns
        None once the season is over.
        """
        gameweeks = await self.get_static_gameweeks()
        next_gw = None
        for gw in gameweeks:
            if gw.is_current:
                return gw
            if gw.is_next:
                next_gw = gw
        return next_gw

    async def get_live_gameweek(self, gameweek_id: int) -> LiveGameweek:
        """
        Get live per-player stats and points breakdowns for a gameweek.

        Args:
            gameweek_id: Gameweek number (1-38).
        """
        return await self._fetch(f"event/{gameweek_id}/live/", LiveGameweek.from_api)

    # -------------------------------------------------------------------------
    # Fixture Data
    # -------------------------------------------------------------------------

    async def get_fixtures(self) -> list[Fixture]:
        """Get every fixture of the season."""
        fixtures = await self._fetch("fixtures/", lambda data: parse_list(Fixture.from_api, data))
        self.logger.debug(f"Loaded {len(fixtures)} fixtures")
        return fixtures

    async def get_gameweek_fixtures(self, gameweek_id: int) -> list[Fixture]:
        """Get the fixtures scheduled in one gameweek."""
        fixtures = await self._fetch(
            f"fixtures/?event={gameweek_id}",
            lambda data: parse_list(Fixture.from_api, data),
        )
        self.logger.debug(f"Loaded {len(fixtures)} fixtures for GW{gameweek_id}")
        return fixtures

    async def get_fixture(self, fixture_id: int) -> Optional[Fixture]:
        """
        Get a specific fixture by ID.

        The fixture is located in the full list, then read again from its
        gameweek's list. Unscheduled fixtures (no gameweek) are returned as
        found in the full list.
        """
        fixtures = await self.get_fixtures()
        found = next((f for f in fixtures if f.id == fixture_id), None)
        if found is None or found.event is None:
            return found

        gameweek_fixtures = await self.get_gameweek_fixtures(found.event)
        return next((f for f in gameweek_fixtures if f.id == fixture_id), None)

    # -------------------------------------------------------------------------
    # User Data
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: int) -> User:
        """Get a manager's entry summary and league memberships."""
        return await self._fetch(f"entry/{user_id}/", User.from_api)

    async def get_user_picks(self, user_id: int, gameweek_id: int) -> UserPicks:
        """Get a manager's 15 picks and gameweek summary."""
        return await self._fetch(f"entry/{user_id}/event/{gameweek_id}/picks/", UserPicks.from_api)

    async def get_user_transfers(self, user_id: int) -> list[Transfer]:
        """Get a manager's transfer history for the season."""
        return await self._fetch(
            f"entry/{user_id}/transfers/",
            lambda data: parse_list(Transfer.from_api, data),
        )

    # -------------------------------------------------------------------------
    # League Data
    # -------------------------------------------------------------------------

    async def get_classic_league(self, league_id: int) -> ClassicLeague:
        """Get a classic league and the first page of its standings."""
        return await self._fetch(f"leagues-classic/{league_id}/standings/", ClassicLeague.from_api)

    async def get_h2h_league(self, league_id: int) -> H2HLeague:
        """Get the first page of a head-to-head league's matches."""
        return await self._fetch(f"leagues-h2h-matches/league/{league_id}/", H2HLeague.from_api)
