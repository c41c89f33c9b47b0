"""Shared fixtures: canned FPL payloads and a local stand-in for the API."""

import asyncio
from collections import Counter
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from fpl_api.config import Config
from fpl_api.fpl_client import FPLClient


# =============================================================================
# Fake API Server
# =============================================================================

class FakeFPLServer:
    """Serves canned responses keyed by request path and query string."""

    def __init__(self):
        self.routes: dict[str, tuple[int, Any, float]] = {}
        self.hits: Counter = Counter()
        self.last_headers: dict[str, str] = {}
        self.base_url = ""

    def add(self, path: str, body: Any, status: int = 200, delay: float = 0.0) -> None:
        """Register a response. String and bytes bodies are sent verbatim."""
        self.routes[f"/api/{path}"] = (status, body, delay)

    async def handle(self, request: web.Request) -> web.Response:
        key = request.path_qs
        self.hits[key] += 1
        self.last_headers = dict(request.headers)

        if key not in self.routes:
            return web.json_response({"detail": "Not found."}, status=404)

        status, body, delay = self.routes[key]
        if delay:
            await asyncio.sleep(delay)
        if isinstance(body, bytes):
            return web.Response(status=status, body=body, content_type="text/html")
        if isinstance(body, str):
            return web.Response(status=status, text=body, content_type="application/json")
        return web.json_response(body, status=status)


@pytest_asyncio.fixture
async def fpl_server():
    """Start a local FPL API stand-in for the duration of a test."""
    fake = FakeFPLServer()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", fake.handle)

    server = TestServer(app)
    await server.start_server()
    fake.base_url = str(server.make_url("/api"))
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def client(fpl_server):
    """Client pointed at the local server."""
    config = Config(api_base_url=fpl_server.base_url, request_timeout=5)
    async with FPLClient(config) as fpl:
        yield fpl


# =============================================================================
# Canned Payloads
# =============================================================================

@pytest.fixture
def player_payload():
    return {
        "id": 328,
        "code": 118748,
        "first_name": "Mohamed",
        "second_name": "Salah",
        "web_name": "M.Salah",
        "team": 12,
        "team_code": 14,
        "element_type": 3,
        "now_cost": 130,
        "cost_change_event": 0,
        "cost_change_start": 5,
        "total_points": 150,
        "event_points": 12,
        "points_per_game": "8.3",
        "form": "8.5",
        "selected_by_percent": "45.2",
        "ep_this": "7.5",
        "ep_next": "8.0",
        "value_form": "0.7",
        "value_season": "11.5",
        "minutes": 900,
        "starts": 10,
        "goals_scored": 10,
        "assists": 5,
        "clean_sheets": 3,
        "goals_conceded": 8,
        "own_goals": 0,
        "penalties_saved": 0,
        "penalties_missed": 1,
        "yellow_cards": 1,
        "red_cards": 0,
        "saves": 0,
        "bonus": 14,
        "bps": 320,
        "influence": "450.2",
        "creativity": "390.1",
        "threat": "520.0",
        "ict_index": "136.0",
        "expected_goals": "8.50",
        "expected_assists": "4.20",
        "expected_goal_involvements": "12.70",
        "expected_goals_conceded": "7.10",
        "dreamteam_count": 4,
        "in_dreamteam": True,
        "status": "a",
        "news": "",
        "news_added": None,
        "chance_of_playing_this_round": None,
        "chance_of_playing_next_round": None,
        "penalties_order": 1,
        "direct_freekicks_order": None,
        "corners_and_indirect_freekicks_order": 2,
        "transfers_in": 5200000,
        "transfers_out": 1100000,
        "transfers_in_event": 120000,
        "transfers_out_event": 15000,
        "photo": "118748.jpg",
        "special": False,
    }


@pytest.fixture
def second_player_payload():
    return {
        "id": 351,
        "first_name": "Erling",
        "second_name": "Haaland",
        "web_name": "Haaland",
        "team": 13,
        "element_type": 4,
        "now_cost": 150,
        "total_points": 140,
        "form": "7.0",
        "status": "d",
        "news": "Knock - 75% chance of playing",
        "news_added": "2024-10-04T12:30:00.123456Z",
        "chance_of_playing_next_round": 75,
    }


@pytest.fixture
def team_payloads():
    def team(team_id, name, short_name, strength):
        return {
            "id": team_id,
            "code": team_id + 2,
            "name": name,
            "short_name": short_name,
            "strength": strength,
            "strength_overall_home": 1300,
            "strength_overall_away": 1290,
            "strength_attack_home": 1320,
            "strength_attack_away": 1310,
            "strength_defence_home": 1280,
            "strength_defence_away": 1270,
            "played": 0,
            "win": 0,
            "draw": 0,
            "loss": 0,
            "points": 0,
            "position": 0,
            "form": None,
            "team_division": None,
            "unavailable": False,
            "pulse_id": team_id,
        }

    return [
        team(1, "Arsenal", "ARS", 4),
        team(12, "Liverpool", "LIV", 5),
        team(13, "Man City", "MCI", 5),
    ]


@pytest.fixture
def event_payloads():
    return [
        {
            "id": 1,
            "name": "Gameweek 1",
            "deadline_time": "2024-08-16T17:30:00Z",
            "deadline_time_epoch": 1723829400,
            "average_entry_score": 57,
            "finished": True,
            "data_checked": True,
            "highest_scoring_entry": 3546234,
            "highest_score": 127,
            "is_previous": True,
            "is_current": False,
            "is_next": False,
            "chip_plays": [
                {"chip_name": "bboost", "num_played": 144974},
                {"chip_name": "3xc", "num_played": 221430},
            ],
            "most_selected": 401,
            "most_transferred_in": 27,
            "top_element": 328,
            "top_element_info": {"id": 328, "points": 14},
            "transfers_made": 0,
            "most_captained": 351,
            "most_vice_captained": 328,
        },
        {
            "id": 2,
            "name": "Gameweek 2",
            "deadline_time": "2024-08-24T10:00:00Z",
            "deadline_time_epoch": 1724493600,
            "average_entry_score": 0,
            "finished": False,
            "data_checked": False,
            "highest_scoring_entry": None,
            "highest_score": None,
            "is_previous": False,
            "is_current": True,
            "is_next": False,
            "chip_plays": [],
            "top_element_info": None,
            "transfers_made": 8123456,
        },
        {
            "id": 3,
            "name": "Gameweek 3",
            "deadline_time": "2024-08-31T10:00:00Z",
            "deadline_time_epoch": 1725098400,
            "finished": False,
            "is_previous": False,
            "is_current": False,
            "is_next": True,
            "chip_plays": [],
            "transfers_made": 0,
        },
    ]


@pytest.fixture
def bootstrap_payload(player_payload, second_player_payload, team_payloads, event_payloads):
    return {
        "events": event_payloads,
        "game_settings": {
            "league_join_private_max": 25,
            "league_join_public_max": 5,
            "league_points_h2h_win": 3,
            "league_points_h2h_lose": 0,
            "league_points_h2h_draw": 1,
            "squad_squadplay": 11,
            "squad_squadsize": 15,
            "squad_team_limit": 3,
            "squad_total_spend": 1000,
            "transfers_cap": 20,
            "transfers_sell_on_fee": 0.5,
            "league_h2h_tiebreak_stats": ["+goals_scored", "-goals_conceded"],
            "sys_vice_captain_enabled": True,
            "stats_form_days": 30,
            "timezone": "UTC",
            "cup_start_event_id": None,
        },
        "phases": [
            {"id": 1, "name": "Overall", "start_event": 1, "stop_event": 38},
            {"id": 2, "name": "August", "start_event": 1, "stop_event": 3},
        ],
        "teams": team_payloads,
        "total_players": 11250000,
        "elements": [player_payload, second_player_payload],
        "element_stats": [
            {"label": "Minutes played", "name": "minutes"},
            {"label": "Goals scored", "name": "goals_scored"},
        ],
        "element_types": [
            {
                "id": 3,
                "plural_name": "Midfielders",
                "plural_name_short": "MID",
                "singular_name": "Midfielder",
                "singular_name_short": "MID",
                "squad_select": 5,
                "squad_min_play": 2,
                "squad_max_play": 5,
                "ui_shirt_specific": False,
                "sub_positions_locked": [],
                "element_count": 240,
            },
        ],
    }


@pytest.fixture
def fixture_payloads():
    return [
        {
            "id": 1,
            "code": 2444470,
            "event": 1,
            "finished": True,
            "finished_provisional": True,
            "kickoff_time": "2024-08-16T19:00:00Z",
            "minutes": 90,
            "provisional_start_time": False,
            "started": True,
            "team_a": 9,
            "team_a_score": 0,
            "team_h": 14,
            "team_h_score": 1,
            "stats": [
                {
                    "identifier": "goals_scored",
                    "a": [],
                    "h": [{"value": 1, "element": 389}],
                },
                {
                    "identifier": "bonus",
                    "a": [{"value": 1, "element": 201}],
                    "h": [{"value": 3, "element": 389}, {"value": 2, "element": 366}],
                },
            ],
            "team_h_difficulty": 3,
            "team_a_difficulty": 3,
            "pulse_id": 115827,
        },
        {
            "id": 12,
            "code": 2444481,
            "event": 2,
            "finished": False,
            "finished_provisional": False,
            "kickoff_time": "2024-08-24T11:30:00Z",
            "minutes": 0,
            "provisional_start_time": False,
            "started": False,
            "team_a": 13,
            "team_a_score": None,
            "team_h": 12,
            "team_h_score": None,
            "stats": [],
            "team_h_difficulty": 4,
            "team_a_difficulty": 5,
            "pulse_id": 115838,
        },
        {
            "id": 380,
            "code": 2444849,
            "event": None,
            "finished": False,
            "finished_provisional": False,
            "kickoff_time": None,
            "minutes": 0,
            "provisional_start_time": True,
            "started": None,
            "team_a": 1,
            "team_a_score": None,
            "team_h": 13,
            "team_h_score": None,
            "stats": [],
            "team_h_difficulty": 4,
            "team_a_difficulty": 4,
            "pulse_id": 116206,
        },
    ]


@pytest.fixture
def live_payload():
    return {
        "elements": [
            {
                "id": 328,
                "stats": {
                    "minutes": 90,
                    "goals_scored": 1,
                    "assists": 1,
                    "clean_sheets": 1,
                    "goals_conceded": 0,
                    "own_goals": 0,
                    "penalties_saved": 0,
                    "penalties_missed": 0,
                    "yellow_cards": 0,
                    "red_cards": 0,
                    "saves": 0,
                    "bonus": 3,
                    "bps": 45,
                    "influence": "52.4",
                    "creativity": "31.0",
                    "threat": "60.0",
                    "ict_index": "14.3",
                    "starts": 1,
                    "expected_goals": "0.78",
                    "expected_assists": "0.31",
                    "expected_goal_involvements": "1.09",
                    "expected_goals_conceded": "0.40",
                    "total_points": 14,
                    "in_dreamteam": True,
                },
                "explain": [
                    {
                        "fixture": 12,
                        "stats": [
                            {"identifier": "minutes", "points": 2, "value": 90},
                            {"identifier": "goals_scored", "points": 5, "value": 1},
                            {"identifier": "assists", "points": 3, "value": 1},
                            {"identifier": "bonus", "points": 3, "value": 3},
                        ],
                    }
                ],
            },
            {
                "id": 351,
                "stats": {"minutes": 0, "total_points": 0},
                "explain": [],
            },
        ]
    }


@pytest.fixture
def user_payload():
    return {
        "id": 5489342,
        "joined_time": "2024-07-20T09:41:13.512938Z",
        "started_event": 1,
        "favourite_team": 12,
        "player_first_name": "Alex",
        "player_last_name": "Morgan",
        "player_region_id": 241,
        "player_region_name": "England",
        "player_region_iso_code_short": "EN",
        "player_region_iso_code_long": "ENG",
        "summary_overall_points": 412,
        "summary_overall_rank": 120344,
        "summary_event_points": 61,
        "summary_event_rank": None,
        "current_event": 7,
        "leagues": {
            "classic": [
                {
                    "id": 753276,
                    "name": "Office League",
                    "short_name": None,
                    "created": "2024-07-21T10:00:00Z",
                    "closed": False,
                    "rank": None,
                    "max_entries": None,
                    "league_type": "x",
                    "scoring": "c",
                    "admin_entry": 5489342,
                    "start_event": 1,
                    "entry_can_leave": False,
                    "entry_can_admin": True,
                    "entry_can_invite": True,
                    "has_cup": False,
                    "cup_league": None,
                    "cup_qualified": None,
                    "entry_rank": 3,
                    "entry_last_rank": 4,
                }
            ],
            "h2h": [],
            "cup": {"matches": [], "status": {}, "cup_league": None},
            "cup_matches": [],
        },
        "name": "Klopp's Kids",
        "name_change_blocked": False,
        "kit": None,
        "last_deadline_bank": 15,
        "last_deadline_value": 1012,
        "last_deadline_total_transfers": 6,
    }


@pytest.fixture
def picks_payload():
    picks = [
        {
            "element": 100 + slot,
            "position": slot,
            "multiplier": 1 if slot <= 11 else 0,
            "is_captain": False,
            "is_vice_captain": False,
        }
        for slot in range(1, 16)
    ]
    picks[9].update({"element": 328, "multiplier": 2, "is_captain": True})
    picks[10].update({"element": 351, "is_vice_captain": True})
    return {
        "active_chip": None,
        "automatic_subs": [],
        "entry_history": {
            "event": 7,
            "points": 61,
            "total_points": 412,
            "rank": 1502334,
            "rank_sort": 1502800,
            "overall_rank": 120344,
            "bank": 15,
            "value": 1012,
            "event_transfers": 1,
            "event_transfers_cost": 0,
            "points_on_bench": 4,
        },
        "picks": picks,
    }


@pytest.fixture
def transfers_payload():
    return [
        {
            "element_in": 351,
            "element_in_cost": 150,
            "element_out": 401,
            "element_out_cost": 76,
            "entry": 5489342,
            "event": 7,
            "time": "2024-10-04T18:02:11.312Z",
        },
        {
            "element_in": 328,
            "element_in_cost": 126,
            "element_out": 99,
            "element_out_cost": 55,
            "entry": 5489342,
            "event": 3,
            "time": "2024-08-30T20:10:45.015Z",
        },
    ]


@pytest.fixture
def classic_league_payload():
    return {
        "new_entries": {"has_next": False, "page": 1, "results": []},
        "last_updated_data": "2024-10-06T19:40:02Z",
        "league": {
            "id": 753276,
            "name": "Office League",
            "created": "2024-07-21T10:00:00Z",
            "closed": False,
            "max_entries": None,
            "league_type": "x",
            "scoring": "c",
            "admin_entry": 5489342,
            "start_event": 1,
            "code_privacy": "p",
            "has_cup": False,
            "cup_league": None,
            "rank": None,
        },
        "standings": {
            "has_next": False,
            "page": 1,
            "results": [
                {
                    "id": 40001,
                    "event_total": 72,
                    "player_name": "Sam Rivers",
                    "rank": 1,
                    "last_rank": 1,
                    "rank_sort": 1,
                    "total": 450,
                    "entry": 1234,
                    "entry_name": "Rivers FC",
                },
                {
                    "id": 40002,
                    "event_total": 61,
                    "player_name": "Alex Morgan",
                    "rank": 3,
                    "last_rank": 4,
                    "rank_sort": 3,
                    "total": 412,
                    "entry": 5489342,
                    "entry_name": "Klopp's Kids",
                },
            ],
        },
    }


@pytest.fixture
def h2h_league_payload():
    return {
        "has_next": True,
        "page": 1,
        "results": [
            {
                "id": 9001,
                "entry_1_entry": 1234,
                "entry_1_name": "Rivers FC",
                "entry_1_player_name": "Sam Rivers",
                "entry_1_points": 72,
                "entry_1_win": 1,
                "entry_1_draw": 0,
                "entry_1_loss": 0,
                "entry_1_total": 3,
                "entry_2_entry": 5489342,
                "entry_2_name": "Klopp's Kids",
                "entry_2_player_name": "Alex Morgan",
                "entry_2_points": 61,
                "entry_2_win": 0,
                "entry_2_draw": 0,
                "entry_2_loss": 1,
                "entry_2_total": 0,
                "is_knockout": False,
                "league": 288399,
                "winner": 1234,
                "seed_value": None,
                "event": 7,
                "tiebreak": None,
                "is_bye": False,
                "knockout_name": "",
            }
        ],
    }
