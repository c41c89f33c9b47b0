"""
Data models for FPL API responses.

Each dataclass mirrors one JSON shape returned by the FPL API and is built
through its ``from_api`` classmethod. Required keys are read directly and
type-checked, so a payload missing one raises ``KeyError`` and a payload
with the wrong JSON type raises ``TypeError``; the client reports both as a
decode failure.
"""

from typing import Any, Callable, Optional, TypeVar
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


T = TypeVar("T")


# =============================================================================
# Helpers
# =============================================================================

def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an FPL ISO-8601 timestamp, returning None if absent or invalid."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, TypeError, AttributeError):
        return None


def _to_float(value: Any) -> float:
    """FPL sends most decimals as strings ("8.5"); empty values count as 0."""
    return float(value or 0)


def _int(value: Any) -> int:
    # bool is an int subclass; the API never sends one in place of a number
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}: {value!r}")
    return value


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}: {value!r}")
    return value


def _list(value: Any) -> list:
    if not isinstance(value, list):
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return value


def parse_list(builder: Callable[[dict], T], data: Any) -> list[T]:
    """Build one record per item of a JSON array, rejecting anything else."""
    return [builder(item) for item in _list(data)]


# =============================================================================
# Enums
# =============================================================================

class Position(IntEnum):
    """Player positions (``element_type``)."""
    GOALKEEPER = 1
    DEFENDER = 2
    MIDFIELDER = 3
    FORWARD = 4
    MANAGER = 5  # assistant manager chip

    def __str__(self) -> str:
        return self.name.title()


class PlayerStatus(str):
    """Player availability status codes."""
    AVAILABLE = 'a'
    DOUBTFUL = 'd'
    INJURED = 'i'
    SUSPENDED = 's'
    UNAVAILABLE = 'u'
    NOT_IN_SQUAD = 'n'


# =============================================================================
# Bootstrap Static
# =============================================================================

@dataclass
class Player:
    """An FPL player ("element") from bootstrap-static."""
    id: int
    code: int
    first_name: str
    second_name: str
    web_name: str
    team: int
    team_code: int
    element_type: int  # 1=GK, 2=DEF, 3=MID, 4=FWD, 5=manager
    now_cost: int  # tenths of a million
    cost_change_event: int
    cost_change_start: int
    total_points: int
    event_points: int
    points_per_game: float
    form: float
    selected_by_percent: float
    ep_this: float
    ep_next: float
    value_form: float
    value_season: float
    minutes: int
    starts: int
    goals_scored: int
    assists: int
    clean_sheets: int
    goals_conceded: int
    own_goals: int
    penalties_saved: int
    penalties_missed: int
    yellow_cards: int
    red_cards: int
    saves: int
    bonus: int
    bps: int
    influence: float
    creativity: float
    threat: float
    ict_index: float
    expected_goals: float
    expected_assists: float
    expected_goal_involvements: float
    expected_goals_conceded: float
    dreamteam_count: int
    in_dreamteam: bool
    # Availability
    status: str
    news: str
    news_added: Optional[datetime]
    chance_of_playing_this_round: Optional[int]
    chance_of_playing_next_round: Optional[int]
    # Set pieces
    penalties_order: Optional[int]
    direct_freekicks_order: Optional[int]
    corners_and_indirect_freekicks_order: Optional[int]
    # Transfers
    transfers_in: int
    transfers_out: int
    transfers_in_event: int
    transfers_out_event: int

    def __str__(self) -> str:
        return f"<id: {self.id}, name: {self.full_name}>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.second_name}"

    @property
    def price(self) -> float:
        """Price in millions."""
        return self.now_cost / 10

    @property
    def position(self) -> Optional[Position]:
        """None for element types added after this release."""
        try:
            return Position(self.element_type)
        except ValueError:
            return None

    @property
    def is_available(self) -> bool:
        return self.status == PlayerStatus.AVAILABLE

    @classmethod
    def from_api(cls, data: dict) -> "Player":
        """Create Player from API response data."""
        return cls(
            id=_int(data["id"]),
            code=data.get("code", 0),
            first_name=_str(data["first_name"]),
            second_name=_str(data["second_name"]),
            web_name=_str(data["web_name"]),
            team=_int(data["team"]),
            team_code=data.get("team_code", 0),
            element_type=_int(data["element_type"]),
            now_cost=_int(data["now_cost"]),
            cost_change_event=data.get("cost_change_event", 0),
            cost_change_start=data.get("cost_change_start", 0),
            total_points=_int(data["total_points"]),
            event_points=data.get("event_points", 0),
            points_per_game=_to_float(data.get("points_per_game")),
            form=_to_float(data.get("form")),
            selected_by_percent=_to_float(data.get("selected_by_percent")),
            ep_this=_to_float(data.get("ep_this")),
            ep_next=_to_float(data.get("ep_next")),
            value_form=_to_float(data.get("value_form")),
            value_season=_to_float(data.get("value_season")),
            minutes=data.get("minutes", 0),
            starts=data.get("starts", 0),
            goals_scored=data.get("goals_scored", 0),
            assists=data.get("assists", 0),
            clean_sheets=data.get("clean_sheets", 0),
            goals_conceded=data.get("goals_conceded", 0),
            own_goals=data.get("own_goals", 0),
            penalties_saved=data.get("penalties_saved", 0),
            penalties_missed=data.get("penalties_missed", 0),
            yellow_cards=data.get("yellow_cards", 0),
            red_cards=data.get("red_cards", 0),
            saves=data.get("saves", 0),
            bonus=data.get("bonus", 0),
            bps=data.get("bps", 0),
            influence=_to_float(data.get("influence")),
            creativity=_to_float(data.get("creativity")),
            threat=_to_float(data.get("threat")),
            ict_index=_to_float(data.get("ict_index")),
            expected_goals=_to_float(data.get("expected_goals")),
            expected_assists=_to_float(data.get("expected_assists")),
            expected_goal_involvements=_to_float(data.get("expected_goal_involvements")),
            expected_goals_conceded=_to_float(data.get("expected_goals_conceded")),
            dreamteam_count=data.get("dreamteam_count", 0),
            in_dreamteam=data.get("in_dreamteam", False),
            status=data.get("status", PlayerStatus.AVAILABLE),
            news=data.get("news", ""),
            news_added=_parse_datetime(data.get("news_added")),
            chance_of_playing_this_round=data.get("chance_of_playing_this_round"),
            chance_of_playing_next_round=data.get("chance_of_playing_next_round"),
            penalties_order=data.get("penalties_order"),
            direct_freekicks_order=data.get("direct_freekicks_order"),
            corners_and_indirect_freekicks_order=data.get("corners_and_indirect_freekicks_order"),
            transfers_in=data.get("transfers_in", 0),
            transfers_out=data.get("transfers_out", 0),
            transfers_in_event=data.get("transfers_in_event", 0),
            transfers_out_event=data.get("transfers_out_event", 0),
        )


@dataclass
class Team:
    """A Premier League team."""
    id: int
    code: int
    name: str
    short_name: str
    strength: int
    strength_overall_home: int
    strength_overall_away: int
    strength_attack_home: int
    strength_attack_away: int
    strength_defence_home: int
    strength_defence_away: int
    played: int = 0
    win: int = 0
    draw: int = 0
    loss: int = 0
    points: int = 0
    position: int = 0
    unavailable: bool = False
    pulse_id: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "Team":
        """Create Team from API response data."""
        return cls(
            id=_int(data["id"]),
            code=data.get("code", 0),
            name=_str(data["name"]),
            short_name=_str(data["short_name"]),
            strength=_int(data["strength"]),
            strength_overall_home=_int(data["strength_overall_home"]),
            strength_overall_away=_int(data["strength_overall_away"]),
            strength_attack_home=_int(data["strength_attack_home"]),
            strength_attack_away=_int(data["strength_attack_away"]),
            strength_defence_home=_int(data["strength_defence_home"]),
            strength_defence_away=_int(data["strength_defence_away"]),
            played=data.get("played", 0),
            win=data.get("win", 0),
            draw=data.get("draw", 0),
            loss=data.get("loss", 0),
            points=data.get("points", 0),
            position=data.get("position", 0),
            unavailable=data.get("unavailable", False),
            pulse_id=data.get("pulse_id", 0),
        )


@dataclass
class ChipPlay:
    chip_name: str
    num_played: int

    @classmethod
    def from_api(cls, data: dict) -> "ChipPlay":
        return cls(chip_name=_str(data["chip_name"]), num_played=_int(data["num_played"]))


@dataclass
class TopPlayerInfo:
    id: int
    points: int

    @classmethod
    def from_api(cls, data: dict) -> "TopPlayerInfo":
        return cls(id=_int(data["id"]), points=_int(data["points"]))


@dataclass
class Gameweek:
    """An FPL gameweek ("event") as listed in bootstrap-static."""
    id: int
    name: str
    deadline_time: Optional[datetime]
    deadline_time_epoch: int
    finished: bool
    data_checked: bool
    is_previous: bool
    is_current: bool
    is_next: bool
    average_entry_score: Optional[int]
    highest_score: Optional[int]
    highest_scoring_entry: Optional[int]
    most_selected: Optional[int]
    most_transferred_in: Optional[int]
    most_captained: Optional[int]
    most_vice_captained: Optional[int]
    top_element: Optional[int]
    top_element_info: Optional[TopPlayerInfo]
    transfers_made: int
    chip_plays: list[ChipPlay] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.is_current and not self.finished

    @classmethod
    def from_api(cls, data: dict) -> "Gameweek":
        """Create Gameweek from API response data."""
        top_info = data.get("top_element_info")
        return cls(
            id=_int(data["id"]),
            name=_str(data["name"]),
            deadline_time=_parse_datetime(data.get("deadline_time")),
            deadline_time_epoch=data.get("deadline_time_epoch", 0),
            finished=data.get("finished", False),
            data_checked=data.get("data_checked", False),
            is_previous=data.get("is_previous", False),
            is_current=data.get("is_current", False),
            is_next=data.get("is_next", False),
            average_entry_score=data.get("average_entry_score"),
            highest_score=data.get("highest_score"),
            highest_scoring_entry=data.get("highest_scoring_entry"),
            most_selected=data.get("most_selected"),
            most_transferred_in=data.get("most_transferred_in"),
            most_captained=data.get("most_captained"),
            most_vice_captained=data.get("most_vice_captained"),
            top_element=data.get("top_element"),
            top_element_info=TopPlayerInfo.from_api(top_info) if top_info else None,
            transfers_made=data.get("transfers_made", 0),
            chip_plays=[ChipPlay.from_api(c) for c in _list(data.get("chip_plays", []))],
        )


@dataclass
class GameSettings:
    """Squad, transfer and league rules for the season."""
    squad_squadplay: int
    squad_squadsize: int
    squad_team_limit: int
    squad_total_spend: int
    transfers_cap: int
    transfers_sell_on_fee: float
    league_join_private_max: int
    league_join_public_max: int
    league_points_h2h_win: int
    league_points_h2h_draw: int
    league_points_h2h_lose: int
    league_h2h_tiebreak_stats: list[str]
    sys_vice_captain_enabled: bool
    stats_form_days: int
    timezone: str

    @classmethod
    def from_api(cls, data: dict) -> "GameSettings":
        return cls(
            squad_squadplay=_int(data["squad_squadplay"]),
            squad_squadsize=_int(data["squad_squadsize"]),
            squad_team_limit=_int(data["squad_team_limit"]),
            squad_total_spend=_int(data["squad_total_spend"]),
            transfers_cap=data.get("transfers_cap", 0),
            transfers_sell_on_fee=_to_float(data.get("transfers_sell_on_fee")),
            league_join_private_max=data.get("league_join_private_max", 0),
            league_join_public_max=data.get("league_join_public_max", 0),
            league_points_h2h_win=data.get("league_points_h2h_win", 3),
            league_points_h2h_draw=data.get("league_points_h2h_draw", 1),
            league_points_h2h_lose=data.get("league_points_h2h_lose", 0),
            league_h2h_tiebreak_stats=_list(data.get("league_h2h_tiebreak_stats", [])),
            sys_vice_captain_enabled=data.get("sys_vice_captain_enabled", True),
            stats_form_days=data.get("stats_form_days", 30),
            timezone=data.get("timezone", "UTC"),
        )


@dataclass
class Phase:
    id: int
    name: str
    start_event: int
    stop_event: int

    @classmethod
    def from_api(cls, data: dict) -> "Phase":
        return cls(
            id=_int(data["id"]),
            name=_str(data["name"]),
            start_event=_int(data["start_event"]),
            stop_event=_int(data["stop_event"]),
        )


@dataclass
class PlayerStat:
    """A stat label used across player records (``element_stats``)."""
    label: str
    name: str

    @classmethod
    def from_api(cls, data: dict) -> "PlayerStat":
        return cls(label=_str(data["label"]), name=_str(data["name"]))


@dataclass
class PlayerType:
    """A playing position and its squad limits (``element_types``)."""
    id: int
    singular_name: str
    singular_name_short: str
    plural_name: str
    plural_name_short: str
    squad_select: int
    squad_min_play: int
    squad_max_play: int
    element_count: int

    @classmethod
    def from_api(cls, data: dict) -> "PlayerType":
        return cls(
            id=_int(data["id"]),
            singular_name=_str(data["singular_name"]),
            singular_name_short=_str(data["singular_name_short"]),
            plural_name=data.get("plural_name", ""),
            plural_name_short=data.get("plural_name_short", ""),
            squad_select=_int(data["squad_select"]),
            squad_min_play=_int(data["squad_min_play"]),
            squad_max_play=_int(data["squad_max_play"]),
            element_count=data.get("element_count", 0),
        )


@dataclass
class BootstrapStatic:
    """The full bootstrap-static document."""
    events: list[Gameweek]
    game_settings: GameSettings
    phases: list[Phase]
    teams: list[Team]
    total_players: int
    elements: list[Player]
    element_stats: list[PlayerStat]
    element_types: list[PlayerType]

    @classmethod
    def from_api(cls, data: dict) -> "BootstrapStatic":
        """Create BootstrapStatic from API response data."""
        return cls(
            events=[Gameweek.from_api(e) for e in _list(data["events"])],
            game_settings=GameSettings.from_api(data["game_settings"]),
            phases=[Phase.from_api(p) for p in _list(data.get("phases", []))],
            teams=[Team.from_api(t) for t in _list(data["teams"])],
            total_players=data.get("total_players", 0),
            elements=[Player.from_api(p) for p in _list(data["elements"])],
            element_stats=[PlayerStat.from_api(s) for s in _list(data.get("element_stats", []))],
            element_types=[PlayerType.from_api(t) for t in _list(data.get("element_types", []))],
        )


# =============================================================================
# Fixtures
# =============================================================================

@dataclass
class StatValue:
    """One player's contribution to a fixture stat."""
    value: int
    element: int

    @classmethod
    def from_api(cls, data: dict) -> "StatValue":
        return cls(value=_int(data["value"]), element=_int(data["element"]))


@dataclass
class FixtureStat:
    """A fixture stat (goals, assists, bonus...) split by side."""
    identifier: str
    away: list[StatValue]
    home: list[StatValue]

    @classmethod
    def from_api(cls, data: dict) -> "FixtureStat":
        return cls(
            identifier=_str(data["identifier"]),
            away=[StatValue.from_api(v) for v in _list(data.get("a", []))],
            home=[StatValue.from_api(v) for v in _list(data.get("h", []))],
        )


@dataclass
class Fixture:
    """A Premier League fixture."""
    id: int
    code: int
    event: Optional[int]  # gameweek, None while unscheduled
    team_h: int
    team_a: int
    team_h_difficulty: int
    team_a_difficulty: int
    kickoff_time: Optional[datetime]
    minutes: int
    started: bool
    finished: bool
    finished_provisional: bool
    provisional_start_time: bool
    team_h_score: Optional[int]
    team_a_score: Optional[int]
    pulse_id: int
    stats: list[FixtureStat] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Fixture":
        """Create Fixture from API response data."""
        return cls(
            id=_int(data["id"]),
            code=data.get("code", 0),
            event=data.get("event"),
            team_h=_int(data["team_h"]),
            team_a=_int(data["team_a"]),
            team_h_difficulty=data.get("team_h_difficulty", 3),
            team_a_difficulty=data.get("team_a_difficulty", 3),
            kickoff_time=_parse_datetime(data.get("kickoff_time")),
            minutes=data.get("minutes", 0),
            # "started" is null for fixtures that have not been scheduled yet
            started=bool(data.get("started")),
            finished=data.get("finished", False),
            finished_provisional=data.get("finished_provisional", False),
            provisional_start_time=data.get("provisional_start_time", False),
            team_h_score=data.get("team_h_score"),
            team_a_score=data.get("team_a_score"),
            pulse_id=data.get("pulse_id", 0),
            stats=[FixtureStat.from_api(s) for s in _list(data.get("stats", []))],
        )


# =============================================================================
# Live Gameweek
# =============================================================================

@dataclass
class LiveStats:
    """A player's accumulated stats for one gameweek."""
    minutes: int
    goals_scored: int
    assists: int
    clean_sheets: int
    goals_conceded: int
    own_goals: int
    penalties_saved: int
    penalties_missed: int
    yellow_cards: int
    red_cards: int
    saves: int
    bonus: int
    bps: int
    influence: float
    creativity: float
    threat: float
    ict_index: float
    starts: int
    expected_goals: float
    expected_assists: float
    expected_goal_involvements: float
    expected_goals_conceded: float
    total_points: int
    in_dreamteam: bool

    @classmethod
    def from_api(cls, data: dict) -> "LiveStats":
        return cls(
            minutes=_int(data["minutes"]),
            goals_scored=data.get("goals_scored", 0),
            assists=data.get("assists", 0),
            clean_sheets=data.get("clean_sheets", 0),
            goals_conceded=data.get("goals_conceded", 0),
            own_goals=data.get("own_goals", 0),
            penalties_saved=data.get("penalties_saved", 0),
            penalties_missed=data.get("penalties_missed", 0),
            yellow_cards=data.get("yellow_cards", 0),
            red_cards=data.get("red_cards", 0),
            saves=data.get("saves", 0),
            bonus=data.get("bonus", 0),
            bps=data.get("bps", 0),
            influence=_to_float(data.get("influence")),
            creativity=_to_float(data.get("creativity")),
            threat=_to_float(data.get("threat")),
            ict_index=_to_float(data.get("ict_index")),
            starts=data.get("starts", 0),
            expected_goals=_to_float(data.get("expected_goals")),
            expected_assists=_to_float(data.get("expected_assists")),
            expected_goal_involvements=_to_float(data.get("expected_goal_involvements")),
            expected_goals_conceded=_to_float(data.get("expected_goals_conceded")),
            total_points=_int(data["total_points"]),
            in_dreamteam=data.get("in_dreamteam", False),
        )


@dataclass
class ExplainStat:
    identifier: str
    points: int
    value: int

    @classmethod
    def from_api(cls, data: dict) -> "ExplainStat":
        return cls(
            identifier=_str(data["identifier"]),
            points=_int(data["points"]),
            value=_int(data["value"]),
        )


@dataclass
class LiveExplain:
    """Points breakdown for one fixture."""
    fixture: int
    stats: list[ExplainStat]

    @classmethod
    def from_api(cls, data: dict) -> "LiveExplain":
        return cls(
            fixture=_int(data["fixture"]),
            stats=[ExplainStat.from_api(s) for s in _list(data.get("stats", []))],
        )


@dataclass
class LiveElement:
    id: int
    stats: LiveStats
    explain: list[LiveExplain]

    @classmethod
    def from_api(cls, data: dict) -> "LiveElement":
        return cls(
            id=_int(data["id"]),
            stats=LiveStats.from_api(data["stats"]),
            explain=[LiveExplain.from_api(e) for e in _list(data.get("explain", []))],
        )


@dataclass
class LiveGameweek:
    """Live per-player stats for a gameweek."""
    elements: list[LiveElement]

    def get_element(self, player_id: int) -> Optional[LiveElement]:
        for element in self.elements:
            if element.id == player_id:
                return element
        return None

    @classmethod
    def from_api(cls, data: dict) -> "LiveGameweek":
        return cls(elements=[LiveElement.from_api(e) for e in _list(data["elements"])])


# =============================================================================
# Users
# =============================================================================

@dataclass
class UserClassicLeague:
    """A classic league as it appears in a user's entry."""
    id: int
    name: str
    short_name: Optional[str]
    created: Optional[datetime]
    closed: bool
    league_type: str
    scoring: str
    admin_entry: Optional[int]
    start_event: int
    entry_rank: Optional[int]
    entry_last_rank: Optional[int]

    @classmethod
    def from_api(cls, data: dict) -> "UserClassicLeague":
        return cls(
            id=_int(data["id"]),
            name=_str(data["name"]),
            short_name=data.get("short_name"),
            created=_parse_datetime(data.get("created")),
            closed=data.get("closed", False),
            league_type=data.get("league_type", ""),
            scoring=data.get("scoring", ""),
            admin_entry=data.get("admin_entry"),
            start_event=data.get("start_event", 1),
            entry_rank=data.get("entry_rank"),
            entry_last_rank=data.get("entry_last_rank"),
        )


@dataclass
class UserLeagues:
    """Leagues a user belongs to. Only classic leagues are typed."""
    classic: list[UserClassicLeague]
    h2h: list[dict]
    cup: dict
    cup_matches: list[dict]

    @classmethod
    def from_api(cls, data: dict) -> "UserLeagues":
        return cls(
            classic=[UserClassicLeague.from_api(lg) for lg in _list(data.get("classic", []))],
            h2h=_list(data.get("h2h", [])),
            cup=dict(data.get("cup") or {}),
            cup_matches=_list(data.get("cup_matches", [])),
        )


@dataclass
class User:
    """A manager's entry (``entry/{id}/``)."""
    id: int
    name: str
    player_first_name: str
    player_last_name: str
    player_region_id: Optional[int]
    player_region_name: str
    player_region_iso_code_short: str
    player_region_iso_code_long: str
    joined_time: Optional[datetime]
    started_event: int
    favourite_team: Optional[int]
    summary_overall_points: int
    summary_overall_rank: Optional[int]
    summary_event_points: int
    summary_event_rank: Optional[int]
    current_event: Optional[int]
    name_change_blocked: bool
    last_deadline_bank: Optional[int]
    last_deadline_value: Optional[int]
    last_deadline_total_transfers: int
    leagues: UserLeagues

    @property
    def full_name(self) -> str:
        return f"{self.player_first_name} {self.player_last_name}"

    @classmethod
    def from_api(cls, data: dict) -> "User":
        """Create User from API response data."""
        return cls(
            id=_int(data["id"]),
            name=_str(data["name"]),
            player_first_name=data.get("player_first_name", ""),
            player_last_name=data.get("player_last_name", ""),
            player_region_id=data.get("player_region_id"),
            player_region_name=data.get("player_region_name", ""),
            player_region_iso_code_short=data.get("player_region_iso_code_short", ""),
            player_region_iso_code_long=data.get("player_region_iso_code_long", ""),
            joined_time=_parse_datetime(data.get("joined_time")),
            started_event=data.get("started_event", 1),
            favourite_team=data.get("favourite_team"),
            summary_overall_points=data.get("summary_overall_points", 0),
            summary_overall_rank=data.get("summary_overall_rank"),
            summary_event_points=data.get("summary_event_points", 0),
            summary_event_rank=data.get("summary_event_rank"),
            current_event=data.get("current_event"),
            name_change_blocked=data.get("name_change_blocked", False),
            last_deadline_bank=data.get("last_deadline_bank"),
            last_deadline_value=data.get("last_deadline_value"),
            last_deadline_total_transfers=data.get("last_deadline_total_transfers", 0),
            leagues=UserLeagues.from_api(data.get("leagues") or {}),
        )


@dataclass
class Pick:
    """A player pick in a user's squad."""
    element: int
    position: int  # squad slot, 1-15
    multiplier: int  # 0=benched, 1=playing, 2=captain, 3=triple captain
    is_captain: bool
    is_vice_captain: bool

    @property
    def is_starter(self) -> bool:
        return self.position <= 11

    @classmethod
    def from_api(cls, data: dict) -> "Pick":
        return cls(
            element=_int(data["element"]),
            position=_int(data["position"]),
            multiplier=data.get("multiplier", 1),
            is_captain=data.get("is_captain", False),
            is_vice_captain=data.get("is_vice_captain", False),
        )


@dataclass
class EntryHistory:
    """A user's summary for one gameweek."""
    event: int
    points: int
    total_points: int
    rank: Optional[int]
    rank_sort: Optional[int]
    overall_rank: Optional[int]
    bank: int
    value: int
    event_transfers: int
    event_transfers_cost: int
    points_on_bench: int

    @classmethod
    def from_api(cls, data: dict) -> "EntryHistory":
        return cls(
            event=_int(data["event"]),
            points=_int(data["points"]),
            total_points=_int(data["total_points"]),
            rank=data.get("rank"),
            rank_sort=data.get("rank_sort"),
            overall_rank=data.get("overall_rank"),
            bank=data.get("bank", 0),
            value=data.get("value", 0),
            event_transfers=data.get("event_transfers", 0),
            event_transfers_cost=data.get("event_transfers_cost", 0),
            points_on_bench=data.get("points_on_bench", 0),
        )


@dataclass
class UserPicks:
    """A user's squad for one gameweek."""
    active_chip: Optional[str]
    automatic_subs: list[dict]
    entry_history: EntryHistory
    picks: list[Pick]

    @property
    def captain_id(self) -> Optional[int]:
        for pick in self.picks:
            if pick.is_captain:
                return pick.element
        return None

    @property
    def vice_captain_id(self) -> Optional[int]:
        for pick in self.picks:
            if pick.is_vice_captain:
                return pick.element
        return None

    @property
    def starters(self) -> list[Pick]:
        return [p for p in self.picks if p.is_starter]

    @property
    def bench(self) -> list[Pick]:
        return [p for p in self.picks if not p.is_starter]

    @classmethod
    def from_api(cls, data: dict) -> "UserPicks":
        return cls(
            active_chip=data.get("active_chip"),
            automatic_subs=_list(data.get("automatic_subs", [])),
            entry_history=EntryHistory.from_api(data["entry_history"]),
            picks=[Pick.from_api(p) for p in _list(data["picks"])],
        )


@dataclass
class Transfer:
    """A completed transfer from a user's history."""
    element_in: int
    element_in_cost: int
    element_out: int
    element_out_cost: int
    entry: int
    event: int
    time: Optional[datetime]

    @classmethod
    def from_api(cls, data: dict) -> "Transfer":
        return cls(
            element_in=_int(data["element_in"]),
            element_in_cost=_int(data["element_in_cost"]),
            element_out=_int(data["element_out"]),
            element_out_cost=_int(data["element_out_cost"]),
            entry=_int(data["entry"]),
            event=_int(data["event"]),
            time=_parse_datetime(data.get("time")),
        )


# =============================================================================
# Leagues
# =============================================================================

@dataclass
class League:
    """League metadata from a classic league standings page."""
    id: int
    name: str
    created: Optional[datetime]
    closed: bool
    league_type: str
    scoring: str
    admin_entry: Optional[int]
    start_event: int
    code_privacy: str
    has_cup: bool
    max_entries: Optional[int]

    @classmethod
    def from_api(cls, data: dict) -> "League":
        return cls(
            id=_int(data["id"]),
            name=_str(data["name"]),
            created=_parse_datetime(data.get("created")),
            closed=data.get("closed", False),
            league_type=data.get("league_type", ""),
            scoring=data.get("scoring", ""),
            admin_entry=data.get("admin_entry"),
            start_event=data.get("start_event", 1),
            code_privacy=data.get("code_privacy", ""),
            has_cup=data.get("has_cup", False),
            max_entries=data.get("max_entries"),
        )


@dataclass
class ClassicStanding:
    """One row of a classic league table."""
    id: int
    entry: int
    entry_name: str
    player_name: str
    rank: int
    last_rank: int
    rank_sort: int
    total: int
    event_total: int

    @classmethod
    def from_api(cls, data: dict) -> "ClassicStanding":
        return cls(
            id=_int(data["id"]),
            entry=_int(data["entry"]),
            entry_name=_str(data["entry_name"]),
            player_name=_str(data["player_name"]),
            rank=_int(data["rank"]),
            last_rank=data.get("last_rank", 0),
            rank_sort=data.get("rank_sort", 0),
            total=_int(data["total"]),
            event_total=data.get("event_total", 0),
        )


@dataclass
class Standings:
    has_next: bool
    page: int
    results: list[ClassicStanding]

    @classmethod
    def from_api(cls, data: dict) -> "Standings":
        return cls(
            has_next=data.get("has_next", False),
            page=data.get("page", 1),
            results=[ClassicStanding.from_api(r) for r in _list(data["results"])],
        )


@dataclass
class NewEntries:
    """Entries that joined after the league started; left untyped by the API."""
    has_next: bool
    page: int
    results: list[dict]

    @classmethod
    def from_api(cls, data: dict) -> "NewEntries":
        return cls(
            has_next=data.get("has_next", False),
            page=data.get("page", 1),
            results=_list(data.get("results", [])),
        )


@dataclass
class ClassicLeague:
    """A classic league with its first page of standings."""
    league: League
    standings: Standings
    new_entries: NewEntries
    last_updated_data: Optional[datetime]

    @classmethod
    def from_api(cls, data: dict) -> "ClassicLeague":
        return cls(
            league=League.from_api(data["league"]),
            standings=Standings.from_api(data["standings"]),
            new_entries=NewEntries.from_api(data.get("new_entries") or {}),
            last_updated_data=_parse_datetime(data.get("last_updated_data")),
        )


@dataclass
class H2HMatch:
    """A head-to-head league match between two entries."""
    id: int
    event: int
    league: int
    entry_1_entry: Optional[int]
    entry_1_name: str
    entry_1_player_name: str
    entry_1_points: int
    entry_1_win: int
    entry_1_draw: int
    entry_1_loss: int
    entry_1_total: int
    entry_2_entry: Optional[int]
    entry_2_name: str
    entry_2_player_name: str
    entry_2_points: int
    entry_2_win: int
    entry_2_draw: int
    entry_2_loss: int
    entry_2_total: int
    is_knockout: bool
    is_bye: bool
    knockout_name: str
    winner: Optional[int]

    @classmethod
    def from_api(cls, data: dict) -> "H2HMatch":
        return cls(
            id=_int(data["id"]),
            event=_int(data["event"]),
            league=data.get("league", 0),
            entry_1_entry=data.get("entry_1_entry"),
            entry_1_name=data.get("entry_1_name", ""),
            entry_1_player_name=data.get("entry_1_player_name", ""),
            entry_1_points=data.get("entry_1_points", 0),
            entry_1_win=data.get("entry_1_win", 0),
            entry_1_draw=data.get("entry_1_draw", 0),
            entry_1_loss=data.get("entry_1_loss", 0),
            entry_1_total=data.get("entry_1_total", 0),
            entry_2_entry=data.get("entry_2_entry"),
            entry_2_name=data.get("entry_2_name", ""),
            entry_2_player_name=data.get("entry_2_player_name", ""),
            entry_2_points=data.get("entry_2_points", 0),
            entry_2_win=data.get("entry_2_win", 0),
            entry_2_draw=data.get("entry_2_draw", 0),
            entry_2_loss=data.get("entry_2_loss", 0),
            entry_2_total=data.get("entry_2_total", 0),
            is_knockout=data.get("is_knockout", False),
            is_bye=data.get("is_bye", False),
            knockout_name=data.get("knockout_name", ""),
            winner=data.get("winner"),
        )


@dataclass
class H2HLeague:
    """One page of head-to-head league matches."""
    has_next: bool
    page: int
    results: list[H2HMatch]

    @classmethod
    def from_api(cls, data: dict) -> "H2HLeague":
        return cls(
            has_next=data.get("has_next", False),
            page=data.get("page", 1),
            results=[H2HMatch.from_api(r) for r in _list(data["results"])],
        )
