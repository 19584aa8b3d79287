"""
Typed input records decoded from the league CSV exports.

Every numeric column goes through the same lenient coercion: native numbers
pass through, numeric strings are parsed, and anything missing or
unparseable becomes 0. Text columns become "" when missing.
"""
import enum
import math
from typing import Any

from pydantic import BaseModel, field_validator


class MatchResult(str, enum.Enum):
    WIN = "Win"
    LOSS = "Loss"
    TIE = "Tie"


def coerce_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def coerce_int(value: Any, default: int = 0) -> int:
    # "12.0" and 12.0 both arrive from spreadsheets
    return int(coerce_float(value, float(default)))


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


class _Record(BaseModel):
    """Base for immutable dataset rows"""

    class Config:
        frozen = True
        extra = "ignore"


class MatchPlayerRecord(_Record):
    """One row per player per match (master dataset)"""
    player_name: str = ""
    team: str = ""
    player_role: str = ""
    season: int = 0
    match_id: int = 0
    match_id_unique: str = ""
    match_date: str = ""
    venue: str = ""

    # Batting
    runs_scored: int = 0
    balls_faced: int = 0
    fours: int = 0
    sixes: int = 0
    strike_rate: float = 0.0
    out_status: str = ""
    dismissal_type: str = ""

    # Bowling
    overs_bowled: float = 0.0
    runs_conceded: int = 0
    wickets_taken: int = 0
    maidens: int = 0
    economy_rate: float = 0.0

    # Fielding
    catches: int = 0
    run_outs: int = 0
    stumpings: int = 0

    # Match context (from the batting team's perspective)
    batting_team: str = ""
    opposition: str = ""
    match_result: str = ""
    toss_winner: str = ""
    toss_decision: str = ""

    @field_validator(
        "season", "match_id", "runs_scored", "balls_faced", "fours", "sixes",
        "runs_conceded", "wickets_taken", "maidens", "catches", "run_outs", "stumpings",
        mode="before",
    )
    @classmethod
    def _int_fields(cls, v):
        return coerce_int(v)

    @field_validator("strike_rate", "overs_bowled", "economy_rate", mode="before")
    @classmethod
    def _float_fields(cls, v):
        return coerce_float(v)

    @field_validator(
        "player_name", "team", "player_role", "match_id_unique", "match_date", "venue",
        "out_status", "dismissal_type", "batting_team", "opposition", "match_result",
        "toss_winner", "toss_decision",
        mode="before",
    )
    @classmethod
    def _text_fields(cls, v):
        return coerce_text(v)

    @property
    def is_out(self) -> bool:
        return self.out_status.lower() == "yes"

    @property
    def did_bat(self) -> bool:
        return self.balls_faced > 0 or self.is_out


class MatchOutcomeRecord(_Record):
    """One row per team per match (match_level_results)"""
    match_id_unique: str = ""
    team: str = ""
    opposition: str = ""
    match_result: str = ""
    match_date: str = ""
    venue: str = ""
    season: int = 0
    toss_winner: str = ""
    toss_decision: str = ""
    won: int = 0
    lost: int = 0
    tied: int = 0
    toss_won: int = 0

    @field_validator("season", "won", "lost", "tied", "toss_won", mode="before")
    @classmethod
    def _int_fields(cls, v):
        return coerce_int(v)

    @field_validator(
        "match_id_unique", "team", "opposition", "match_result", "match_date", "venue",
        "toss_winner", "toss_decision",
        mode="before",
    )
    @classmethod
    def _text_fields(cls, v):
        return coerce_text(v)


class TeamSummaryRecord(_Record):
    """Precomputed win/loss/tie summary per team"""
    team: str = ""
    wins: int = 0
    losses: int = 0
    ties: int = 0
    total: int = 0
    win_rate: float = 0.0
    performance: str = ""

    @field_validator("wins", "losses", "ties", "total", mode="before")
    @classmethod
    def _int_fields(cls, v):
        return coerce_int(v)

    @field_validator("win_rate", mode="before")
    @classmethod
    def _float_fields(cls, v):
        return coerce_float(v)

    @field_validator("team", "performance", mode="before")
    @classmethod
    def _text_fields(cls, v):
        return coerce_text(v)


class TossImpactRecord(_Record):
    """Win rate grouped by toss outcome ("Won Toss" / "Lost Toss")"""
    toss_status: str = ""
    total_matches: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    win_rate: float = 0.0

    @field_validator("total_matches", "wins", "losses", "ties", mode="before")
    @classmethod
    def _int_fields(cls, v):
        return coerce_int(v)

    @field_validator("win_rate", mode="before")
    @classmethod
    def _float_fields(cls, v):
        return coerce_float(v)

    @field_validator("toss_status", mode="before")
    @classmethod
    def _text_fields(cls, v):
        return coerce_text(v)
