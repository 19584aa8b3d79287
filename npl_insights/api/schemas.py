"""
Pydantic schemas for API responses
"""
from pydantic import BaseModel
from typing import Optional


# League Schemas
class FilterOptionsResponse(BaseModel):
    seasons: list[int]
    teams: list[str]
    players: list[str]
    matches: list[str]


class TeamBrief(BaseModel):
    team: str
    short_name: str
    color: str
    win_rate: float


class OverviewResponse(BaseModel):
    total_matches: int
    total_players: int
    total_teams: int
    total_runs: int
    total_wickets: int
    total_fours: int
    total_sixes: int
    best_team: Optional[TeamBrief] = None
    season_average_scores: dict[int, float]
    average_toss_win_rate: float


# Player Schemas
class PlayerAggregateResponse(BaseModel):
    player_name: str
    team: str
    role: str
    matches: int
    innings: int
    runs: int
    balls: int
    fours: int
    sixes: int
    dismissals: int
    highest_score: int
    fifties: int
    hundreds: int
    ducks: int
    strike_rate: float
    batting_average: float
    overs: float
    runs_conceded: int
    wickets: int
    maidens: int
    economy: float
    bowling_average: float
    best_bowling: str
    catches: int
    stumpings: int
    run_outs: int

    class Config:
        from_attributes = True


class LeaderboardEntryResponse(BaseModel):
    rank: int
    player_name: str
    team: str
    team_short_name: str
    value: float
    matches: int
    runs: int
    wickets: int
    strike_rate: float
    economy: float


class LeaderboardsResponse(BaseModel):
    batsmen: list[LeaderboardEntryResponse]
    bowlers: list[LeaderboardEntryResponse]
    all_rounders: list[LeaderboardEntryResponse]
    most_sixes: list[LeaderboardEntryResponse]
    most_fours: list[LeaderboardEntryResponse]
    best_strike_rate: list[LeaderboardEntryResponse]
    best_economy: list[LeaderboardEntryResponse]
    most_consistent: list[LeaderboardEntryResponse]


class RadarAxis(BaseModel):
    subject: str
    player1: float
    player2: float = 0.0
    full_mark: float = 100.0


class RunBucket(BaseModel):
    name: str
    count: int


# Match Schemas
class ContributionResponse(BaseModel):
    player_name: str
    team: str
    match_id_unique: str
    match_date: str
    batting_points: int
    bowling_points: int
    fielding_points: int
    total_points: int
    runs: int
    wickets: int
    catches: int

    class Config:
        from_attributes = True


class TeamOutcomeResponse(BaseModel):
    team: str
    wins: int
    losses: int
    ties: int
    total: int
    win_rate: float

    class Config:
        from_attributes = True


class OutcomesResponse(BaseModel):
    teams: list[TeamOutcomeResponse]
    wins: int
    losses: int
    ties: int
    win_rate: float
    trend: list[float]


class TossDecisionResponse(BaseModel):
    decision: str
    wins: int
    total: int
    win_rate: float

    class Config:
        from_attributes = True


class TossImpactResponse(BaseModel):
    toss_status: str
    total_matches: int
    wins: int
    losses: int
    ties: int
    win_rate: float

    class Config:
        from_attributes = True


class TossResponse(BaseModel):
    decisions: list[TossDecisionResponse]
    impact: list[TossImpactResponse]
    average_toss_win_rate: float


class VenueResponse(BaseModel):
    venue: str
    wins: int
    losses: int
    total: int

    class Config:
        from_attributes = True


class SeasonComparisonResponse(BaseModel):
    team: str
    season_a_wins: int
    season_a_losses: int
    season_a_win_rate: float
    season_b_wins: int
    season_b_losses: int
    season_b_win_rate: float
    improvement: float

    class Config:
        from_attributes = True


# Team Schemas
class TeamStatsResponse(BaseModel):
    team: str
    short_name: str
    color: str
    matches: int
    runs: int
    wickets: int
    fours: int
    sixes: int
    wins: int
    losses: int
    ties: int
    win_rate: float
    performance: str


class HeadToHeadCell(BaseModel):
    wins: int = 0
    losses: int = 0


class ParetoEntryResponse(BaseModel):
    player_name: str
    value: float
    cumulative: float
    cumulative_pct: int

    class Config:
        from_attributes = True


# Field Schemas
class ZoneResponse(BaseModel):
    zone: str
    label: str
    runs: int
    fours: int
    sixes: int
    dismissals: int

    class Config:
        from_attributes = True


class ShotDistributionResponse(BaseModel):
    totals: dict[str, int]
    zones: list[ZoneResponse]
    strongest_zone: ZoneResponse
    best_six_zone: ZoneResponse
    danger_zone: ZoneResponse
    unique_players: int
