"""
Derived statistics produced by the engine
"""
from dataclasses import dataclass, field
from typing import Optional


def safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    if not denominator:
        return default
    return numerator / denominator


def win_rate(wins: int, total: int) -> float:
    """Percentage of wins, 0 when nothing was played"""
    return safe_div(wins * 100.0, total)


@dataclass
class PlayerAggregate:
    """Season/team scoped totals for one player.

    ``match_ids`` holds distinct match identifiers so a duplicated row for the
    same match adds its stats without adding a match.
    """
    player_name: str
    team: str = ""
    role: str = ""
    match_ids: set = field(default_factory=set)
    batted_match_ids: set = field(default_factory=set)

    # Batting
    runs: int = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0
    dismissals: int = 0
    highest_score: int = 0
    fifties: int = 0
    hundreds: int = 0
    ducks: int = 0

    # Bowling
    overs: float = 0.0
    runs_conceded: int = 0
    wickets: int = 0
    maidens: int = 0
    best_wickets: int = 0
    best_runs: Optional[int] = None

    # Fielding
    catches: int = 0
    stumpings: int = 0
    run_outs: int = 0

    @property
    def matches(self) -> int:
        return len(self.match_ids)

    @property
    def innings(self) -> int:
        return len(self.batted_match_ids)

    @property
    def strike_rate(self) -> float:
        return safe_div(self.runs * 100.0, self.balls)

    @property
    def economy(self) -> float:
        return safe_div(self.runs_conceded, self.overs)

    @property
    def batting_average(self) -> float:
        return safe_div(self.runs, self.matches)

    @property
    def bowling_average(self) -> float:
        return safe_div(self.runs_conceded, self.wickets)

    @property
    def fielding_dismissals(self) -> int:
        return self.catches + self.stumpings + self.run_outs

    @property
    def best_bowling(self) -> str:
        if self.best_runs is None:
            return "-"
        return f"{self.best_wickets}/{self.best_runs}"


@dataclass
class TeamAggregate:
    """Team totals plus a win/loss/tie record"""
    team: str
    match_ids: set = field(default_factory=set)
    runs: int = 0
    wickets: int = 0
    fours: int = 0
    sixes: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    win_rate: float = 0.0
    performance: str = ""

    @property
    def matches(self) -> int:
        return len(self.match_ids)


@dataclass
class LeagueOverview:
    total_matches: int = 0
    total_players: int = 0
    total_teams: int = 0
    total_runs: int = 0
    total_wickets: int = 0
    total_fours: int = 0
    total_sixes: int = 0


@dataclass
class LeaderboardEntry:
    """One ranked row; ``value`` is the metric the board is ordered by"""
    rank: int
    player_name: str
    team: str
    value: float
    player: PlayerAggregate


@dataclass
class PlayerMatchContribution:
    """Fantasy-style points for one player in one match"""
    player_name: str
    team: str
    match_id_unique: str
    match_date: str
    batting_points: int
    bowling_points: int
    fielding_points: int
    runs: int
    wickets: int
    catches: int

    @property
    def total_points(self) -> int:
        return self.batting_points + self.bowling_points + self.fielding_points


@dataclass
class ParetoEntry:
    player_name: str
    value: float
    cumulative: float
    cumulative_pct: int


@dataclass(frozen=True)
class HeadToHeadRecord:
    wins: int = 0
    losses: int = 0


@dataclass
class TeamOutcome:
    team: str
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_rate(self) -> float:
        return win_rate(self.wins, self.total)


@dataclass
class SeasonComparison:
    team: str
    season_a_wins: int = 0
    season_a_losses: int = 0
    season_a_win_rate: float = 0.0
    season_b_wins: int = 0
    season_b_losses: int = 0
    season_b_win_rate: float = 0.0

    @property
    def improvement(self) -> float:
        return self.season_b_win_rate - self.season_a_win_rate


@dataclass
class TossDecisionRate:
    decision: str
    wins: int = 0
    total: int = 0

    @property
    def win_rate(self) -> float:
        return win_rate(self.wins, self.total)


@dataclass
class VenueRecord:
    venue: str
    wins: int = 0
    losses: int = 0
    total: int = 0


@dataclass(frozen=True)
class ZoneAllocation:
    """Synthetic share of a batting total attributed to one field zone"""
    zone: str
    runs: int = 0
    fours: int = 0
    sixes: int = 0
    dismissals: int = 0

    def value(self, metric: str) -> int:
        return getattr(self, metric, 0) if metric in ("runs", "fours", "sixes", "dismissals") else 0

    @property
    def label(self) -> str:
        return self.zone.replace("_", " ").title()
