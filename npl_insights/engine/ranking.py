"""
Ranking & Scoring Engine - leaderboards, match contribution points and Pareto analysis.

Every leaderboard orders by its metric first and by player name ascending
second, so identical input always produces the identical order.
"""
from typing import Callable, Iterable, Optional, Sequence

from npl_insights.engine.aggregation import aggregate_players
from npl_insights.engine.filters import RecordFilter
from npl_insights.models.records import MatchPlayerRecord
from npl_insights.models.stats import (
    LeaderboardEntry,
    ParetoEntry,
    PlayerAggregate,
    PlayerMatchContribution,
)

# Points per event for the player-of-the-match score
BOUNDARY_FOUR_BONUS = 1
BOUNDARY_SIX_BONUS = 2
WICKET_POINTS = 25
ECONOMY_BONUS = 10
ECONOMY_BONUS_THRESHOLD = 6.0
FIELDING_POINTS = 10

# All-rounder composite: runs + wickets * 25, strictly above both thresholds
ALL_ROUNDER_WICKET_WEIGHT = 25
ALL_ROUNDER_MIN_RUNS = 50
ALL_ROUNDER_MIN_WICKETS = 2

MIN_BALLS_FOR_STRIKE_RATE = 50
MIN_OVERS_FOR_ECONOMY = 10
MIN_MATCHES_FOR_CONSISTENCY = 5

PARETO_METRICS = ("runs", "wickets", "fours", "sixes", "catches")


def _leaderboard(
    players: Iterable[PlayerAggregate],
    value: Callable[[PlayerAggregate], float],
    limit: int,
    include: Optional[Callable[[PlayerAggregate], bool]] = None,
    descending: bool = True,
) -> list[LeaderboardEntry]:
    eligible = [p for p in players if include is None or include(p)]
    sign = -1 if descending else 1
    eligible.sort(key=lambda p: (sign * value(p), p.player_name))

    board = []
    for rank, p in enumerate(eligible[:max(limit, 0)], 1):
        board.append(LeaderboardEntry(
            rank=rank,
            player_name=p.player_name,
            team=p.team,
            value=value(p),
            player=p,
        ))
    return board


def top_batsmen(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    """Run scorers with at least one run"""
    return _leaderboard(aggregates.values(), lambda p: p.runs, limit, include=lambda p: p.runs > 0)


def top_bowlers(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    """Wicket takers with at least one wicket"""
    return _leaderboard(aggregates.values(), lambda p: p.wickets, limit, include=lambda p: p.wickets > 0)


def all_rounder_score(player: PlayerAggregate) -> int:
    return player.runs + player.wickets * ALL_ROUNDER_WICKET_WEIGHT


def is_all_rounder(player: PlayerAggregate) -> bool:
    return player.runs > ALL_ROUNDER_MIN_RUNS and player.wickets > ALL_ROUNDER_MIN_WICKETS


def top_all_rounders(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    return _leaderboard(aggregates.values(), all_rounder_score, limit, include=is_all_rounder)


def most_sixes(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    return _leaderboard(aggregates.values(), lambda p: p.sixes, limit, include=lambda p: p.sixes > 0)


def most_fours(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    return _leaderboard(aggregates.values(), lambda p: p.fours, limit, include=lambda p: p.fours > 0)


def best_strike_rate(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    return _leaderboard(
        aggregates.values(), lambda p: p.strike_rate, limit,
        include=lambda p: p.balls >= MIN_BALLS_FOR_STRIKE_RATE,
    )


def best_economy(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    """Lowest economy first, among bowlers with a meaningful workload"""
    return _leaderboard(
        aggregates.values(), lambda p: p.economy, limit,
        include=lambda p: p.overs >= MIN_OVERS_FOR_ECONOMY,
        descending=False,
    )


def most_consistent(aggregates: dict[str, PlayerAggregate], limit: int = 15) -> list[LeaderboardEntry]:
    return _leaderboard(
        aggregates.values(), lambda p: p.batting_average, limit,
        include=lambda p: p.matches >= MIN_MATCHES_FOR_CONSISTENCY,
    )


def match_contribution(r: MatchPlayerRecord) -> PlayerMatchContribution:
    """Score one player's match: batting + bowling + fielding points"""
    batting = r.runs_scored + r.fours * BOUNDARY_FOUR_BONUS + r.sixes * BOUNDARY_SIX_BONUS
    bowling = r.wickets_taken * WICKET_POINTS
    if r.overs_bowled > 0 and r.economy_rate < ECONOMY_BONUS_THRESHOLD:
        bowling += ECONOMY_BONUS
    fielding = (r.catches + r.run_outs + r.stumpings) * FIELDING_POINTS

    return PlayerMatchContribution(
        player_name=r.player_name,
        team=r.team,
        match_id_unique=r.match_id_unique,
        match_date=r.match_date,
        batting_points=batting,
        bowling_points=bowling,
        fielding_points=fielding,
        runs=r.runs_scored,
        wickets=r.wickets_taken,
        catches=r.catches,
    )


def best_player_per_match(records: Iterable[MatchPlayerRecord]) -> list[PlayerMatchContribution]:
    """Highest-scoring row for every match, in first-seen match order.

    Equal totals go to the player whose name sorts first.
    """
    by_match: dict[str, list[PlayerMatchContribution]] = {}
    for r in records:
        by_match.setdefault(r.match_id_unique, []).append(match_contribution(r))

    best = []
    for contributions in by_match.values():
        best.append(min(contributions, key=lambda c: (-c.total_points, c.player_name)))
    return best


def season_top_players(
    records: Sequence[MatchPlayerRecord],
    season: int,
    limit: int = 15,
) -> dict[str, list[LeaderboardEntry]]:
    """Batsmen (by runs) and bowlers (by wickets) for a single season"""
    aggregates = aggregate_players(records, RecordFilter(season=season))
    return {
        "batsmen": _leaderboard(aggregates.values(), lambda p: p.runs, limit),
        "bowlers": top_bowlers(aggregates, limit),
    }


def pareto_contributors(
    records: Iterable[MatchPlayerRecord],
    team: str,
    metric: str = "runs",
    top_n: int = 10,
    record_filter: Optional[RecordFilter] = None,
) -> list[ParetoEntry]:
    """Cumulative contribution of a team's top ``top_n`` players.

    Percentages are relative to the top-``top_n`` total, not the whole team,
    so the last entry always reaches 100.
    """
    if metric not in PARETO_METRICS:
        return []

    base = record_filter or RecordFilter()
    scoped = RecordFilter(season=base.season, team=team, player=base.player, match=base.match)
    aggregates = aggregate_players(records, scoped)

    ranked = sorted(aggregates.values(), key=lambda p: (-getattr(p, metric), p.player_name))[:max(top_n, 0)]
    total = sum(getattr(p, metric) for p in ranked)

    entries = []
    cumulative = 0
    for p in ranked:
        value = getattr(p, metric)
        cumulative += value
        pct = int(cumulative * 100 / total + 0.5) if total else 0
        entries.append(ParetoEntry(
            player_name=p.player_name,
            value=value,
            cumulative=cumulative,
            cumulative_pct=pct,
        ))
    return entries
