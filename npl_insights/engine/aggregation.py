"""
Aggregation Engine - groups per-player-per-match rows by player, team or match
"""
from typing import Iterable, Optional, Sequence

from npl_insights.engine.filters import RecordFilter, filter_records
from npl_insights.models.records import MatchPlayerRecord, MatchResult, TeamSummaryRecord
from npl_insights.models.stats import (
    LeagueOverview,
    PlayerAggregate,
    TeamAggregate,
    safe_div,
    win_rate,
)

# (label, lower bound inclusive, upper bound exclusive)
RUN_BUCKETS = [
    ("0-100 runs", 0, 100),
    ("100-200 runs", 100, 200),
    ("200-300 runs", 200, 300),
    ("300-400 runs", 300, 400),
    ("400+ runs", 400, None),
]

RADAR_AXES = [
    ("Runs", "runs"),
    ("Wickets", "wickets"),
    ("Strike Rate", "strike_rate"),
    ("Fielding", "catches"),
    ("Sixes", "sixes"),
    ("Fours", "fours"),
]


def _add_row(agg: PlayerAggregate, r: MatchPlayerRecord) -> None:
    agg.match_ids.add(r.match_id_unique)
    if r.did_bat:
        agg.batted_match_ids.add(r.match_id_unique)

    agg.runs += r.runs_scored
    agg.balls += r.balls_faced
    agg.fours += r.fours
    agg.sixes += r.sixes
    if r.is_out:
        agg.dismissals += 1
        if r.runs_scored == 0:
            agg.ducks += 1
    agg.highest_score = max(agg.highest_score, r.runs_scored)
    if r.runs_scored >= 100:
        agg.hundreds += 1
    elif r.runs_scored >= 50:
        agg.fifties += 1

    agg.overs += r.overs_bowled
    agg.runs_conceded += r.runs_conceded
    agg.wickets += r.wickets_taken
    agg.maidens += r.maidens
    if r.overs_bowled > 0:
        better = (
            agg.best_runs is None
            or r.wickets_taken > agg.best_wickets
            or (r.wickets_taken == agg.best_wickets and r.runs_conceded < agg.best_runs)
        )
        if better:
            agg.best_wickets = r.wickets_taken
            agg.best_runs = r.runs_conceded

    agg.catches += r.catches
    agg.stumpings += r.stumpings
    agg.run_outs += r.run_outs


def aggregate_players(
    records: Iterable[MatchPlayerRecord],
    record_filter: Optional[RecordFilter] = None,
) -> dict[str, PlayerAggregate]:
    """Sum every matching row into one aggregate per player name.

    Matches played is the number of distinct match ids, so a duplicated
    (player, match) row contributes its stats but never an extra match.
    Team and role are taken from the player's first row.
    """
    aggregates: dict[str, PlayerAggregate] = {}
    for r in filter_records(records, record_filter):
        agg = aggregates.get(r.player_name)
        if agg is None:
            agg = PlayerAggregate(player_name=r.player_name, team=r.team, role=r.player_role)
            aggregates[r.player_name] = agg
        _add_row(agg, r)
    return aggregates


def aggregate_teams(
    records: Iterable[MatchPlayerRecord],
    record_filter: Optional[RecordFilter] = None,
    summaries: Optional[Sequence[TeamSummaryRecord]] = None,
) -> dict[str, TeamAggregate]:
    """Per-team totals.

    With ``summaries`` the win/loss/tie record is read from the precomputed
    team summary table; otherwise it is counted from ``match_result``, once per
    distinct match. The two sources are never reconciled.
    """
    teams: dict[str, TeamAggregate] = {}
    results_seen: dict[str, set] = {}

    for r in filter_records(records, record_filter):
        agg = teams.get(r.team)
        if agg is None:
            agg = TeamAggregate(team=r.team)
            teams[r.team] = agg
            results_seen[r.team] = set()
        agg.match_ids.add(r.match_id_unique)
        agg.runs += r.runs_scored
        agg.wickets += r.wickets_taken
        agg.fours += r.fours
        agg.sixes += r.sixes

        if summaries is None and r.match_id_unique not in results_seen[r.team]:
            results_seen[r.team].add(r.match_id_unique)
            if r.match_result == MatchResult.WIN:
                agg.wins += 1
            elif r.match_result == MatchResult.LOSS:
                agg.losses += 1
            elif r.match_result == MatchResult.TIE:
                agg.ties += 1

    if summaries is None:
        for agg in teams.values():
            agg.win_rate = win_rate(agg.wins, agg.wins + agg.losses + agg.ties)
        return teams

    by_team = {s.team: s for s in summaries}
    for agg in teams.values():
        summary = by_team.get(agg.team)
        if summary is None:
            continue
        agg.wins = summary.wins
        agg.losses = summary.losses
        agg.ties = summary.ties
        agg.win_rate = summary.win_rate
        agg.performance = summary.performance
    return teams


def league_overview(records: Sequence[MatchPlayerRecord]) -> LeagueOverview:
    return LeagueOverview(
        total_matches=len({r.match_id_unique for r in records}),
        total_players=len({r.player_name for r in records}),
        total_teams=len({r.team for r in records}),
        total_runs=sum(r.runs_scored for r in records),
        total_wickets=sum(r.wickets_taken for r in records),
        total_fours=sum(r.fours for r in records),
        total_sixes=sum(r.sixes for r in records),
    )


def season_average_score(records: Iterable[MatchPlayerRecord], season: int) -> float:
    """Runs per distinct match in a season (0 for an empty season)"""
    season_rows = [r for r in records if r.season == season]
    matches = {r.match_id_unique for r in season_rows}
    return safe_div(sum(r.runs_scored for r in season_rows), len(matches))


def run_distribution(aggregates: dict[str, PlayerAggregate]) -> list[tuple[str, int]]:
    """How many players fall in each run bucket"""
    counts = []
    for label, low, high in RUN_BUCKETS:
        count = sum(
            1 for p in aggregates.values()
            if p.runs >= low and (high is None or p.runs < high)
        )
        counts.append((label, count))
    return counts


def radar_profile(aggregates: dict[str, PlayerAggregate], player_name: str) -> dict[str, float]:
    """Player's strengths as a percentage of the best value among ``aggregates``.

    An unknown player yields an empty profile.
    """
    player = aggregates.get(player_name)
    if player is None:
        return {}

    profile = {}
    for label, attr in RADAR_AXES:
        best = max((getattr(p, attr) for p in aggregates.values()), default=0)
        profile[label] = min(100.0, safe_div(getattr(player, attr) * 100.0, best))
    return profile
