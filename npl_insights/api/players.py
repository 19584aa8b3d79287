"""
Player API endpoints - aggregates, leaderboards, radar comparison
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from npl_insights.config import settings
from npl_insights.datasets import get_datasets
from npl_insights.engine.aggregation import aggregate_players, radar_profile, run_distribution
from npl_insights.engine.filters import RecordFilter
from npl_insights.engine import ranking
from npl_insights.loaders import DatasetBundle
from npl_insights.models.stats import LeaderboardEntry
from npl_insights.teams import get_team_short_name
from npl_insights.api.schemas import (
    PlayerAggregateResponse, LeaderboardEntryResponse, LeaderboardsResponse,
    RadarAxis, RunBucket
)

router = APIRouter(prefix="/players", tags=["Players"])


def entry_response(entry: LeaderboardEntry) -> LeaderboardEntryResponse:
    p = entry.player
    return LeaderboardEntryResponse(
        rank=entry.rank,
        player_name=entry.player_name,
        team=entry.team,
        team_short_name=get_team_short_name(entry.team),
        value=entry.value,
        matches=p.matches,
        runs=p.runs,
        wickets=p.wickets,
        strike_rate=round(p.strike_rate, 2),
        economy=round(p.economy, 2),
    )


@router.get("/aggregates", response_model=List[PlayerAggregateResponse])
def get_player_aggregates(
    season: Optional[int] = None,
    team: Optional[str] = None,
    player: Optional[str] = None,
    match: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Per-player totals for the current filter selection"""
    aggregates = aggregate_players(datasets.master, RecordFilter(season, team, player, match))
    return [PlayerAggregateResponse.model_validate(a) for a in aggregates.values()]


@router.get("/leaderboards", response_model=LeaderboardsResponse)
def get_leaderboards(
    season: Optional[int] = None,
    team: Optional[str] = None,
    limit: int = Query(settings.DEFAULT_LEADERBOARD_LIMIT, ge=1, le=100),
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Top batsmen, bowlers, all-rounders and the boundary/rate boards"""
    aggregates = aggregate_players(datasets.master, RecordFilter(season=season, team=team))

    def board(fn):
        return [entry_response(e) for e in fn(aggregates, limit)]

    return LeaderboardsResponse(
        batsmen=board(ranking.top_batsmen),
        bowlers=board(ranking.top_bowlers),
        all_rounders=board(ranking.top_all_rounders),
        most_sixes=board(ranking.most_sixes),
        most_fours=board(ranking.most_fours),
        best_strike_rate=board(ranking.best_strike_rate),
        best_economy=board(ranking.best_economy),
        most_consistent=board(ranking.most_consistent),
    )


@router.get("/radar", response_model=List[RadarAxis])
def get_player_radar(
    player: str,
    compare: Optional[str] = None,
    season: Optional[int] = None,
    team: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Radar axes for one player, optionally against a second player"""
    aggregates = aggregate_players(datasets.master, RecordFilter(season=season, team=team))
    first = radar_profile(aggregates, player)
    second = radar_profile(aggregates, compare) if compare else {}
    return [
        RadarAxis(subject=subject, player1=value, player2=second.get(subject, 0.0))
        for subject, value in first.items()
    ]


@router.get("/run-distribution", response_model=List[RunBucket])
def get_run_distribution(
    season: Optional[int] = None,
    team: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    aggregates = aggregate_players(datasets.master, RecordFilter(season=season, team=team))
    return [RunBucket(name=name, count=count) for name, count in run_distribution(aggregates)]
