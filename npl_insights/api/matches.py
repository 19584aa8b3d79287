"""
Match API endpoints - best players, outcomes, toss analysis, venues, season comparison
"""
from fastapi import APIRouter, Depends
from typing import List, Optional

from npl_insights.datasets import get_datasets
from npl_insights.engine.crosstab import (
    average_toss_win_rate,
    overall_win_rate,
    result_trend,
    season_comparison,
    team_outcomes,
    toss_decision_rates,
    venue_performance,
)
from npl_insights.engine.filters import RecordFilter, filter_outcomes, filter_records
from npl_insights.engine.ranking import best_player_per_match
from npl_insights.loaders import DatasetBundle
from npl_insights.api.schemas import (
    ContributionResponse, OutcomesResponse, TeamOutcomeResponse, TossResponse,
    TossDecisionResponse, TossImpactResponse, VenueResponse, SeasonComparisonResponse
)

router = APIRouter(prefix="/matches", tags=["Matches"])


@router.get("/best-players", response_model=List[ContributionResponse])
def get_best_players(
    season: Optional[int] = None,
    team: Optional[str] = None,
    match: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Player of the match for every match in the selection"""
    rows = filter_records(datasets.master, RecordFilter(season=season, team=team, match=match))
    return [ContributionResponse.model_validate(c) for c in best_player_per_match(rows)]


@router.get("/outcomes", response_model=OutcomesResponse)
def get_outcomes(
    season: Optional[int] = None,
    team: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Win/loss/tie counts per team and the result trend of one team"""
    outcomes = filter_outcomes(datasets.match_outcomes, season, team)
    per_team = team_outcomes(outcomes)

    # Without a team selection the trend follows the first team alphabetically
    trend_team = team or next(iter(per_team), None)

    return OutcomesResponse(
        teams=[TeamOutcomeResponse.model_validate(t) for t in per_team.values()],
        wins=sum(o.won for o in outcomes),
        losses=sum(o.lost for o in outcomes),
        ties=sum(o.tied for o in outcomes),
        win_rate=round(overall_win_rate(outcomes), 2),
        trend=result_trend(outcomes, trend_team) if trend_team else [],
    )


@router.get("/toss", response_model=TossResponse)
def get_toss_analysis(
    season: Optional[int] = None,
    team: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    outcomes = filter_outcomes(datasets.match_outcomes, season, team)
    return TossResponse(
        decisions=[TossDecisionResponse.model_validate(r) for r in toss_decision_rates(outcomes).values()],
        impact=[TossImpactResponse.model_validate(t) for t in datasets.toss_impact],
        average_toss_win_rate=average_toss_win_rate(datasets.toss_impact),
    )


@router.get("/venues", response_model=List[VenueResponse])
def get_venues(
    season: Optional[int] = None,
    team: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    outcomes = filter_outcomes(datasets.match_outcomes, season, team)
    return [VenueResponse.model_validate(v) for v in venue_performance(outcomes).values()]


@router.get("/seasons", response_model=List[SeasonComparisonResponse])
def get_season_comparison(
    season_a: int = 1,
    season_b: int = 2,
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Each team's record in two seasons and the change in win rate"""
    comparisons = season_comparison(datasets.match_outcomes, season_a, season_b)
    return [SeasonComparisonResponse.model_validate(c) for c in comparisons]
