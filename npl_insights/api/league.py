"""
League API endpoints - overview numbers and filter options
"""
from fastapi import APIRouter, Depends

from npl_insights.datasets import get_datasets
from npl_insights.engine.aggregation import league_overview, season_average_score
from npl_insights.engine.crosstab import average_toss_win_rate, best_team, team_outcomes
from npl_insights.engine.filters import unique_matches, unique_players, unique_seasons, unique_teams
from npl_insights.loaders import DatasetBundle
from npl_insights.teams import get_team_color, get_team_short_name
from npl_insights.api.schemas import FilterOptionsResponse, OverviewResponse, TeamBrief

router = APIRouter(tags=["League"])


@router.get("/overview", response_model=OverviewResponse)
def get_overview(datasets: DatasetBundle = Depends(get_datasets)):
    """Headline totals, best team by win rate and per-season average score"""
    overview = league_overview(datasets.master)

    # Summary table first; fall back to counting the per-match outcomes
    if datasets.team_summaries:
        top = min(datasets.team_summaries, key=lambda t: (-t.win_rate, t.team))
    else:
        top = best_team(team_outcomes(datasets.match_outcomes))

    best = None
    if top is not None:
        best = TeamBrief(
            team=top.team,
            short_name=get_team_short_name(top.team),
            color=get_team_color(top.team),
            win_rate=top.win_rate,
        )

    return OverviewResponse(
        total_matches=overview.total_matches,
        total_players=overview.total_players,
        total_teams=overview.total_teams,
        total_runs=overview.total_runs,
        total_wickets=overview.total_wickets,
        total_fours=overview.total_fours,
        total_sixes=overview.total_sixes,
        best_team=best,
        season_average_scores={
            season: round(season_average_score(datasets.master, season), 1)
            for season in unique_seasons(datasets.master)
        },
        average_toss_win_rate=average_toss_win_rate(datasets.toss_impact),
    )


@router.get("/filters", response_model=FilterOptionsResponse)
def get_filter_options(datasets: DatasetBundle = Depends(get_datasets)):
    return FilterOptionsResponse(
        seasons=unique_seasons(datasets.master),
        teams=unique_teams(datasets.master),
        players=unique_players(datasets.master),
        matches=unique_matches(datasets.master),
    )
