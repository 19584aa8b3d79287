"""
Team API endpoints - team totals, head-to-head, Pareto contributors
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Dict, List, Optional

from npl_insights.config import settings
from npl_insights.datasets import get_datasets
from npl_insights.engine.aggregation import aggregate_teams
from npl_insights.engine.crosstab import head_to_head
from npl_insights.engine.filters import RecordFilter
from npl_insights.engine.ranking import PARETO_METRICS, pareto_contributors
from npl_insights.loaders import DatasetBundle
from npl_insights.teams import get_team_color, get_team_short_name, performance_band
from npl_insights.api.schemas import TeamStatsResponse, HeadToHeadCell, ParetoEntryResponse

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.get("/stats", response_model=List[TeamStatsResponse])
def get_team_stats(
    season: Optional[int] = None,
    team: Optional[str] = None,
    source: str = Query("summary", pattern="^(summary|rows)$"),
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Team totals; the win/loss record comes from the summary table or the raw rows"""
    summaries = datasets.team_summaries if source == "summary" else None
    teams = aggregate_teams(datasets.master, RecordFilter(season=season, team=team), summaries)

    return [
        TeamStatsResponse(
            team=t.team,
            short_name=get_team_short_name(t.team),
            color=get_team_color(t.team),
            matches=t.matches,
            runs=t.runs,
            wickets=t.wickets,
            fours=t.fours,
            sixes=t.sixes,
            wins=t.wins,
            losses=t.losses,
            ties=t.ties,
            win_rate=round(t.win_rate, 2),
            performance=t.performance or performance_band(t.win_rate),
        )
        for t in sorted(teams.values(), key=lambda t: t.team)
    ]


@router.get("/head-to-head", response_model=Dict[str, Dict[str, HeadToHeadCell]])
def get_head_to_head(datasets: DatasetBundle = Depends(get_datasets)):
    """Nested team -> opposition -> {wins, losses} over all seasons"""
    return head_to_head(datasets.master).as_dict()


@router.get("/head-to-head/{team}/{opposition}", response_model=HeadToHeadCell)
def get_head_to_head_pair(team: str, opposition: str, datasets: DatasetBundle = Depends(get_datasets)):
    record = head_to_head(datasets.master).lookup(team, opposition)
    return HeadToHeadCell(wins=record.wins, losses=record.losses)


@router.get("/{team}/pareto", response_model=List[ParetoEntryResponse])
def get_team_pareto(
    team: str,
    season: Optional[int] = None,
    metric: str = "runs",
    top_n: int = Query(settings.PARETO_TOP_N, ge=1, le=50),
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Top contributors of a team with cumulative share of the top-N total"""
    if metric not in PARETO_METRICS:
        raise HTTPException(status_code=400, detail=f"Unsupported metric '{metric}'")
    entries = pareto_contributors(datasets.master, team, metric, top_n, RecordFilter(season=season))
    return [ParetoEntryResponse.model_validate(e) for e in entries]
