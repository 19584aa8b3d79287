"""
Field API endpoints - simulated shot distribution across the twelve zones
"""
from fastapi import APIRouter, Depends
from typing import Optional

from npl_insights.datasets import get_datasets
from npl_insights.engine.filters import RecordFilter, filter_records
from npl_insights.engine.shot_model import shot_distribution
from npl_insights.loaders import DatasetBundle
from npl_insights.api.schemas import ShotDistributionResponse, ZoneResponse

router = APIRouter(prefix="/field", tags=["Field"])


@router.get("/shots", response_model=ShotDistributionResponse)
def get_shot_distribution(
    season: Optional[int] = None,
    team: Optional[str] = None,
    player: Optional[str] = None,
    match: Optional[str] = None,
    datasets: DatasetBundle = Depends(get_datasets),
):
    """Zone allocation for the selection, with the strongest, six and danger zones"""
    rows = filter_records(datasets.master, RecordFilter(season, team, player, match))
    distribution = shot_distribution(rows)

    return ShotDistributionResponse(
        totals=distribution.totals,
        zones=[ZoneResponse.model_validate(z) for z in distribution.zones],
        strongest_zone=ZoneResponse.model_validate(distribution.strongest_zone),
        best_six_zone=ZoneResponse.model_validate(distribution.best_six_zone),
        danger_zone=ZoneResponse.model_validate(distribution.danger_zone),
        unique_players=len({r.player_name for r in rows}),
    )
