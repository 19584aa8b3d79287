from npl_insights.engine.filters import RecordFilter, filter_records, filter_outcomes
from npl_insights.engine.aggregation import aggregate_players, aggregate_teams, league_overview
from npl_insights.engine.ranking import (
    top_batsmen,
    top_bowlers,
    top_all_rounders,
    best_player_per_match,
    season_top_players,
    pareto_contributors,
)
from npl_insights.engine.crosstab import (
    HeadToHeadMatrix,
    head_to_head,
    team_outcomes,
    season_comparison,
    toss_decision_rates,
    venue_performance,
)
from npl_insights.engine.shot_model import ShotDistribution, shot_distribution

__all__ = [
    "RecordFilter",
    "filter_records",
    "filter_outcomes",
    "aggregate_players",
    "aggregate_teams",
    "league_overview",
    "top_batsmen",
    "top_bowlers",
    "top_all_rounders",
    "best_player_per_match",
    "season_top_players",
    "pareto_contributors",
    "HeadToHeadMatrix",
    "head_to_head",
    "team_outcomes",
    "season_comparison",
    "toss_decision_rates",
    "venue_performance",
    "ShotDistribution",
    "shot_distribution",
]
