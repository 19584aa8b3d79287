from npl_insights.models.records import (
    MatchResult,
    MatchPlayerRecord,
    MatchOutcomeRecord,
    TeamSummaryRecord,
    TossImpactRecord,
)
from npl_insights.models.stats import (
    PlayerAggregate,
    TeamAggregate,
    LeagueOverview,
    LeaderboardEntry,
    PlayerMatchContribution,
    ParetoEntry,
    HeadToHeadRecord,
    TeamOutcome,
    SeasonComparison,
    TossDecisionRate,
    VenueRecord,
    ZoneAllocation,
)

__all__ = [
    "MatchResult",
    "MatchPlayerRecord",
    "MatchOutcomeRecord",
    "TeamSummaryRecord",
    "TossImpactRecord",
    "PlayerAggregate",
    "TeamAggregate",
    "LeagueOverview",
    "LeaderboardEntry",
    "PlayerMatchContribution",
    "ParetoEntry",
    "HeadToHeadRecord",
    "TeamOutcome",
    "SeasonComparison",
    "TossDecisionRate",
    "VenueRecord",
    "ZoneAllocation",
]
