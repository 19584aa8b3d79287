"""
Cross-Tabulation Engine - head-to-head, team outcomes, season and toss comparisons
"""
from typing import Iterable, Optional, Sequence, Union

from npl_insights.engine.filters import filter_outcomes
from npl_insights.models.records import (
    MatchOutcomeRecord,
    MatchPlayerRecord,
    MatchResult,
    TossImpactRecord,
)
from npl_insights.models.stats import (
    HeadToHeadRecord,
    SeasonComparison,
    TeamOutcome,
    TossDecisionRate,
    VenueRecord,
    win_rate,
)

EMPTY_HEAD_TO_HEAD = HeadToHeadRecord()


class HeadToHeadMatrix:
    """
    Wins and losses of a team against each opposition.
    Asymmetric: (A, B) and (B, A) are accumulated independently.
    """

    def __init__(self):
        self._cells: dict[str, dict[str, HeadToHeadRecord]] = {}

    def record(self, team: str, opposition: str, result: str) -> None:
        row = self._cells.setdefault(team, {})
        current = row.get(opposition, EMPTY_HEAD_TO_HEAD)
        if result == MatchResult.WIN:
            current = HeadToHeadRecord(wins=current.wins + 1, losses=current.losses)
        elif result == MatchResult.LOSS:
            current = HeadToHeadRecord(wins=current.wins, losses=current.losses + 1)
        row[opposition] = current

    def lookup(self, team: str, opposition: str) -> HeadToHeadRecord:
        return self._cells.get(team, {}).get(opposition, EMPTY_HEAD_TO_HEAD)

    def teams(self) -> list[str]:
        return list(self._cells)

    def oppositions(self, team: str) -> list[str]:
        return list(self._cells.get(team, {}))

    def as_dict(self) -> dict[str, dict[str, dict[str, int]]]:
        return {
            team: {opp: {"wins": rec.wins, "losses": rec.losses} for opp, rec in row.items()}
            for team, row in self._cells.items()
        }


def head_to_head(records: Iterable[MatchPlayerRecord]) -> HeadToHeadMatrix:
    """Build the matrix from the first row seen for each match id.

    Later rows for the same match (e.g. the other team's perspective) are
    ignored. Ties are not counted.
    """
    first_rows: dict[str, MatchPlayerRecord] = {}
    for r in records:
        if r.match_id_unique not in first_rows:
            first_rows[r.match_id_unique] = r

    matrix = HeadToHeadMatrix()
    for r in first_rows.values():
        matrix.record(r.batting_team, r.opposition, r.match_result)
    return matrix


def team_outcomes(
    outcomes: Iterable[MatchOutcomeRecord],
    season: Optional[Union[int, str]] = None,
    team: Optional[str] = None,
) -> dict[str, TeamOutcome]:
    """Sum the won/lost/tied flags per team (teams sorted by name)"""
    result: dict[str, TeamOutcome] = {}
    for o in sorted(filter_outcomes(outcomes, season, team), key=lambda o: o.team):
        outcome = result.setdefault(o.team, TeamOutcome(team=o.team))
        outcome.wins += o.won
        outcome.losses += o.lost
        outcome.ties += o.tied
    return result


def season_comparison(
    outcomes: Sequence[MatchOutcomeRecord],
    season_a: int,
    season_b: int,
) -> list[SeasonComparison]:
    by_season = {
        season: team_outcomes(o for o in outcomes if o.season == season)
        for season in (season_a, season_b)
    }
    teams = sorted(set(by_season[season_a]) | set(by_season[season_b]))

    comparisons = []
    for team in teams:
        a = by_season[season_a].get(team, TeamOutcome(team=team))
        b = by_season[season_b].get(team, TeamOutcome(team=team))
        comparisons.append(SeasonComparison(
            team=team,
            season_a_wins=a.wins,
            season_a_losses=a.losses,
            season_a_win_rate=a.win_rate,
            season_b_wins=b.wins,
            season_b_losses=b.losses,
            season_b_win_rate=b.win_rate,
        ))
    return comparisons


def toss_decision_rates(outcomes: Iterable[MatchOutcomeRecord]) -> dict[str, TossDecisionRate]:
    """Per toss decision: rows seen and wins by the side that won the toss"""
    rates: dict[str, TossDecisionRate] = {}
    for o in outcomes:
        rate = rates.setdefault(o.toss_decision, TossDecisionRate(decision=o.toss_decision))
        rate.total += 1
        if o.toss_won == 1 and o.won == 1:
            rate.wins += 1
    return rates


def toss_decision_win_rate(rates: dict[str, TossDecisionRate], decision: str) -> float:
    """Win rate for a decision, 0 for a decision never taken"""
    rate = rates.get(decision)
    return rate.win_rate if rate is not None else 0.0


def average_toss_win_rate(toss_rows: Sequence[TossImpactRecord]) -> float:
    if not toss_rows:
        return 0.0
    return sum(t.win_rate for t in toss_rows) / len(toss_rows)


def venue_performance(outcomes: Iterable[MatchOutcomeRecord]) -> dict[str, VenueRecord]:
    """Results grouped by ground name (text before the first comma)"""
    venues: dict[str, VenueRecord] = {}
    for o in outcomes:
        name = o.venue.split(",")[0].strip()
        venue = venues.setdefault(name, VenueRecord(venue=name))
        venue.total += 1
        if o.won == 1:
            venue.wins += 1
        if o.lost == 1:
            venue.losses += 1
    return venues


def result_trend(outcomes: Iterable[MatchOutcomeRecord], team: Optional[str] = None) -> list[float]:
    """1 for a win, 0.5 for a tie, 0 otherwise, in match order"""
    trend = []
    for o in outcomes:
        if team is not None and o.team != team:
            continue
        if o.won == 1:
            trend.append(1.0)
        elif o.tied == 1:
            trend.append(0.5)
        else:
            trend.append(0.0)
    return trend


def best_team(outcomes: dict[str, TeamOutcome]) -> Optional[TeamOutcome]:
    if not outcomes:
        return None
    return min(outcomes.values(), key=lambda t: (-t.win_rate, t.team))


def overall_win_rate(outcomes: Sequence[MatchOutcomeRecord]) -> float:
    return win_rate(sum(o.won for o in outcomes), len(outcomes))
