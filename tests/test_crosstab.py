"""
Tests for head-to-head, team outcomes, toss and season comparisons.
"""
import pytest

from npl_insights.engine.crosstab import (
    average_toss_win_rate,
    best_team,
    head_to_head,
    overall_win_rate,
    result_trend,
    season_comparison,
    team_outcomes,
    toss_decision_rates,
    toss_decision_win_rate,
    venue_performance,
)
from npl_insights.models.records import MatchOutcomeRecord, MatchPlayerRecord, TossImpactRecord


def create_row(match: str, team: str, opposition: str, result: str, player: str = "P"):
    """Player row carrying the batting team's view of the match."""
    return MatchPlayerRecord(
        player_name=player,
        team=team,
        batting_team=team,
        opposition=opposition,
        match_id_unique=match,
        match_result=result,
    )


def create_outcome(team: str, result: str, season: int = 1, **extra):
    """Team-match outcome row with the won/lost/tied flags set from ``result``."""
    return MatchOutcomeRecord(
        team=team,
        match_result=result,
        season=season,
        won=int(result == "Win"),
        lost=int(result == "Loss"),
        tied=int(result == "Tie"),
        **extra,
    )


class TestHeadToHead:

    def test_absent_pair_is_zero(self):
        matrix = head_to_head([create_row("M1", "A", "B", "Win")])
        rec = matrix.lookup("C", "D")
        assert (rec.wins, rec.losses) == (0, 0)

    def test_first_row_per_match_only(self):
        records = [
            create_row("M1", "A", "B", "Win", player="a1"),
            create_row("M1", "A", "B", "Win", player="a2"),
            create_row("M1", "B", "A", "Loss", player="b1"),
            create_row("M2", "B", "A", "Win", player="b1"),
        ]
        matrix = head_to_head(records)

        assert matrix.lookup("A", "B").wins == 1
        assert matrix.lookup("A", "B").losses == 0
        assert matrix.lookup("B", "A").wins == 1
        assert matrix.lookup("B", "A").losses == 0

    def test_ties_not_counted(self):
        matrix = head_to_head([create_row("M1", "A", "B", "Tie")])
        rec = matrix.lookup("A", "B")
        assert (rec.wins, rec.losses) == (0, 0)

    def test_as_dict(self):
        matrix = head_to_head([create_row("M1", "A", "B", "Loss")])
        assert matrix.as_dict() == {"A": {"B": {"wins": 0, "losses": 1}}}


class TestTeamOutcomes:

    def test_sums_flags_sorted_by_team(self):
        outcomes = [
            create_outcome("Zeta", "Win"),
            create_outcome("Alpha", "Loss"),
            create_outcome("Alpha", "Win"),
            create_outcome("Alpha", "Tie"),
        ]
        result = team_outcomes(outcomes)

        assert list(result) == ["Alpha", "Zeta"]
        assert (result["Alpha"].wins, result["Alpha"].losses, result["Alpha"].ties) == (1, 1, 1)
        assert result["Alpha"].win_rate == pytest.approx(100 / 3)
        assert result["Zeta"].win_rate == pytest.approx(100.0)

    def test_best_team_and_overall_rate(self):
        outcomes = [create_outcome("A", "Win"), create_outcome("B", "Win"), create_outcome("B", "Loss")]
        assert best_team(team_outcomes(outcomes)).team == "A"
        assert best_team({}) is None
        assert overall_win_rate(outcomes) == pytest.approx(200 / 3)
        assert overall_win_rate([]) == 0

    def test_result_trend(self):
        outcomes = [create_outcome("A", "Win"), create_outcome("A", "Tie"), create_outcome("B", "Win"),
                    create_outcome("A", "Loss")]
        assert result_trend(outcomes, "A") == [1.0, 0.5, 0.0]

    def test_scoped_by_season_and_team(self):
        outcomes = [create_outcome("A", "Win", season=1), create_outcome("A", "Loss", season=2),
                    create_outcome("B", "Win", season=1)]

        assert list(team_outcomes(outcomes, season=1)) == ["A", "B"]
        assert team_outcomes(outcomes, season=2, team="A")["A"].losses == 1
        assert team_outcomes(outcomes, team="C") == {}


class TestSeasonComparison:

    def test_improvement(self):
        outcomes = [
            create_outcome("A", "Win", season=1),
            create_outcome("A", "Loss", season=1),
            create_outcome("A", "Win", season=2),
            create_outcome("B", "Loss", season=2),
        ]
        comparisons = {c.team: c for c in season_comparison(outcomes, 1, 2)}

        assert comparisons["A"].season_a_win_rate == pytest.approx(50.0)
        assert comparisons["A"].season_b_win_rate == pytest.approx(100.0)
        assert comparisons["A"].improvement == pytest.approx(50.0)
        assert comparisons["B"].season_a_wins == 0
        assert comparisons["B"].season_a_win_rate == 0


class TestToss:

    def test_decision_rates(self):
        outcomes = [
            create_outcome("A", "Win", toss_decision="bat", toss_won=1),
            create_outcome("B", "Loss", toss_decision="bat", toss_won=0),
            create_outcome("A", "Loss", toss_decision="field", toss_won=1),
            create_outcome("B", "Win", toss_decision="field", toss_won=0),
        ]
        rates = toss_decision_rates(outcomes)

        assert rates["bat"].wins == 1
        assert rates["bat"].total == 2
        assert rates["bat"].win_rate == pytest.approx(50.0)
        assert rates["field"].wins == 0

    def test_decision_never_taken_is_zero(self):
        assert toss_decision_win_rate({}, "bat") == 0

    def test_average_toss_win_rate(self):
        rows = [
            TossImpactRecord(toss_status="Won Toss", win_rate=55.0),
            TossImpactRecord(toss_status="Lost Toss", win_rate=45.0),
        ]
        assert average_toss_win_rate(rows) == pytest.approx(50.0)
        assert average_toss_win_rate([]) == 0


class TestVenues:

    def test_grouped_by_ground_name(self):
        outcomes = [
            create_outcome("A", "Win", venue="TU Ground, Kirtipur"),
            create_outcome("B", "Loss", venue="TU Ground, Kirtipur, Nepal"),
            create_outcome("A", "Tie", venue="Mulpani Stadium"),
        ]
        venues = venue_performance(outcomes)

        assert set(venues) == {"TU Ground", "Mulpani Stadium"}
        assert (venues["TU Ground"].wins, venues["TU Ground"].losses, venues["TU Ground"].total) == (1, 1, 2)
        assert venues["Mulpani Stadium"].total == 1
