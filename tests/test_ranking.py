"""
Tests for leaderboards, player-of-the-match scoring and Pareto contributors.
"""
import pytest

from npl_insights.engine.aggregation import aggregate_players
from npl_insights.engine.filters import RecordFilter
from npl_insights.engine import ranking
from npl_insights.models.records import MatchPlayerRecord


def create_record(player: str, match: str = "M1", team: str = "Pokhara Avengers", **stats):
    """Create a player-match row with zero stats unless given."""
    values = dict(player_name=player, team=team, match_id_unique=match, season=1)
    values.update(stats)
    return MatchPlayerRecord(**values)


def aggregates_from(*records):
    return aggregate_players(records)


class TestLeaderboardOrdering:
    """Ordering is by metric, then player name."""

    def test_top_batsmen_descending(self):
        aggregates = aggregates_from(
            create_record("A", runs_scored=30),
            create_record("B", runs_scored=90),
            create_record("C", runs_scored=60),
        )
        board = ranking.top_batsmen(aggregates)

        assert [e.player_name for e in board] == ["B", "C", "A"]
        assert [e.rank for e in board] == [1, 2, 3]
        assert board[0].value == 90

    def test_equal_values_break_on_name(self):
        aggregates = aggregates_from(
            create_record("Zed", runs_scored=40),
            create_record("Amit", runs_scored=40),
            create_record("Kiran", runs_scored=40),
        )
        board = ranking.top_batsmen(aggregates)
        assert [e.player_name for e in board] == ["Amit", "Kiran", "Zed"]

    def test_same_input_same_order(self):
        aggregates = aggregates_from(
            create_record("A", wickets_taken=2),
            create_record("B", wickets_taken=2),
            create_record("C", wickets_taken=3),
        )
        first = [e.player_name for e in ranking.top_bowlers(aggregates)]
        second = [e.player_name for e in ranking.top_bowlers(aggregates)]
        assert first == second == ["C", "A", "B"]

    def test_limit(self):
        aggregates = aggregates_from(*[create_record(f"P{i}", runs_scored=i + 1) for i in range(20)])
        assert len(ranking.top_batsmen(aggregates, limit=5)) == 5
        assert len(ranking.top_batsmen(aggregates)) == 15


class TestLeaderboardExclusions:
    """Players with nothing to rank on are left off."""

    def test_zero_runs_excluded(self):
        aggregates = aggregates_from(create_record("A", runs_scored=0), create_record("B", runs_scored=1))
        assert [e.player_name for e in ranking.top_batsmen(aggregates)] == ["B"]

    def test_zero_wickets_excluded(self):
        aggregates = aggregates_from(create_record("A", runs_scored=50))
        assert ranking.top_bowlers(aggregates) == []

    def test_zero_sixes_and_fours_excluded(self):
        aggregates = aggregates_from(create_record("A", sixes=0, fours=0), create_record("B", sixes=2, fours=1))
        assert [e.player_name for e in ranking.most_sixes(aggregates)] == ["B"]
        assert [e.player_name for e in ranking.most_fours(aggregates)] == ["B"]

    def test_strike_rate_needs_fifty_balls(self):
        aggregates = aggregates_from(
            create_record("A", runs_scored=20, balls_faced=5),
            create_record("B", runs_scored=60, balls_faced=50),
        )
        board = ranking.best_strike_rate(aggregates)
        assert [e.player_name for e in board] == ["B"]
        assert board[0].value == pytest.approx(120.0)

    def test_economy_ascending_with_ten_overs(self):
        aggregates = aggregates_from(
            create_record("A", overs_bowled=10, runs_conceded=80),
            create_record("B", overs_bowled=12, runs_conceded=72),
            create_record("C", overs_bowled=4, runs_conceded=10),
        )
        board = ranking.best_economy(aggregates)
        assert [e.player_name for e in board] == ["B", "A"]

    def test_consistency_needs_five_matches(self):
        records = [create_record("A", f"M{i}", runs_scored=20) for i in range(5)]
        records += [create_record("B", f"M{i}", runs_scored=90) for i in range(4)]
        board = ranking.most_consistent(aggregate_players(records))

        assert [e.player_name for e in board] == ["A"]
        assert board[0].value == pytest.approx(20.0)


class TestAllRounders:
    """Composite runs + wickets x 25, strictly above 50 runs and 2 wickets."""

    def test_threshold_is_strict(self):
        aggregates = aggregates_from(
            create_record("Included", runs_scored=51, wickets_taken=3),
            create_record("Excluded", runs_scored=50, wickets_taken=3),
            create_record("TooFewWickets", runs_scored=200, wickets_taken=2),
        )
        board = ranking.top_all_rounders(aggregates)

        assert [e.player_name for e in board] == ["Included"]
        assert board[0].value == 51 + 3 * 25

    def test_score(self):
        aggregates = aggregates_from(create_record("A", runs_scored=120, wickets_taken=4))
        assert ranking.all_rounder_score(aggregates["A"]) == 220


class TestMatchContribution:

    def test_points(self):
        r = create_record("A", runs_scored=40, fours=3, sixes=2, wickets_taken=2,
                          overs_bowled=4, economy_rate=5.5, catches=1, run_outs=1)
        c = ranking.match_contribution(r)

        assert c.batting_points == 40 + 3 + 4
        assert c.bowling_points == 2 * 25 + 10
        assert c.fielding_points == 20
        assert c.total_points == 47 + 60 + 20

    def test_no_economy_bonus_without_bowling(self):
        c = ranking.match_contribution(create_record("A", overs_bowled=0, economy_rate=0))
        assert c.bowling_points == 0


class TestBestPlayerPerMatch:

    def test_picks_highest_total(self):
        records = [
            create_record("X", runs_scored=45),
            create_record("Y", runs_scored=60, wickets_taken=1),
        ]
        best = ranking.best_player_per_match(records)

        assert len(best) == 1
        assert best[0].player_name == "Y"
        assert best[0].total_points == 85

    def test_tie_goes_to_name_order(self):
        records = [create_record("Zed", runs_scored=30), create_record("Amit", runs_scored=30)]
        assert ranking.best_player_per_match(records)[0].player_name == "Amit"

    def test_one_entry_per_match_in_first_seen_order(self):
        records = [
            create_record("A", "M2", runs_scored=10),
            create_record("B", "M1", runs_scored=10),
            create_record("C", "M2", runs_scored=50),
        ]
        best = ranking.best_player_per_match(records)
        assert [(c.match_id_unique, c.player_name) for c in best] == [("M2", "C"), ("M1", "B")]

    def test_empty(self):
        assert ranking.best_player_per_match([]) == []


class TestSeasonTopPlayers:

    def test_scoped_to_season(self):
        records = [
            create_record("A", "M1", season=1, runs_scored=80, wickets_taken=1),
            create_record("B", "M2", season=2, runs_scored=100),
        ]
        top = ranking.season_top_players(records, 1)

        assert [e.player_name for e in top["batsmen"]] == ["A"]
        assert [e.player_name for e in top["bowlers"]] == ["A"]


class TestParetoContributors:

    def test_last_entry_reaches_100(self):
        records = [
            create_record("A", runs_scored=50),
            create_record("B", runs_scored=30),
            create_record("C", runs_scored=20),
        ]
        entries = ranking.pareto_contributors(records, "Pokhara Avengers")

        assert [e.player_name for e in entries] == ["A", "B", "C"]
        assert [e.cumulative_pct for e in entries] == [50, 80, 100]
        assert entries[-1].cumulative == 100

    def test_percentages_against_top_n_subset(self):
        records = [create_record(f"P{i}", runs_scored=10) for i in range(4)]
        entries = ranking.pareto_contributors(records, "Pokhara Avengers", top_n=2)

        assert len(entries) == 2
        assert entries[-1].cumulative_pct == 100

    def test_zero_total_gives_zero_percent(self):
        records = [create_record("A"), create_record("B")]
        entries = ranking.pareto_contributors(records, "Pokhara Avengers", metric="sixes")
        assert all(e.cumulative_pct == 0 for e in entries)

    def test_other_teams_and_unknown_metric_ignored(self):
        records = [
            create_record("A", runs_scored=50),
            create_record("B", team="Sudurpaschim Royals", runs_scored=500),
        ]
        assert [e.player_name for e in ranking.pareto_contributors(records, "Pokhara Avengers")] == ["A"]
        assert ranking.pareto_contributors(records, "Pokhara Avengers", metric="economy") == []

    def test_season_filter(self):
        records = [
            create_record("A", "M1", season=1, wickets_taken=3),
            create_record("B", "M2", season=2, wickets_taken=5),
        ]
        entries = ranking.pareto_contributors(
            records, "Pokhara Avengers", metric="wickets", record_filter=RecordFilter(season=2)
        )
        assert [e.player_name for e in entries] == ["B"]
