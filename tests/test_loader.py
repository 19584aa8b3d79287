"""
Tests for the CSV record loader.
"""
import pytest

from npl_insights.loaders import DatasetLoadError, load_datasets
from npl_insights.loaders.csv_loader import (
    load_master_records,
    load_match_outcomes,
    load_team_summaries,
    load_toss_impact,
)
from npl_insights.loaders.errors import DATASET_NOT_FOUND
from npl_insights.models.records import coerce_float, coerce_int, coerce_text


class TestCoercion:

    def test_numbers(self):
        assert coerce_float("12.5") == 12.5
        assert coerce_float(" 3 ") == 3.0
        assert coerce_float("") == 0.0
        assert coerce_float("abc") == 0.0
        assert coerce_float(None) == 0.0
        assert coerce_float(float("nan")) == 0.0
        assert coerce_int("12.0") == 12
        assert coerce_int(7) == 7

    def test_text(self):
        assert coerce_text(None) == ""
        assert coerce_text(float("nan")) == ""
        assert coerce_text(3.0) == "3"
        assert coerce_text("  Win ") == "Win"


class TestLoadMasterRecords:

    def test_blank_and_junk_numbers_become_zero(self, data_dir):
        records = load_master_records(data_dir / "npl_master.csv")
        by_name = {r.player_name: r for r in records}

        bowler = by_name["Sandeep Lamichhane"]
        assert bowler.runs_scored == 0
        assert bowler.balls_faced == 0
        assert bowler.overs_bowled == 4.0
        assert bowler.wickets_taken == 3

        batter = by_name["Rohit Paudel"]
        assert batter.runs_scored == 0
        assert batter.balls_faced == 12
        assert batter.is_out

    def test_rows_without_player_skipped(self, data_dir):
        records = load_master_records(data_dir / "npl_master.csv")
        assert len(records) == 3
        assert all(r.player_name for r in records)

    def test_text_columns(self, data_dir):
        record = load_master_records(data_dir / "npl_master.csv")[0]
        assert record.venue == "TU Ground, Kirtipur"
        assert record.match_id_unique == "S1M1"
        assert record.season == 1
        assert record.match_result == "Win"


class TestLoadSummaryTables:

    def test_team_summary_columns_renamed(self, data_dir):
        summaries = load_team_summaries(data_dir / "team_performance_summary.csv")

        assert summaries[0].team == "Kathmandu Gorkhas"
        assert summaries[0].wins == 5
        assert summaries[0].win_rate == 62.5
        assert summaries[1].performance == "Poor"

    def test_toss_impact_columns_renamed(self, data_dir):
        rows = load_toss_impact(data_dir / "toss_impact.csv")

        assert [r.toss_status for r in rows] == ["Won Toss", "Lost Toss"]
        assert rows[0].total_matches == 32
        assert rows[1].win_rate == 43.75

    def test_match_outcomes(self, data_dir):
        outcomes = load_match_outcomes(data_dir / "match_level_results.csv")

        assert len(outcomes) == 2
        assert outcomes[0].won == 1
        assert outcomes[0].toss_won == 1
        assert outcomes[1].lost == 1


class TestLoadDatasets:

    def test_bundle(self, data_dir):
        bundle = load_datasets(str(data_dir))

        assert len(bundle.master) == 3
        assert len(bundle.team_summaries) == 2
        assert len(bundle.toss_impact) == 2
        assert len(bundle.match_outcomes) == 2

    def test_missing_file_raises(self, data_dir):
        (data_dir / "toss_impact.csv").unlink()

        with pytest.raises(DatasetLoadError) as exc_info:
            load_datasets(str(data_dir))

        assert exc_info.value.code == DATASET_NOT_FOUND
        assert "toss_impact.csv" in str(exc_info.value)

    def test_empty_file_gives_no_rows(self, tmp_path):
        path = tmp_path / "npl_master.csv"
        path.write_text("")
        assert load_master_records(path) == []
