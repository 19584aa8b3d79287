"""
Record Loader - reads the league CSV exports into typed records.

All columns are read as text and decoded through the record schemas, which
is the only place numeric strings, blanks and junk are turned into numbers.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Type, TypeVar

import pandas as pd
from pydantic import BaseModel

from npl_insights.config import settings
from npl_insights.loaders.errors import DATASET_NOT_FOUND, DATASET_UNREADABLE, DatasetLoadError
from npl_insights.models.records import (
    MatchOutcomeRecord,
    MatchPlayerRecord,
    TeamSummaryRecord,
    TossImpactRecord,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# CSV header -> record field, for the summary tables exported with spreadsheet headers
TEAM_SUMMARY_COLUMNS = {
    "Win": "wins",
    "Loss": "losses",
    "Tie": "ties",
    "Total": "total",
    "Win_Rate": "win_rate",
    "Performance": "performance",
}

TOSS_IMPACT_COLUMNS = {
    "Toss_Status": "toss_status",
    "Total_Matches": "total_matches",
    "Wins": "wins",
    "Losses": "losses",
    "Ties": "ties",
    "Win_Rate": "win_rate",
}


@dataclass(frozen=True)
class DatasetBundle:
    """Every table the dashboard reads, loaded once per process"""
    master: tuple = field(default_factory=tuple)
    team_summaries: tuple = field(default_factory=tuple)
    toss_impact: tuple = field(default_factory=tuple)
    match_outcomes: tuple = field(default_factory=tuple)


def _read_frame(path) -> pd.DataFrame:
    if isinstance(path, (str, os.PathLike)) and not os.path.exists(path):
        raise DatasetLoadError(DATASET_NOT_FOUND, f"Dataset not found: {path}", {"path": str(path)})
    try:
        return pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise DatasetLoadError(DATASET_UNREADABLE, f"Could not parse {path}: {e}", {"path": str(path)}) from e


def _decode(frame: pd.DataFrame, model: Type[RecordT], columns: Optional[dict] = None) -> list[RecordT]:
    if columns:
        frame = frame.rename(columns=columns)
    frame = frame.rename(columns=lambda c: str(c).strip())
    return [model.model_validate(row) for row in frame.to_dict(orient="records")]


def load_master_records(path) -> list[MatchPlayerRecord]:
    records = _decode(_read_frame(path), MatchPlayerRecord)
    kept = [r for r in records if r.match_id_unique and r.player_name]
    skipped = len(records) - len(kept)
    if skipped:
        logger.warning("Skipped %d master rows without a player or match id in %s", skipped, path)
    logger.info("Loaded %d player-match rows from %s", len(kept), path)
    return kept


def load_team_summaries(path) -> list[TeamSummaryRecord]:
    records = [r for r in _decode(_read_frame(path), TeamSummaryRecord, TEAM_SUMMARY_COLUMNS) if r.team]
    logger.info("Loaded %d team summaries from %s", len(records), path)
    return records


def load_toss_impact(path) -> list[TossImpactRecord]:
    records = [r for r in _decode(_read_frame(path), TossImpactRecord, TOSS_IMPACT_COLUMNS) if r.toss_status]
    logger.info("Loaded %d toss impact rows from %s", len(records), path)
    return records


def load_match_outcomes(path) -> list[MatchOutcomeRecord]:
    records = [r for r in _decode(_read_frame(path), MatchOutcomeRecord) if r.team]
    logger.info("Loaded %d team-match outcomes from %s", len(records), path)
    return records


def load_datasets(data_dir: Optional[str] = None) -> DatasetBundle:
    """Load all four tables from ``data_dir`` (defaults to settings.DATA_DIR)"""
    data_dir = data_dir or settings.DATA_DIR
    return DatasetBundle(
        master=tuple(load_master_records(os.path.join(data_dir, settings.MASTER_FILE))),
        team_summaries=tuple(load_team_summaries(os.path.join(data_dir, settings.TEAM_SUMMARY_FILE))),
        toss_impact=tuple(load_toss_impact(os.path.join(data_dir, settings.TOSS_IMPACT_FILE))),
        match_outcomes=tuple(load_match_outcomes(os.path.join(data_dir, settings.MATCH_RESULTS_FILE))),
    )
