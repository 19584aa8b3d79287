"""
Filter selections passed explicitly into the engine
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from npl_insights.models.records import MatchOutcomeRecord, MatchPlayerRecord

ALL = "all"


def _is_open(value) -> bool:
    return value is None or value == ALL or value == ""


@dataclass(frozen=True)
class RecordFilter:
    """Season/team/player/match selection. None (or "all") matches everything."""
    season: Optional[Union[int, str]] = None
    team: Optional[str] = None
    player: Optional[str] = None
    match: Optional[str] = None

    def matches(self, record: MatchPlayerRecord) -> bool:
        if not _is_open(self.season) and record.season != int(self.season):
            return False
        if not _is_open(self.team) and record.team != self.team:
            return False
        if not _is_open(self.player) and record.player_name != self.player:
            return False
        if not _is_open(self.match) and record.match_id_unique != self.match:
            return False
        return True


NO_FILTER = RecordFilter()


def filter_records(
    records: Iterable[MatchPlayerRecord],
    record_filter: Optional[RecordFilter] = None,
) -> list[MatchPlayerRecord]:
    """Rows matching the filter, in input order"""
    record_filter = record_filter or NO_FILTER
    return [r for r in records if record_filter.matches(r)]


def filter_outcomes(
    outcomes: Iterable[MatchOutcomeRecord],
    season: Optional[Union[int, str]] = None,
    team: Optional[str] = None,
) -> list[MatchOutcomeRecord]:
    result = []
    for o in outcomes:
        if not _is_open(season) and o.season != int(season):
            continue
        if not _is_open(team) and o.team != team:
            continue
        result.append(o)
    return result


def unique_teams(records: Iterable[MatchPlayerRecord]) -> list[str]:
    return sorted({r.team for r in records if r.team})


def unique_players(records: Iterable[MatchPlayerRecord]) -> list[str]:
    return sorted({r.player_name for r in records if r.player_name})


def unique_seasons(records: Iterable[MatchPlayerRecord]) -> list[int]:
    return sorted({r.season for r in records})


def unique_matches(records: Iterable[MatchPlayerRecord]) -> list[str]:
    """Distinct match ids in first-seen order"""
    seen = {}
    for r in records:
        if r.match_id_unique not in seen:
            seen[r.match_id_unique] = None
    return list(seen)
