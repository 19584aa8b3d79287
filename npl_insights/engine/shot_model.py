"""
Shot-Distribution Model

There is no ball-by-ball trajectory data behind the dashboard, so a batting
total is spread over twelve field zones with fixed weights that follow
typical T20 scoring patterns. The allocation is deterministic: the same rows
always give the same zones.
"""
import math
from typing import Iterable, Optional

from npl_insights.models.records import MatchPlayerRecord
from npl_insights.models.stats import ZoneAllocation

ZONES = (
    "third_man",
    "point",
    "cover",
    "extra_cover",
    "mid_off",
    "long_off",
    "long_on",
    "mid_on",
    "mid_wicket",
    "square_leg",
    "fine_leg",
    "leg_slip",
)

METRICS = ("runs", "fours", "sixes", "dismissals")

RUN_WEIGHTS = {
    "third_man": 0.05,
    "point": 0.08,
    "cover": 0.15,
    "extra_cover": 0.12,
    "mid_off": 0.08,
    "long_off": 0.12,
    "long_on": 0.10,
    "mid_on": 0.08,
    "mid_wicket": 0.10,
    "square_leg": 0.06,
    "fine_leg": 0.04,
    "leg_slip": 0.02,
}

FOUR_WEIGHTS = {
    "third_man": 0.08,
    "point": 0.12,
    "cover": 0.18,
    "extra_cover": 0.10,
    "mid_off": 0.06,
    "long_off": 0.08,
    "long_on": 0.08,
    "mid_on": 0.06,
    "mid_wicket": 0.10,
    "square_leg": 0.08,
    "fine_leg": 0.04,
    "leg_slip": 0.02,
}

# Sixes go straight and over mid-wicket far more than square
SIX_WEIGHTS = {
    "third_man": 0.02,
    "point": 0.02,
    "cover": 0.08,
    "extra_cover": 0.10,
    "mid_off": 0.12,
    "long_off": 0.20,
    "long_on": 0.18,
    "mid_on": 0.10,
    "mid_wicket": 0.12,
    "square_leg": 0.04,
    "fine_leg": 0.02,
    "leg_slip": 0.00,
}

DISMISSAL_WEIGHTS = {
    "third_man": 0.05,
    "point": 0.15,
    "cover": 0.20,
    "extra_cover": 0.12,
    "mid_off": 0.10,
    "long_off": 0.08,
    "long_on": 0.08,
    "mid_on": 0.08,
    "mid_wicket": 0.08,
    "square_leg": 0.04,
    "fine_leg": 0.02,
    "leg_slip": 0.00,
}

WEIGHT_TABLES = {
    "runs": RUN_WEIGHTS,
    "fours": FOUR_WEIGHTS,
    "sixes": SIX_WEIGHTS,
    "dismissals": DISMISSAL_WEIGHTS,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def allocate(total: int, metric: str) -> dict[str, int]:
    """Split ``total`` over the zones with the metric's weight table.

    Each zone is rounded independently, so the zone values may not add back
    up to ``total`` exactly.
    """
    weights = WEIGHT_TABLES[metric]
    return {zone: round_half_up(total * weights[zone]) for zone in ZONES}


class ShotDistribution:
    """Twelve zone allocations plus lookups used for the field insights"""

    def __init__(self, runs: int = 0, fours: int = 0, sixes: int = 0, dismissals: int = 0):
        self.totals = {"runs": runs, "fours": fours, "sixes": sixes, "dismissals": dismissals}
        shares = {metric: allocate(total, metric) for metric, total in self.totals.items()}
        self.zones = [
            ZoneAllocation(
                zone=zone,
                runs=shares["runs"][zone],
                fours=shares["fours"][zone],
                sixes=shares["sixes"][zone],
                dismissals=shares["dismissals"][zone],
            )
            for zone in ZONES
        ]
        self._by_zone = {z.zone: z for z in self.zones}

    def zone(self, name: str) -> Optional[ZoneAllocation]:
        return self._by_zone.get(_normalize_zone(name))

    def value(self, zone: str, metric: str) -> int:
        allocation = self.zone(zone)
        if allocation is None:
            return 0
        return allocation.value(metric)

    def top_zone(self, metric: str) -> ZoneAllocation:
        """Zone with the highest value; ties go to the earlier zone in field order"""
        return max(self.zones, key=lambda z: (z.value(metric), -ZONES.index(z.zone)))

    @property
    def strongest_zone(self) -> ZoneAllocation:
        return self.top_zone("runs")

    @property
    def best_six_zone(self) -> ZoneAllocation:
        return self.top_zone("sixes")

    @property
    def danger_zone(self) -> ZoneAllocation:
        return self.top_zone("dismissals")


def _normalize_zone(name: str) -> str:
    return "_".join(name.strip().lower().split())


def shot_distribution(records: Iterable[MatchPlayerRecord]) -> ShotDistribution:
    runs = fours = sixes = dismissals = 0
    for r in records:
        runs += r.runs_scored
        fours += r.fours
        sixes += r.sixes
        if r.is_out:
            dismissals += 1
    return ShotDistribution(runs=runs, fours=fours, sixes=sixes, dismissals=dismissals)
