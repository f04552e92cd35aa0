"""
Per-table aggregate stats shown in each table header.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from src.models import PlayerStats, PokerTable
from src.services.registry import lookup_player
from src.utils.stat_format import format_percent, to_number


@dataclass
class TableAverages:
    """
    Mean VPIP / PFR over the seated players that have registry records.

    Attributes:
        seated: Number of occupied seats
        tracked: Number of seated players found in the registry
        vpip: Mean VPIP, or None when no tracked player has one
        pfr: Mean PFR, or None when no tracked player has one
    """
    seated: int
    tracked: int
    vpip: Optional[float] = None
    pfr: Optional[float] = None

    def __str__(self) -> str:
        vpip = format_percent(None if self.vpip is None else str(self.vpip))
        pfr = format_percent(None if self.pfr is None else str(self.pfr))
        return f"VPIP: {vpip} | PFR: {pfr}"


def _mean(values) -> Optional[float]:
    values = [v for v in values if v is not None]
    if not values:
        return None
    return round(sum(values) / len(values), 1)


def table_averages(table: PokerTable, registry: Mapping[str, PlayerStats]) -> TableAverages:
    tracked = [
        stats for stats in (lookup_player(registry, name) for name in table.occupied)
        if stats is not None
    ]
    return TableAverages(
        seated=len(table.occupied),
        tracked=len(tracked),
        vpip=_mean(to_number(stats.vpip) for stats in tracked),
        pfr=_mean(to_number(stats.pfr) for stats in tracked),
    )
