"""
Models package.

Pydantic models shared by the store, services and views:
- PlayerStats: one player's HUD statistics
- PokerTable / HandHistory: simulated tables and recent hands
- ViewType / TableSize: navigation and table capacity types
"""

from src.models.enums import ViewType, TableSize
from src.models.player_stats import PlayerStats, STAT_FIELDS, PERCENT_FIELDS
from src.models.table import PokerTable, HandHistory, SeatOutOfRangeError

__all__ = [
    'ViewType',
    'TableSize',
    'PlayerStats',
    'STAT_FIELDS',
    'PERCENT_FIELDS',
    'PokerTable',
    'HandHistory',
    'SeatOutOfRangeError',
]
