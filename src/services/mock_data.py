"""
Mock data for a simulated session.

Generates the starting registry, tables and recent hands. Pass a seeded
random.Random for reproducible sessions (config: mock_seed).
"""

import random
from typing import Dict, List, Optional, Tuple

from src.models import HandHistory, PlayerStats, PokerTable, TableSize

MOCK_PLAYER_NAMES = [
    "AceMaster99", "BluffKing", "RiverRat", "Sharky_P", "FishFinder",
    "Nuts_Only", "AllInAndy", "TiltControl", "PocketRockets", "SlowPlaySam",
    "GTO_Wizard", "StackBuilder", "TheGrinder", "LuckyLuke", "HighRoller"
]

FIRST_TABLE_NUMBER = 1024

# (low, high) inclusive bounds for each generated stat
STAT_RANGES = {
    "VPIP": (10, 49),
    "PFR": (5, 34),
    "3Bet Total": (0, 14),
    "Fold to 3Bet": (20, 79),
    "4Bet PF": (0, 4),
    "Fold to 4Bet+": (0, 49),
    "5Bet+ PF": (0, 4),
    "WWSF": (40, 59),
    "W$SD": (40, 59),
    "Hands Abbr": (0, 9999),
}

# Seats pre-filled on the first table: (seat index, player)
OPENING_SEATS = [(0, "AceMaster99"), (1, "FishFinder")]

RECENT_HANDS = [
    HandHistory(id="h1", timestamp="14:20:01", hero="AceMaster99", table="Table #1024",
                action="All-in Preflop", outcome="+142 BB"),
    HandHistory(id="h2", timestamp="14:22:15", hero="AceMaster99", table="Table #1024",
                action="Fold on River", outcome="-12 BB"),
    HandHistory(id="h3", timestamp="14:25:30", hero="AceMaster99", table="Table #1025",
                action="Check-Raise", outcome="+45 BB"),
]


def generate_mock_stats(name: str, rng: Optional[random.Random] = None) -> PlayerStats:
    """Generate a complete, random stat record for one player."""
    rng = rng or random.Random()
    record = {"Player": name}
    for stat, (low, high) in STAT_RANGES.items():
        record[stat] = str(rng.randint(low, high))
    return PlayerStats.model_validate(record)


def build_mock_registry(
    names: List[str] = MOCK_PLAYER_NAMES,
    rng: Optional[random.Random] = None,
) -> Dict[str, PlayerStats]:
    rng = rng or random.Random()
    registry = {}
    for name in names:
        stats = generate_mock_stats(name, rng)
        registry[stats.key] = stats
    return registry


def build_mock_tables(count: int = 4, size: TableSize = 6) -> Tuple[PokerTable, ...]:
    """Empty tables 'Table #1024'.., with the opening seats filled on the first one."""
    tables = [
        PokerTable.empty(i, f"Table #{FIRST_TABLE_NUMBER + i}", size)
        for i in range(count)
    ]
    if tables:
        for seat_index, name in OPENING_SEATS:
            if seat_index < size:
                tables[0] = tables[0].with_seat(seat_index, name)
    return tuple(tables)


def build_recent_hands() -> Tuple[HandHistory, ...]:
    return tuple(RECENT_HANDS)
