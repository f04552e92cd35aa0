"""
Seat assignment and table layout.

Tables are immutable tuples inside AppState, so every operation here
returns new tables and leaves the ones it was given untouched.
"""

from typing import List, Optional, Sequence, Tuple

from src.models import PokerTable, TableSize
from src.logging import get_logger

# Seat placement around the table oval on a 4x5 grid, clockwise from top
# centre. None marks an empty grid cell (the felt).
_LAYOUTS = {
    6: [
        [None, None, 0, None, None],
        [5, None, None, None, 1],
        [4, None, None, None, 2],
        [None, None, 3, None, None],
    ],
    9: [
        [None, 8, 0, 1, None],
        [7, None, None, None, 2],
        [6, None, None, None, 3],
        [None, 5, None, 4, None],
    ],
}


def normalize_seat_name(name: Optional[str]) -> Optional[str]:
    """Strip a typed-in name; empty or whitespace-only means unassigned."""
    if name is None:
        return None
    name = name.strip()
    return name or None


def assign_seat(
    tables: Sequence[PokerTable],
    table_id: int,
    seat_index: int,
    player_name: Optional[str],
) -> Tuple[PokerTable, ...]:
    """
    Set or clear one seat on the table with the given id.

    Args:
        tables: Current tables
        table_id: Table to change; other tables are returned unchanged
        seat_index: 0-based seat within the table
        player_name: Screen name, or empty/None to clear the seat

    Returns:
        New tuple of tables. Unknown table ids return the tables unchanged.

    Raises:
        SeatOutOfRangeError: If seat_index is outside the table's capacity
    """
    logger = get_logger()
    name = normalize_seat_name(player_name)

    updated = []
    found = False
    for table in tables:
        if table.id == table_id:
            found = True
            table = table.with_seat(seat_index, name)
            logger.seat_assigned(table.name, seat_index, name)
        updated.append(table)

    if not found:
        logger.warning(f"Seat change for unknown table id {table_id} ignored")
    return tuple(updated)


def resize_tables(tables: Sequence[PokerTable], size: TableSize) -> Tuple[PokerTable, ...]:
    """Switch every table between 6-max and 9-max."""
    return tuple(table.resized(size) for table in tables)


def seat_layout(size: TableSize) -> List[List[Optional[int]]]:
    """
    Grid placement of seat indices for rendering a table.

    Every seat index in range(size) appears exactly once.
    """
    if size not in _LAYOUTS:
        raise ValueError(f"No seat layout for {size}-max tables")
    return [list(row) for row in _LAYOUTS[size]]
