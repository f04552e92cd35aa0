"""
Action handlers.

Every state change in the dashboard goes through one of these functions.
Each takes the current AppState plus arguments and returns a new AppState;
none of them mutate their input.
"""

from typing import Dict, Optional

from config.dashboard_config import TABLE_COUNTS, TABLE_SIZES
from src.models import PlayerStats, TableSize, ViewType
from src.services.registry import merge_registry, registry_key
from src.services.seating import assign_seat as _assign_seat, resize_tables
from src.state.app_state import AppState


def set_view(state: AppState, view: ViewType) -> AppState:
    return state.model_copy(update={"current_view": ViewType(view)})


def set_table_count(state: AppState, count: int) -> AppState:
    """Show 1, 2 or 4 tables (Single / Dual / Quad)."""
    if count not in TABLE_COUNTS:
        raise ValueError(f"table count must be one of {TABLE_COUNTS}, got {count}")
    if count > len(state.active_tables):
        raise ValueError(f"Only {len(state.active_tables)} tables are available")
    return state.model_copy(update={"table_count": count})


def set_table_size(state: AppState, size: TableSize) -> AppState:
    """Switch every table between 6-max and 9-max."""
    if size not in TABLE_SIZES:
        raise ValueError(f"table size must be one of {TABLE_SIZES}, got {size}")
    return state.model_copy(update={
        "table_size": size,
        "active_tables": resize_tables(state.active_tables, size),
    })


def assign_seat(state: AppState, table_id: int, seat_index: int, player_name: Optional[str]) -> AppState:
    """
    Set or clear a seat. Empty names clear it.

    Raises:
        SeatOutOfRangeError: If seat_index is outside the table's capacity
    """
    tables = _assign_seat(state.active_tables, table_id, seat_index, player_name)
    return state.model_copy(update={"active_tables": tables})


def merge_players(state: AppState, players: Dict[str, PlayerStats]) -> AppState:
    """Merge validated import records (last write wins) and mark the registry loaded."""
    return state.model_copy(update={
        "player_db": merge_registry(state.player_db, players),
        "is_db_loaded": True,
    })


def record_insight(state: AppState, player_name: str, text: str) -> AppState:
    insights = dict(state.insights)
    insights[registry_key(player_name)] = text
    return state.model_copy(update={"insights": insights})


def dismiss_insight(state: AppState, player_name: str) -> AppState:
    insights = dict(state.insights)
    insights.pop(registry_key(player_name), None)
    return state.model_copy(update={"insights": insights})


def record_log_analysis(state: AppState, text: Optional[str]) -> AppState:
    return state.model_copy(update={"log_analysis": text})
