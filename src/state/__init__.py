"""
State package - explicit application state.

Usage:
    from src.state import Store, build_initial_state, actions

    store = Store(build_initial_state(config))
    store.dispatch(actions.assign_seat, 0, 2, "RiverRat")
"""

from src.state.app_state import AppState
from src.state.store import Store, build_initial_state, import_players
from src.state import actions

__all__ = [
    "AppState",
    "Store",
    "build_initial_state",
    "import_players",
    "actions",
]
