"""
State store for a dashboard session.

The Store owns the current AppState and is the only place it changes:

    store.dispatch(assign_seat, table_id, seat_index, "FishFinder")

Dispatches are serialized with a lock, so two imports finishing at the same
time are merged one after the other and neither update is lost (the last to
complete wins on colliding keys).

The store also hands out a CancellationToken for the active view. Switching
views cancels it; AI responses that arrive under a cancelled token are
dropped instead of being written into the new view's state.
"""

import random
import threading
from typing import Callable, List, Optional

from config.dashboard_config import DashboardConfig
from src.logging import get_logger
from src.models import ViewType
from src.services.mock_data import build_mock_registry, build_mock_tables, build_recent_hands
from src.services.registry_import import ImportResult, RegistryImportService
from src.state.actions import merge_players
from src.state.app_state import AppState
from src.utils.cancellation import CancellationToken

Action = Callable[..., AppState]
Listener = Callable[[AppState, AppState], None]


class Store:
    """
    Serialized container for AppState.

    Usage:
        store = Store(build_initial_state(config))
        store.dispatch(set_view, ViewType.TABLES)
        token = store.view_token()
    """

    def __init__(self, state: AppState):
        self._state = state
        self._lock = threading.RLock()
        self._view_token = CancellationToken(label=state.current_view.value)
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action, *args, **kwargs) -> AppState:
        """
        Apply an action to the current state and store the result.

        If the action raises, the state is left unchanged and the error
        propagates to the caller.
        """
        with self._lock:
            old_state = self._state
            new_state = action(old_state, *args, **kwargs)
            if new_state.current_view != old_state.current_view:
                self._rotate_view_token(old_state.current_view, new_state.current_view)
            self._state = new_state
            listeners = list(self._listeners)

        for listener in listeners:
            listener(old_state, new_state)
        return new_state

    def view_token(self) -> CancellationToken:
        """Token that is cancelled when the current view is left."""
        with self._lock:
            return self._view_token

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a (old_state, new_state) callback; returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _rotate_view_token(self, old_view: ViewType, new_view: ViewType) -> None:
        self._view_token.cancel()
        self._view_token = CancellationToken(label=new_view.value)
        get_logger().view_changed(old_view.label, new_view.label)


def build_initial_state(config: Optional[DashboardConfig] = None) -> AppState:
    """
    Starting state for a new session: mock registry, mock tables, recent hands.
    """
    config = config or DashboardConfig()
    rng = random.Random(config.mock_seed)

    return AppState(
        current_view=ViewType(config.default_view),
        table_count=config.table_count,
        table_size=config.table_size,
        player_db=build_mock_registry(rng=rng),
        active_tables=build_mock_tables(config.mock_table_count, config.table_size),
        is_db_loaded=True,
        recent_hands=build_recent_hands(),
    )


def import_players(store: Store, service: RegistryImportService, raw, filename: str = "") -> ImportResult:
    """
    Parse an uploaded registry file and merge it into the store.

    The file is parsed outside the store lock. A RegistryImportError from
    parsing propagates before anything is dispatched, so a malformed file
    leaves the state as it was.
    """
    result = service.parse(raw, filename=filename)
    store.dispatch(merge_players, result.players)
    return result
