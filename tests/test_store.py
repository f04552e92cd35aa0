import threading

import pytest

from config.dashboard_config import DashboardConfig
from src.models import PlayerStats, SeatOutOfRangeError, ViewType
from src.services.mock_data import MOCK_PLAYER_NAMES
from src.state import AppState, Store, actions, build_initial_state


def test_dispatch_replaces_state_without_mutating_old(store):
    old = store.state

    new = store.dispatch(actions.assign_seat, 0, 2, "RiverRat")

    assert store.state is new
    assert new.table(0).seats[2] == "RiverRat"
    assert old.table(0).seats[2] is None


def test_failed_action_leaves_state_unchanged(store):
    before = store.state

    with pytest.raises(SeatOutOfRangeError):
        store.dispatch(actions.assign_seat, 0, 6, "RiverRat")

    assert store.state is before


def test_view_change_cancels_view_token(store):
    token = store.view_token()

    store.dispatch(actions.set_view, ViewType.TABLES)

    assert token.cancelled
    assert not store.view_token().cancelled
    assert store.view_token() is not token


def test_same_view_keeps_token(store):
    token = store.view_token()

    store.dispatch(actions.assign_seat, 0, 2, "RiverRat")
    store.dispatch(actions.set_view, ViewType.DASHBOARD)

    assert not token.cancelled
    assert store.view_token() is token


@pytest.mark.parametrize("count", [1, 2, 4])
def test_set_table_count(store, count):
    state = store.dispatch(actions.set_table_count, count)

    assert state.table_count == count
    assert len(state.visible_tables) == count


@pytest.mark.parametrize("count", [0, 3, 5])
def test_invalid_table_count(store, count):
    with pytest.raises(ValueError):
        store.dispatch(actions.set_table_count, count)


def test_set_table_size_resizes_every_table(store):
    state = store.dispatch(actions.set_table_size, 9)

    assert state.table_size == 9
    assert all(table.size == 9 and len(table.seats) == 9 for table in state.active_tables)


def test_invalid_table_size(store):
    with pytest.raises(ValueError):
        store.dispatch(actions.set_table_size, 7)


def test_insights_are_keyed_case_insensitively(store):
    store.dispatch(actions.record_insight, "FishFinder", "Call him down.")

    assert store.state.insights == {"fishfinder": "Call him down."}

    store.dispatch(actions.dismiss_insight, "FISHFINDER")

    assert store.state.insights == {}


def test_listeners_see_old_and_new_state(store):
    seen = []
    unsubscribe = store.subscribe(lambda old, new: seen.append((old.log_analysis, new.log_analysis)))

    store.dispatch(actions.record_log_analysis, "Hero over-folded the river.")
    unsubscribe()
    store.dispatch(actions.record_log_analysis, None)

    assert seen == [(None, "Hero over-folded the river.")]


def test_concurrent_merges_are_serialized(record_factory):
    store = Store(AppState())
    batches = [
        {f"p{t}_{i}": PlayerStats.model_validate(record_factory(f"P{t}_{i}")) for i in range(25)}
        for t in range(8)
    ]

    threads = [
        threading.Thread(target=store.dispatch, args=(actions.merge_players, batch))
        for batch in batches
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.state.player_db) == 8 * 25


def test_initial_state_is_seeded_and_reproducible():
    config = DashboardConfig(mock_seed=42, table_size=9, table_count=2)

    first = build_initial_state(config)
    second = build_initial_state(config)

    assert first.player_db == second.player_db
    assert set(first.player_db) == {name.lower() for name in MOCK_PLAYER_NAMES}
    assert all(stats.is_complete for stats in first.player_db.values())
    assert len(first.active_tables) == 4
    assert [t.name for t in first.active_tables] == ["Table #1024", "Table #1025", "Table #1026", "Table #1027"]
    assert first.active_tables[0].seats[:2] == ("AceMaster99", "FishFinder")
    assert first.table_size == 9 and first.active_tables[0].size == 9
    assert first.table_count == 2
    assert first.is_db_loaded
    assert len(first.recent_hands) == 3
