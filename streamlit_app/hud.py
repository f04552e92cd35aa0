"""
Seat and HUD widgets for the Session View.
"""

import streamlit as st

from src.agents import InsightAgent
from src.models import PlayerStats, PokerTable
from src.services.registry import lookup_player
from src.services.seating import seat_layout
from src.services.table_stats import table_averages
from src.state import Store, actions
from src.utils.stat_format import MISSING

# HUD cell colours (Streamlit markdown colour names), keyed by export name
HUD_COLORS = {
    "VPIP": "gray",
    "PFR": "gray",
    "3Bet Total": "orange",
    "Fold to 3Bet": "green",
    "WWSF": "blue",
    "W$SD": "blue",
}

# (label, export name) pairs, two per HUD row
HUD_ROWS = [
    (("VPIP", "VPIP"), ("PFR", "PFR")),
    (("3B", "3Bet Total"), ("F3B", "Fold to 3Bet")),
    (("WWSF", "WWSF"), ("W$SD", "W$SD")),
]


def _cell(label: str, stats: PlayerStats, stat: str) -> str:
    value = stats.stat(stat) or MISSING
    # "$" would start LaTeX in Streamlit markdown
    label = label.replace("$", "\\$")
    return f"{label}: :{HUD_COLORS[stat]}[**{value}**]"


def render_hud(store: Store, agent: InsightAgent, table: PokerTable, seat_index: int, stats: PlayerStats):
    """Compact stat overlay for a seated player, with AI insight and clear buttons."""
    with st.container(border=True):
        st.markdown(f"**{stats.player.upper()}** · {stats.hands or MISSING}h")
        for left, right in HUD_ROWS:
            st.markdown(f"{_cell(*left, stats)} &nbsp; {_cell(*right, stats)}")

        ai_col, clear_col = st.columns(2)
        with ai_col:
            if st.button("AI", key=f"ai_{table.id}_{seat_index}", help="AI Analysis"):
                with st.spinner("..."):
                    text = agent.analyze_player(stats, cancel_token=store.view_token())
                if text is not None:
                    store.dispatch(actions.record_insight, stats.player, text)
        with clear_col:
            st.button(
                "Clear",
                key=f"clear_{table.id}_{seat_index}",
                on_click=store.dispatch,
                args=(actions.assign_seat, table.id, seat_index, None),
            )

        insight = store.state.insights.get(stats.key)
        if insight:
            st.caption(f"*{insight}*")
            st.button(
                "dismiss",
                key=f"dismiss_{table.id}_{seat_index}",
                on_click=store.dispatch,
                args=(actions.dismiss_insight, stats.player),
            )


def _on_seat_input(store: Store, table_id: int, seat_index: int, widget_key: str):
    store.dispatch(actions.assign_seat, table_id, seat_index, st.session_state.get(widget_key, ""))


def render_empty_seat(store: Store, table: PokerTable, seat_index: int):
    """Placeholder seat with an input to assign a player (Enter or blur submits)."""
    with st.container(border=True):
        st.caption(f"Seat {seat_index + 1}")
        unknown = table.seats[seat_index]
        if unknown:
            st.caption(f"{unknown} (not in registry)")
        widget_key = f"seat_{table.id}_{table.size}_{seat_index}"
        st.text_input(
            "Assign Player",
            key=widget_key,
            placeholder="Assign Player...",
            label_visibility="collapsed",
            on_change=_on_seat_input,
            args=(store, table.id, seat_index, widget_key),
        )


def render_table(store: Store, agent: InsightAgent, table: PokerTable):
    """One table: header with averages, then the seats laid out around the felt."""
    state = store.state
    averages = table_averages(table, state.player_db)

    st.subheader(table.name)
    st.caption(f"{averages} · {averages.seated}/{table.size} seated")

    for row in seat_layout(table.size):
        columns = st.columns(len(row))
        for column, seat_index in zip(columns, row):
            if seat_index is None:
                continue
            with column:
                stats = lookup_player(state.player_db, table.seats[seat_index])
                if stats is not None:
                    render_hud(store, agent, table, seat_index, stats)
                else:
                    render_empty_seat(store, table, seat_index)
