"""
Screens of the HUD dashboard, one render function per ViewType.
"""

import os
from dataclasses import asdict
from datetime import datetime

import pandas as pd
import streamlit as st

from config.dashboard_config import DashboardConfig
from src.agents import HandLogAgent, InsightAgent
from src.logging import get_logger
from src.models import ViewType
from src.services import RegistryImportError, RegistryImportService, table_averages
from src.services.registry import (
    export_registry,
    registry_to_dataframe,
    search_players,
    stat_coverage,
    total_hands,
)
from src.state import Store, actions, import_players
from src.utils.stat_format import abbreviate_count
from src.utils.timedelta_format import format_timedelta
from streamlit_app.hud import render_table

NAV_KEY = "nav_view"
UPLOAD_KEY = "registry_upload"
FLASH_KEY = "flash_message"

TABLE_COUNT_LABELS = {1: "Single", 2: "Dual", 4: "Quad"}
TABLE_SIZE_LABELS = {6: "6-MAX", 9: "9-MAX"}


def go_to(store: Store, view: ViewType):
    store.dispatch(actions.set_view, view)
    st.session_state[NAV_KEY] = view


def _flash():
    """Show (once) the message left by the last import."""
    message = st.session_state.pop(FLASH_KEY, None)
    if message:
        kind, text = message
        getattr(st, kind)(text)


def _on_upload(store: Store, service: RegistryImportService):
    uploaded = st.session_state.get(UPLOAD_KEY)
    if uploaded is None:
        return
    try:
        result = import_players(store, service, uploaded.getvalue(), filename=uploaded.name)
    except RegistryImportError as e:
        st.session_state[FLASH_KEY] = (
            "error",
            f"Invalid file format. Please upload a valid JSON player database. ({e})",
        )
        return
    st.session_state[FLASH_KEY] = ("success", str(result))


# ─── Workspace ──────────────────────────────────────────────────────

def render_dashboard(store: Store, import_service: RegistryImportService):
    state = store.state

    st.header("🃏 Workspace")
    st.markdown("*Online Tracking Active*")

    upload_col, launch_col = st.columns([3, 1])
    with upload_col:
        st.file_uploader(
            "Import Database",
            type=["json"],
            key=UPLOAD_KEY,
            on_change=_on_upload,
            args=(store, import_service),
        )
    with launch_col:
        st.button("Launch HUD", on_click=go_to, args=(store, ViewType.TABLES), type="primary")

    _flash()

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Player Database", len(state.player_db), help="Verified profiles")
    with col2:
        st.metric("Active Tables", state.table_count, help="In simulation")
    with col3:
        st.metric("Hands Tracked", abbreviate_count(total_hands(state.player_db)), help="Across the registry")
    with col4:
        st.metric("Session Uptime", format_timedelta(datetime.now() - state.started_at))

    st.markdown("---")

    tables_col, hands_col = st.columns(2)
    with tables_col:
        st.subheader("🟢 Live Tables")
        for table in state.active_tables[:2]:
            averages = table_averages(table, state.player_db)
            with st.container(border=True):
                st.markdown(f"**{table.name}** · {table.size}-max")
                st.caption(f"{averages.seated} seated · {averages}")

    with hands_col:
        st.subheader("📋 Recent Hands")
        if state.recent_hands:
            hands_df = pd.DataFrame([hand.model_dump() for hand in state.recent_hands])
            st.dataframe(
                hands_df[["timestamp", "hero", "table", "action", "outcome"]],
                hide_index=True,
                use_container_width=True,
            )
        else:
            st.info("No hands processed yet")


# ─── Session View ───────────────────────────────────────────────────

def _on_table_count(store: Store):
    store.dispatch(actions.set_table_count, st.session_state["table_count"])


def _on_table_size(store: Store):
    store.dispatch(actions.set_table_size, st.session_state["table_size"])


def render_tables(store: Store, insight_agent: InsightAgent):
    state = store.state

    st.header("🎯 Session View")

    count_col, size_col = st.columns(2)
    with count_col:
        counts = list(TABLE_COUNT_LABELS)
        st.radio(
            "Tables",
            counts,
            index=counts.index(state.table_count),
            format_func=TABLE_COUNT_LABELS.get,
            horizontal=True,
            key="table_count",
            on_change=_on_table_count,
            args=(store,),
        )
    with size_col:
        sizes = list(TABLE_SIZE_LABELS)
        st.selectbox(
            "Table size",
            sizes,
            index=sizes.index(state.table_size),
            format_func=TABLE_SIZE_LABELS.get,
            key="table_size",
            on_change=_on_table_size,
            args=(store,),
        )

    st.markdown("---")

    visible = store.state.visible_tables
    per_row = 1 if len(visible) == 1 else 2
    for start in range(0, len(visible), per_row):
        columns = st.columns(per_row)
        for column, table in zip(columns, visible[start:start + per_row]):
            with column:
                render_table(store, insight_agent, table)


# ─── Data Registry ──────────────────────────────────────────────────

def render_registry(store: Store):
    state = store.state

    st.header("🗂️ Registry")
    st.markdown("*Manage and analyze your historical player data.*")

    search_col, export_col = st.columns([3, 1])
    with search_col:
        query = st.text_input("Search", placeholder="Search player name...", label_visibility="collapsed")
    with export_col:
        st.download_button(
            "Export JSON",
            data=export_registry(state.player_db),
            file_name="player_registry.json",
            mime="application/json",
        )

    players = search_players(state.player_db, query)
    if not players:
        st.info("No players match this search")
        return

    st.dataframe(
        registry_to_dataframe(players),
        hide_index=True,
        use_container_width=True,
        column_config={
            "Hands Abbr": st.column_config.NumberColumn("Sample Size", format="%d"),
            "VPIP": st.column_config.NumberColumn("VPIP", format="%.1f%%"),
            "PFR": st.column_config.NumberColumn("PFR", format="%.1f%%"),
            "3Bet Total": st.column_config.NumberColumn("3Bet", format="%.1f%%"),
            "Fold to 3Bet": st.column_config.NumberColumn("Fold to 3Bet", format="%.1f%%"),
            "WWSF": st.column_config.NumberColumn("WWSF", format="%.1f%%"),
            "W$SD": st.column_config.NumberColumn("W\\$SD", format="%.1f%%"),
        },
    )

    coverage = stat_coverage(state.player_db)
    incomplete = {name: count for name, count in coverage.items() if count < len(state.player_db)}
    st.caption(f"{len(players)} of {len(state.player_db)} players shown")
    if incomplete:
        st.caption("Partial stats: " + ", ".join(f"{name} {count}/{len(state.player_db)}" for name, count in incomplete.items()))


# ─── Logic Audit ────────────────────────────────────────────────────

def render_log_analyzer(store: Store, hand_log_agent: HandLogAgent):
    st.header("🧠 HAR Logic Analyzer")
    st.markdown("*Paste your Hand History (HH) or HAR logs to analyze strategic patterns.*")

    input_col, output_col = st.columns(2)
    with input_col:
        hand_log = st.text_area(
            "Input Raw Log",
            height=380,
            placeholder="Paste Hand History here... [PokerStars / GG / Winamax format]",
        )
        if st.button("Analyze Strategic Pattern", disabled=not hand_log.strip(), type="primary"):
            with st.spinner("Processing Logic..."):
                text = hand_log_agent.analyze_hand_log(
                    hand_log,
                    registry=store.state.player_db,
                    cancel_token=store.view_token(),
                )
            if text is not None:
                store.dispatch(actions.record_log_analysis, text)

    with output_col:
        st.subheader("⚡ AI Reasoning Engine")
        analysis = store.state.log_analysis
        if analysis:
            st.markdown(analysis)
        else:
            st.caption("Enter a hand history to receive an automated tactical audit.")


# ─── Preferences ────────────────────────────────────────────────────

def render_settings(config: DashboardConfig):
    st.header("⚙️ Preferences")
    st.info("🚧 Preferences are read from config/dashboard_config.json for now")

    api_key_set = bool(os.getenv("GROK_API_KEY") or os.getenv("XAI_API_KEY"))
    if api_key_set:
        st.success("✅ Grok API key configured")
    else:
        st.warning("⚠️  No GROK_API_KEY set - AI insights will show a fallback message")

    st.subheader("Active configuration")
    st.json(asdict(config))
    st.caption(f"Session log: {get_logger().log_file}")
