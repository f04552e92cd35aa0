"""
Streamlit Dashboard for the Poker HUD.

Screens:
- Workspace: import a player database, session metrics, recent hands
- Session View: multi-table seat assignment with per-seat HUDs
- Data Registry: searchable player listing and export
- Logic Audit: AI breakdown of a pasted hand history
- Preferences: active configuration

All state lives in a per-session Store (src/state); this script only renders
it and dispatches actions.

Usage:
    streamlit run streamlit_app/app.py
"""

import streamlit as st

from config.dashboard_config import DashboardConfig
from src import __version__
from src.agents import HandLogAgent, InsightAgent
from src.logging import configure_logger, get_logger
from src.models import ViewType
from src.services import RegistryImportService
from src.state import Store, actions, build_initial_state
from src.utils.run_id import get_run_id
from streamlit_app import views

# Page config
st.set_page_config(
    page_title="ACE HUD",
    page_icon="🃏",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def load_config() -> DashboardConfig:
    config = DashboardConfig.from_file()
    configure_logger(config)
    return config


def get_session() -> Store:
    """Create the per-session store and agents on first run."""
    if "store" not in st.session_state:
        config = load_config()
        store = Store(build_initial_state(config))
        st.session_state["store"] = store
        st.session_state["import_service"] = RegistryImportService(strict=config.strict_import)
        st.session_state["insight_agent"] = InsightAgent(config=config)
        st.session_state["hand_log_agent"] = HandLogAgent(config=config)
        st.session_state[views.NAV_KEY] = store.state.current_view
        get_logger().session_start(
            players=len(store.state.player_db),
            tables=len(store.state.active_tables),
        )
    return st.session_state["store"]


config = load_config()
store = get_session()

# Sidebar
with st.sidebar:
    st.title("🃏 ACE HUD")
    st.caption("Desktop Master")
    st.radio(
        "Navigation",
        list(ViewType),
        format_func=lambda view: view.label,
        key=views.NAV_KEY,
        on_change=lambda: store.dispatch(actions.set_view, st.session_state[views.NAV_KEY]),
    )

    st.markdown("---")
    st.caption(f"ACE HUD v{__version__} • Session {get_run_id()}")

# Main content based on the current view
view = store.state.current_view

if view == ViewType.DASHBOARD:
    views.render_dashboard(store, st.session_state["import_service"])

elif view == ViewType.TABLES:
    views.render_tables(store, st.session_state["insight_agent"])

elif view == ViewType.DATABASE:
    views.render_registry(store)

elif view == ViewType.LOG_ANALYZER:
    views.render_log_analyzer(store, st.session_state["hand_log_agent"])

else:
    views.render_settings(config)

# Footer
st.markdown("---")
st.caption("Built with Streamlit • Powered by Grok")
