"""
Dashboard enums and types.

Centralizing enums here makes them easy to reuse across the store,
services and views.
"""

from enum import Enum as PyEnum
from typing import Literal

TableSize = Literal[6, 9]


class ViewType(PyEnum):
    """
    Screens reachable from the sidebar.

    Values are stable identifiers (used in config); labels are what the
    sidebar shows.
    """
    DASHBOARD = "DASHBOARD"
    TABLES = "TABLES"
    DATABASE = "DATABASE"
    LOG_ANALYZER = "LOG_ANALYZER"
    SETTINGS = "SETTINGS"

    @property
    def label(self) -> str:
        return _VIEW_LABELS[self]


_VIEW_LABELS = {
    ViewType.DASHBOARD: "Workspace",
    ViewType.TABLES: "Session View",
    ViewType.DATABASE: "Data Registry",
    ViewType.LOG_ANALYZER: "Logic Audit",
    ViewType.SETTINGS: "Preferences",
}
