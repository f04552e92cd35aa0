from datetime import datetime
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from src.models import HandHistory, PlayerStats, PokerTable, TableSize, ViewType


class AppState(BaseModel):
    """
    Snapshot of everything the dashboard shows.

    Treated as immutable: actions build a new AppState with model_copy.
    """
    model_config = ConfigDict(frozen=True)

    current_view: ViewType = ViewType.DASHBOARD
    table_count: int = 1
    table_size: TableSize = 6
    player_db: Dict[str, PlayerStats] = Field(default_factory=dict)
    active_tables: Tuple[PokerTable, ...] = Field(default_factory=tuple)
    is_db_loaded: bool = False
    recent_hands: Tuple[HandHistory, ...] = Field(default_factory=tuple)
    insights: Dict[str, str] = Field(default_factory=dict, description="Player key -> HUD insight text")
    log_analysis: Optional[str] = None
    started_at: datetime = Field(default_factory=datetime.now)

    @property
    def visible_tables(self) -> Tuple[PokerTable, ...]:
        return self.active_tables[:self.table_count]

    def table(self, table_id: int) -> Optional[PokerTable]:
        return next((t for t in self.active_tables if t.id == table_id), None)
