import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from config.dashboard_config import DashboardConfig
from src.utils.run_id import get_run_id
from src.utils.timedelta_format import format_timedelta

if TYPE_CHECKING:
    from src.models import PlayerStats
    from src.services.registry_import import ImportResult

_logger_instance: Optional['DashboardLogger'] = None

def get_logger() -> 'DashboardLogger':
    """Get the global logger instance. Creates one if needed."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DashboardLogger()
    return _logger_instance


def configure_logger(config: DashboardConfig) -> 'DashboardLogger':
    """
    Point the global logger at the config the app loaded.

    Rebuilds the instance only when its config differs, so repeated calls
    with an equal config keep the same log file.
    """
    global _logger_instance
    if _logger_instance is None or _logger_instance.config != config:
        _logger_instance = DashboardLogger(config)
    return _logger_instance


class DashboardLogger:
    """Session logger. Reads config/dashboard_config.json unless given a config."""

    def __init__(self, config: Optional[DashboardConfig] = None):
        self.run_id = get_run_id()
        self.config = config or DashboardConfig.from_file()

        self.logger = logging.getLogger(f"hud.{self.run_id}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        self.logger.propagate = False

        # File handler - always logs everything the config allows
        log_dir = Path(self.config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = log_dir / f"{self.run_id}.log"
        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        if self.config.verbose:
            file_handler.setLevel(logging.DEBUG)
        else:
            file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter('%(asctime)s %(message)s'))
        self.logger.addHandler(file_handler)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(console_handler)

        self.imports_count: int = 0
        self.players_imported: int = 0
        self.insights_requested: int = 0
        self.insights_failed: int = 0
        self.start_time: datetime = None

    # ─── Semantic Methods (delegate to self.logger) ────────────────

    def info(self, msg: str):
        """General info message (INFO level)."""
        self.logger.info(msg)

    def debug(self, msg: str):
        """Debug message (DEBUG level)."""
        self.logger.debug(msg)

    def warning(self, msg: str):
        """Warning message (WARNING level)."""
        self.logger.warning(f"⚠️  {msg}")

    def error(self, msg: str):
        """Error message (ERROR level)."""
        self.logger.error(f"❌ {msg}")

    def success(self, msg: str):
        """Success message (INFO level)."""
        self.logger.info(f"✅ {msg}")

    def section(self, title: str):
        """Section header with dividers."""
        self.logger.info(f"\n{'='*60}")
        self.logger.info(title)
        self.logger.info(f"{'='*60}\n")

    def subsection(self, title: str):
        """Subsection header with smaller dividers."""
        self.logger.info(f"\n{'─'*60}")
        self.logger.info(title)
        self.logger.info(f"{'─'*60}\n")

    def detail(self, msg: str):
        """Indented detail message."""
        self.logger.info(f"   {msg}")

    def debug_json(self, title: str, data: dict):
        """Debug JSON block (DEBUG level)."""
        self.logger.debug(f"\n{'='*70}")
        self.logger.debug(f"🔍 DEBUG: {title}")
        self.logger.debug(f"{'='*70}")
        self.logger.debug(json.dumps(data, indent=2, default=str))
        self.logger.debug(f"{'='*70}\n")

    # ─── Session ───────────────────────────────────────────────────

    def session_start(self, players: int, tables: int):
        """Log the start of a dashboard session."""
        self.start_time = datetime.now()
        msg = f"""
HUD DASHBOARD SESSION STARTED

Run ID: {self.run_id}
Started: {self.start_time.strftime('%Y-%m-%d %H:%M:%S')}
Mock players: {players}
Mock tables: {tables}

Config:
Table count: {self.config.table_count}
Table size: {self.config.table_size}-max
Strict import: {self.config.strict_import}
Model: {self.config.model}
Verbose: {self.config.verbose}
        """
        self.section(msg)

    def session_summary(self):
        """Log a summary of what happened in this session so far."""
        started = self.start_time or datetime.now()
        duration = datetime.now() - started
        self.subsection(f"""
Session Summary

Run ID: {self.run_id}
Imports: {self.imports_count} ({self.players_imported} players)
Insights requested: {self.insights_requested}
Insights failed: {self.insights_failed}
Uptime: {format_timedelta(duration)}
""")

    def view_changed(self, old_view: str, new_view: str):
        self.debug(f"🧭 View: {old_view} -> {new_view}")

    # ─── Registry ──────────────────────────────────────────────────

    def registry_imported(self, result: 'ImportResult', filename: str = ""):
        self.imports_count += 1
        self.players_imported += result.count
        source = f" from {filename}" if filename else ""
        self.success(f"Imported {result.count} players{source} ({result.shape} form)")
        if result.partial:
            self.warning(f"{len(result.partial)} partial records accepted: {', '.join(result.partial)}")
        for key in sorted(result.players):
            self.debug(f"     • {key}")

    def import_rejected(self, reason: str, filename: str = ""):
        source = f" {filename}" if filename else ""
        self.error(f"Import rejected{source}: {reason}")

    # ─── Tables ────────────────────────────────────────────────────

    def seat_assigned(self, table_name: str, seat_index: int, player_name: Optional[str]):
        if player_name:
            self.debug(f"🪑 {table_name} seat {seat_index + 1}: {player_name}")
        else:
            self.debug(f"🪑 {table_name} seat {seat_index + 1}: cleared")

    # ─── AI insights ───────────────────────────────────────────────

    def insight_requested(self, agent: str, subject: str):
        self.insights_requested += 1
        self.info(f"🤖 {agent} request: {subject}")

    def insight_failed(self, agent: str, error: Exception):
        self.insights_failed += 1
        self.error(f"{agent} failed: {error}")

    def insight_discarded(self, agent: str, subject: str):
        self.debug(f"🗑️  {agent} response for {subject} discarded (view closed)")

    def agent_messages(self, agent: str, messages: list[dict]):
        for message in messages:
            self.debug(f"🔍 {agent} {message.get('role', 'user')} message:")
            self.debug(message.get('content', ''))

    def agent_response(self, agent: str, response: dict):
        self.debug(f"🔍 DEBUG: {agent} Response")
        self.debug(f"🔍 CONTENT:\n{response.get('content', '')}")
        usage = response.get('usage')
        if usage:
            self.debug(f"   Usage: {usage}")

    def player_debug(self, msg: str, stats: 'PlayerStats'):
        """Player-scoped debug message."""
        self.debug(f"[{stats.player}] {msg}")
