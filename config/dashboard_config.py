from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json


TABLE_SIZES = (6, 9)
TABLE_COUNTS = (1, 2, 4)


@dataclass
class DashboardConfig:
    """Configuration for the HUD dashboard session."""
    default_view: str = "DASHBOARD"
    table_count: int = 1
    table_size: int = 6
    mock_table_count: int = 4
    mock_seed: Optional[int] = None
    strict_import: bool = True
    model: str = "grok-4-1-fast-non-reasoning"
    temperature: float = 0.7
    top_p: float = 0.9
    max_tokens: int = 400
    max_requests_per_hour: int = 100
    log_dir: str = "logs"
    verbose: bool = False

    def __post_init__(self):
        if self.table_size not in TABLE_SIZES:
            raise ValueError(f"table_size must be one of {TABLE_SIZES}, got {self.table_size}")
        if self.table_count not in TABLE_COUNTS:
            raise ValueError(f"table_count must be one of {TABLE_COUNTS}, got {self.table_count}")
        if self.mock_table_count < max(TABLE_COUNTS):
            raise ValueError(
                f"mock_table_count must be at least {max(TABLE_COUNTS)}, got {self.mock_table_count}"
            )
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be within 0.0-2.0, got {self.temperature}")
        if not 0.0 < self.top_p <= 1.0:
            raise ValueError(f"top_p must be within (0.0, 1.0], got {self.top_p}")

    @classmethod
    def from_file(cls, path: str | Path = "config/dashboard_config.json") -> "DashboardConfig":
        """Load config from a JSON file."""
        config_path = Path(path)
        if not config_path.exists():
            print(f"⚠️  Config file not found at {config_path}, using defaults")
            return cls()

        with open(config_path) as f:
            data = json.load(f)

        return cls(**data)
