import json
from pathlib import Path

import pytest

from config.dashboard_config import DashboardConfig


def test_defaults():
    config = DashboardConfig()

    assert (config.table_count, config.table_size, config.mock_table_count) == (1, 6, 4)
    assert config.strict_import
    assert (config.temperature, config.top_p) == (0.7, 0.9)


def test_missing_file_uses_defaults(tmp_path):
    assert DashboardConfig.from_file(tmp_path / "missing.json") == DashboardConfig()


def test_from_file(tmp_path):
    path = tmp_path / "dashboard_config.json"
    path.write_text(json.dumps({"table_size": 9, "strict_import": False, "mock_seed": 3}))

    config = DashboardConfig.from_file(path)

    assert config.table_size == 9
    assert not config.strict_import
    assert config.mock_seed == 3


def test_shipped_config_loads():
    assert DashboardConfig.from_file(Path(__file__).parents[1] / "config" / "dashboard_config.json").table_size in (6, 9)


@pytest.mark.parametrize("overrides", [
    {"table_size": 8},
    {"table_count": 3},
    {"mock_table_count": 2},
    {"temperature": 3.0},
    {"top_p": 0.0},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValueError):
        DashboardConfig(**overrides)


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "dashboard_config.json"
    path.write_text(json.dumps({"colour": "green"}))

    with pytest.raises(TypeError):
        DashboardConfig.from_file(path)
