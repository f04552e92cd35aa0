import pytest

from config.dashboard_config import DashboardConfig
from src.logging import logger as logger_module
from src.logging.logger import DashboardLogger
from src.models import PlayerStats
from src.state import AppState, Store
from src.services.mock_data import build_mock_tables


@pytest.fixture(autouse=True, scope="session")
def session_logger(tmp_path_factory):
    """Route the global logger to a temporary directory for the test run."""
    log_dir = tmp_path_factory.mktemp("logs")
    logger_module._logger_instance = DashboardLogger(DashboardConfig(log_dir=str(log_dir), verbose=True))
    yield logger_module._logger_instance
    logger_module._logger_instance = None


def make_record(name: str, **overrides) -> dict:
    """A complete import record with distinct-looking values."""
    record = {
        "Player": name,
        "VPIP": "24.5",
        "PFR": "19",
        "3Bet Total": "7",
        "Fold to 3Bet": "55",
        "4Bet PF": "2",
        "Fold to 4Bet+": "40",
        "5Bet+ PF": "1",
        "WWSF": "47",
        "W$SD": "52",
        "Hands Abbr": "1250",
    }
    record.update(overrides)
    return record


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def fish() -> PlayerStats:
    return PlayerStats.model_validate(make_record("FishFinder", VPIP="48", PFR="6"))


@pytest.fixture
def state(fish) -> AppState:
    return AppState(
        player_db={fish.key: fish},
        active_tables=build_mock_tables(4, 6),
    )


@pytest.fixture
def store(state) -> Store:
    return Store(state)


class FakeGrokClient:
    """Stands in for GrokClient: records calls, returns canned content or raises."""

    def __init__(self, content: str = "Loose-passive. Value bet thinly and never bluff him.",
                 error: Exception = None, on_call=None):
        self.content = content
        self.error = error
        self.on_call = on_call
        self.calls = []

    def chat_completion(self, messages, **kwargs):
        self.calls.append({"messages": messages, **kwargs})
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return {"content": self.content, "role": "assistant", "model": "fake", "usage": None}


@pytest.fixture
def fake_client():
    return FakeGrokClient()


@pytest.fixture
def make_client():
    return FakeGrokClient
