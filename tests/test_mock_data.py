import json
import random

from scripts.generate_mock_registry import build_payload, mock_names
from src.models import STAT_FIELDS
from src.services.mock_data import (
    MOCK_PLAYER_NAMES,
    STAT_RANGES,
    build_mock_registry,
    build_mock_tables,
    build_recent_hands,
    generate_mock_stats,
)
from src.services.registry_import import RegistryImportService


def test_generated_stats_are_complete_and_in_range():
    stats = generate_mock_stats("RiverRat", random.Random(1))

    assert stats.is_complete
    for name in STAT_FIELDS:
        low, high = STAT_RANGES[name]
        assert low <= int(stats.stat(name)) <= high


def test_seeded_registry_is_reproducible():
    first = build_mock_registry(rng=random.Random(42))
    second = build_mock_registry(rng=random.Random(42))

    assert first == second
    assert len(first) == len(MOCK_PLAYER_NAMES)
    assert "acemaster99" in first


def test_mock_tables():
    tables = build_mock_tables(4, 9)

    assert [t.name for t in tables] == ["Table #1024", "Table #1025", "Table #1026", "Table #1027"]
    assert all(t.size == 9 for t in tables)
    assert tables[0].occupied == ("AceMaster99", "FishFinder")
    assert tables[1].occupied == ()


def test_recent_hands():
    assert [hand.id for hand in build_recent_hands()] == ["h1", "h2", "h3"]


def test_mock_names_pad_past_fixed_list():
    names = mock_names(17)

    assert names[:15] == MOCK_PLAYER_NAMES
    assert names[15:] == ["Villain_016", "Villain_017"]


def test_generated_files_import_in_both_shapes():
    service = RegistryImportService()
    for shape in ("array", "mapping"):
        payload = build_payload(5, seed=3, shape=shape)
        result = service.parse(json.dumps(payload).encode("utf-8"))
        assert result.count == 5
        assert result.shape == shape
