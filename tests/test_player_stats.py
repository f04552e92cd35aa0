import pytest
from pydantic import ValidationError

from src.models import PlayerStats, STAT_FIELDS


def test_aliases_map_to_fields(record_factory):
    stats = PlayerStats.model_validate(record_factory("Sharky_P"))

    assert stats.player == "Sharky_P"
    assert stats.three_bet == "7"
    assert stats.wsd == "52"
    assert stats.hands == "1250"
    assert stats.stat("Fold to 4Bet+") == "40"


def test_key_is_lowercased_name(record_factory):
    stats = PlayerStats.model_validate(record_factory("  GTO_Wizard "))

    assert stats.player == "GTO_Wizard"
    assert stats.key == "gto_wizard"


@pytest.mark.parametrize("raw, expected", [
    (24, "24"),
    (24.0, "24"),
    (24.5, "24.5"),
    ("24.5", "24.5"),
    (" 31 ", "31"),
    ("18.2%", "18.2"),
    (1e-05, "0.00001"),
])
def test_stat_values_are_normalized_to_decimal_strings(record_factory, raw, expected):
    stats = PlayerStats.model_validate(record_factory("RiverRat", VPIP=raw))

    assert stats.vpip == expected


@pytest.mark.parametrize("raw", ["abc", "", "12,5", True, [1], {"v": 1}, float("nan"), float("inf"), float("-inf")])
def test_malformed_stat_values_are_rejected(record_factory, raw):
    with pytest.raises(ValidationError):
        PlayerStats.model_validate(record_factory("RiverRat", VPIP=raw))


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_player_name_is_rejected(record_factory, name):
    with pytest.raises(ValidationError):
        PlayerStats.model_validate(record_factory(name))


def test_missing_stats_are_reported():
    stats = PlayerStats.model_validate({"Player": "bob", "VPIP": "1"})

    assert not stats.is_complete
    assert "VPIP" not in stats.missing_stats()
    assert set(stats.missing_stats()) == set(STAT_FIELDS) - {"VPIP"}


def test_complete_record_round_trips_to_export_format(record_factory):
    record = record_factory("BluffKing", Notes="sits out a lot")
    stats = PlayerStats.model_validate(record)

    assert stats.is_complete
    assert stats.to_record() == record


def test_records_are_immutable(record_factory):
    stats = PlayerStats.model_validate(record_factory("BluffKing"))

    with pytest.raises(ValidationError):
        stats.vpip = "99"
