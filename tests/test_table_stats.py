from src.models import PlayerStats, PokerTable
from src.services.table_stats import table_averages


def test_averages_use_tracked_players_only(record_factory):
    registry = {
        p.key: p for p in [
            PlayerStats.model_validate(record_factory("Tight", VPIP="12", PFR="10")),
            PlayerStats.model_validate(record_factory("Loose", VPIP="45", PFR="5")),
        ]
    }
    table = (
        PokerTable.empty(0, "Table #1024")
        .with_seat(0, "tight")
        .with_seat(2, "LOOSE")
        .with_seat(4, "Stranger")
    )

    averages = table_averages(table, registry)

    assert averages.seated == 3
    assert averages.tracked == 2
    assert averages.vpip == 28.5
    assert averages.pfr == 7.5
    assert str(averages) == "VPIP: 28.5% | PFR: 7.5%"


def test_empty_table_has_no_averages():
    averages = table_averages(PokerTable.empty(1, "Table #1025", 9), {})

    assert (averages.seated, averages.tracked, averages.vpip, averages.pfr) == (0, 0, None, None)
    assert str(averages) == "VPIP: - | PFR: -"
