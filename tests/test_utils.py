from datetime import timedelta

import pytest

from src.utils.cancellation import CancellationToken
from src.utils.matching import NameMatcher
from src.utils.stat_format import abbreviate_count, format_percent, to_number
from src.utils.strict_prompting import placeholders, strict_format
from src.utils.timedelta_format import format_timedelta


@pytest.mark.parametrize("value, expected", [
    ("24", "24%"),
    ("24.25", "24.2%"),
    ("7.0", "7%"),
    (None, "-"),
    ("n/a", "-"),
])
def test_format_percent(value, expected):
    assert format_percent(value) == expected


@pytest.mark.parametrize("count, expected", [
    (950, "950"),
    (1000, "1k"),
    (142500, "142.5k"),
    (2_300_000, "2.3M"),
    (999_999, "1M"),
    (999_960, "1M"),
    (999_940, "999.9k"),
    (999.96, "1k"),
    (None, "-"),
])
def test_abbreviate_count(count, expected):
    assert abbreviate_count(count) == expected


def test_to_number():
    assert to_number("18.5%") == 18.5
    assert to_number("loose") is None


@pytest.mark.parametrize("td, expected", [
    (timedelta(seconds=5), "5s"),
    (timedelta(minutes=3, seconds=2), "3m 2s"),
    (timedelta(hours=1, minutes=2, seconds=3), "1h 2m 3s"),
    (timedelta(days=2, hours=5), "2d 5h"),
    (timedelta(seconds=-3), "0s"),
])
def test_format_timedelta(td, expected):
    assert format_timedelta(td) == expected


def test_strict_format_requires_exact_placeholders():
    template = "Player: {player} VPIP: {vpip}%"

    assert strict_format(template, player="Bob", vpip="20") == "Player: Bob VPIP: 20%"
    with pytest.raises(ValueError, match="Missing"):
        strict_format(template, player="Bob")
    with pytest.raises(ValueError, match="Unexpected"):
        strict_format(template, player="Bob", vpip="20", pfr="10")


def test_doubled_braces_are_literal():
    template = 'Return JSON like {{"player": "{player}"}}'

    assert placeholders(template) == {"player"}
    assert strict_format(template, player="Bob") == 'Return JSON like {"player": "Bob"}'


def test_name_matcher():
    matcher = NameMatcher()

    assert matcher.normalize("  Señor_Fold ") == "senor fold"
    assert matcher.contains("", "anyone")
    assert matcher.contains("nuts", "Nuts_Only")
    assert not matcher.contains("river", "Nuts_Only")
    assert matcher.mentioned_in(["Nuts_Only", "RiverRat"], "nuts_only bets 5") == ["Nuts_Only"]
    assert matcher.mentioned_in(["Nuts_Only"], "") == []


def test_cancellation_token():
    token = CancellationToken(label="TABLES")

    assert not token.cancelled
    token.cancel()
    token.cancel()
    assert token.cancelled
    assert "cancelled" in repr(token)
