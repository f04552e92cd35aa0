"""
Player registry operations.

The registry is a plain dict of lowercased player name -> PlayerStats held
in AppState. These helpers never mutate their input; they return new dicts,
lists or DataFrames.
"""

import json
from typing import Dict, List, Mapping, Optional

import pandas as pd

from src.models import PlayerStats, STAT_FIELDS
from src.utils.matching import NameMatcher

Registry = Dict[str, PlayerStats]

# Registry listing columns, in display order
REGISTRY_COLUMNS = ["Player", "Hands Abbr", "VPIP", "PFR", "3Bet Total", "Fold to 3Bet", "WWSF", "W$SD"]

_matcher = NameMatcher()


def registry_key(name: str) -> str:
    return name.strip().lower()


def merge_registry(existing: Mapping[str, PlayerStats], incoming: Mapping[str, PlayerStats]) -> Registry:
    """
    Merge imported records into a registry.

    Last write wins on key collision; nothing is ever removed.
    """
    merged = dict(existing)
    merged.update(incoming)
    return merged


def lookup_player(registry: Mapping[str, PlayerStats], name: Optional[str]) -> Optional[PlayerStats]:
    """Find a player by display name, case-insensitively. None for empty names."""
    if not name or not name.strip():
        return None
    return registry.get(registry_key(name))


def search_players(registry: Mapping[str, PlayerStats], query: str = "") -> List[PlayerStats]:
    """
    Players whose name contains the query (case- and accent-insensitive),
    sorted by name. An empty query returns everyone.
    """
    matches = [stats for stats in registry.values() if _matcher.contains(query, stats.player)]
    return sorted(matches, key=lambda stats: stats.player.lower())


def total_hands(registry: Mapping[str, PlayerStats]) -> int:
    """Sum of the 'Hands Abbr' counts across the registry (missing counts as 0)."""
    if not registry:
        return 0
    hands = pd.to_numeric(
        pd.Series([stats.hands for stats in registry.values()], dtype="object"),
        errors="coerce",
    )
    return int(hands.fillna(0).sum())


def registry_to_dataframe(players: List[PlayerStats]) -> pd.DataFrame:
    """
    Tabulate players for the registry listing.

    Stat columns are numeric (NaN where missing) so the table sorts properly.
    """
    rows = [stats.to_record() for stats in players]
    df = pd.DataFrame(rows, columns=REGISTRY_COLUMNS)
    for column in REGISTRY_COLUMNS[1:]:
        df[column] = pd.to_numeric(df[column], errors="coerce")
    return df


def export_registry(registry: Mapping[str, PlayerStats]) -> str:
    """
    Serialize the registry in the import mapping form.

    Re-importing the output reproduces the same registry.
    """
    payload = {key: registry[key].to_record() for key in sorted(registry)}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def stat_coverage(registry: Mapping[str, PlayerStats]) -> Dict[str, int]:
    """How many players carry each recognized stat."""
    return {
        name: sum(1 for stats in registry.values() if stats.stat(name) is not None)
        for name in STAT_FIELDS
    }
