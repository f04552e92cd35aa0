"""
Write a mock player database to a JSON file for the Import Database button.

Usage:
    python -m scripts.generate_mock_registry
    python -m scripts.generate_mock_registry --count 40 --seed 7 --format mapping --out players.json
"""

import argparse
import json
import random
import sys
from pathlib import Path

from src.services.mock_data import MOCK_PLAYER_NAMES, generate_mock_stats


def mock_names(count: int) -> list[str]:
    """The fixed mock names first, then numbered extras."""
    names = list(MOCK_PLAYER_NAMES[:count])
    for i in range(len(names), count):
        names.append(f"Villain_{i + 1:03d}")
    return names


def build_payload(count: int, seed: int | None, shape: str):
    rng = random.Random(seed)
    records = [generate_mock_stats(name, rng).to_record() for name in mock_names(count)]
    if shape == "mapping":
        return {record["Player"].lower(): record for record in records}
    return records


def main():
    parser = argparse.ArgumentParser(description="Generate a mock player database JSON file")
    parser.add_argument("--count", type=int, default=len(MOCK_PLAYER_NAMES), help="Number of players")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible stats")
    parser.add_argument(
        "--format",
        choices=["array", "mapping"],
        default="array",
        help="array of records, or mapping of lowercase name -> record"
    )
    parser.add_argument("--out", default="mock_registry.json", help="Output file path")
    args = parser.parse_args()

    if args.count < 0:
        print("❌ --count must be zero or more")
        sys.exit(1)

    payload = build_payload(args.count, args.seed, args.format)
    out_path = Path(args.out)
    out_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    print(f"✅ Wrote {args.count} players ({args.format} form) to {out_path}")


if __name__ == "__main__":
    main()
