"""
Smoke check for the Grok client and the insight agents.

This script verifies that:
1. API key is configured correctly
2. Connection to xAI API works
3. The insight agent returns a summary for a mock player
4. The hand log agent returns an audit for a sample hand
5. Rate limiting is tracking properly

Usage:
    python -m scripts.check_insight
    python -m scripts.check_insight --player FishFinder
"""

import argparse
import random
import sys
from datetime import datetime

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from config.dashboard_config import DashboardConfig  # noqa: E402
from src.agents import HandLogAgent, InsightAgent, FALLBACK_INSIGHT, FALLBACK_LOG_ANALYSIS  # noqa: E402
from src.clients.grok_client import GrokClient  # noqa: E402
from src.logging import configure_logger  # noqa: E402
from src.services.mock_data import build_mock_registry  # noqa: E402

SAMPLE_HAND = """
PokerStars Hand #245113: Hold'em No Limit ($0.50/$1.00) - Table 'Table #1024' 6-max
Seat 1: AceMaster99 ($100 in chips)
Seat 2: FishFinder ($85 in chips)
AceMaster99: raises $2 to $3
FishFinder: calls $2
*** FLOP *** [Ah 7d 2c]
AceMaster99: bets $4
FishFinder: raises $8 to $12
AceMaster99: folds
"""


def check_connection(config: DashboardConfig):
    """Check client construction (API key + SDK)."""
    print("=" * 60)
    print("🧪 Check 1: API Connection")
    print("=" * 60)

    try:
        client = GrokClient.from_config(config)
        print("✅ Client initialized successfully")
        return client
    except ValueError as e:
        print(f"❌ Configuration error: {e}")
        print("\nMake sure GROK_API_KEY is set in your .env file:")
        print("  GROK_API_KEY=your_actual_key_here")
        return None


def check_player_insight(client: GrokClient, config: DashboardConfig, player: str) -> bool:
    """Ask for an insight on one mock player."""
    print("\n" + "=" * 60)
    print(f"🧪 Check 2: Player Insight ({player})")
    print("=" * 60)

    registry = build_mock_registry(rng=random.Random(config.mock_seed))
    stats = registry.get(player.lower())
    if stats is None:
        print(f"❌ {player} is not a mock player. Try one of: {', '.join(s.player for s in registry.values())}")
        return False

    text = InsightAgent(grok_client=client, config=config).analyze_player(stats)
    print(f"   {text}")
    if text == FALLBACK_INSIGHT:
        print("❌ Insight request fell back - see the session log for the error")
        return False
    print("✅ Insight received")
    return True


def check_hand_log(client: GrokClient, config: DashboardConfig) -> bool:
    """Ask for an audit of a sample hand."""
    print("\n" + "=" * 60)
    print("🧪 Check 3: Hand Log Audit")
    print("=" * 60)

    registry = build_mock_registry(rng=random.Random(config.mock_seed))
    text = HandLogAgent(grok_client=client, config=config).analyze_hand_log(SAMPLE_HAND, registry)
    print(f"   {text}")
    if text == FALLBACK_LOG_ANALYSIS:
        print("❌ Hand log request fell back - see the session log for the error")
        return False
    print("✅ Audit received")
    return True


def check_rate_limiting(client: GrokClient):
    """Show rate limit tracking."""
    print("\n" + "=" * 60)
    print("🧪 Check 4: Rate Limit Tracking")
    print("=" * 60)

    status = client.get_rate_limit_status()

    print("📊 Rate Limit Status:")
    print(f"   Requests made: {status['requests_made']}")
    print(f"   Remaining: {status['requests_remaining']}")
    print(f"   Limit: {status['limit']} per hour")
    print(f"   Window: {status['window_seconds']} seconds")

    if status['requests_remaining'] < status['limit']:
        print(f"   Reset at: {status['reset_time'].strftime('%H:%M:%S')}")


def main() -> bool:
    parser = argparse.ArgumentParser(description="Smoke check the Grok insight agents")
    parser.add_argument("--player", default="AceMaster99", help="Mock player to analyze")
    args = parser.parse_args()

    print("\n🚀 Checking Grok insight agents")
    print(f"⏰ Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print()

    config = DashboardConfig.from_file()
    configure_logger(config)

    client = check_connection(config)
    if not client:
        print("\n❌ Cannot proceed without valid API connection")
        return False

    ok = check_player_insight(client, config, args.player)
    ok = check_hand_log(client, config) and ok
    check_rate_limiting(client)

    print("\n" + "=" * 60)
    print("✅ All Checks Passed!" if ok else "⚠️  Some checks failed")
    print("=" * 60)
    return ok


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
