from prompts.base import AgentPrompt
from src.models import PlayerStats

NOT_AVAILABLE = "n/a"


def _percent(value) -> str:
    return f"{value}%" if value is not None else NOT_AVAILABLE


class HoldemInsightPrompt(AgentPrompt):
    """Prompt for the player insight agent (one HUD record -> exploit summary)."""

    def system_prompt_template(self) -> str:
        return """
You are a professional No-Limit Hold'em coach reviewing HUD statistics collected on an opponent.
Your job is to turn raw numbers into short, practical exploitation advice for the player sitting at the table.

Guidelines:
- Refer to the opponent by their screen name
- Treat stats drawn from fewer than 300 hands as a rough read, and say so
- Prefer concrete adjustments (widen, tighten, barrel, call down, fold) over general theory
- Do not invent stats that were not provided
"""

    def user_prompt_template(self) -> str:
        return """
Analyze this poker player based on their stats and provide a 2-sentence tactical summary on how to exploit them.
Player: {player}
VPIP: {vpip}
PFR: {pfr}
3Bet: {three_bet}
Fold to 3Bet: {fold_to_three_bet}
4Bet PF: {four_bet}
Fold to 4Bet+: {fold_to_four_bet}
5Bet+ PF: {five_bet}
WWSF: {wwsf}
W$SD: {wsd}
Hands: {hands}

Format the response as clear, actionable advice.
"""

    def get_system_values(self, **kwargs) -> dict:
        return {}

    def get_user_values(self, stats: PlayerStats, **kwargs) -> dict:
        return {
            "player": stats.player,
            "vpip": _percent(stats.vpip),
            "pfr": _percent(stats.pfr),
            "three_bet": _percent(stats.three_bet),
            "fold_to_three_bet": _percent(stats.fold_to_three_bet),
            "four_bet": _percent(stats.four_bet),
            "fold_to_four_bet": _percent(stats.fold_to_four_bet),
            "five_bet": _percent(stats.five_bet),
            "wwsf": _percent(stats.wwsf),
            "wsd": _percent(stats.wsd),
            "hands": stats.hands or NOT_AVAILABLE,
        }
