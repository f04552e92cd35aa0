from typing import Iterable

from prompts.base import AgentPrompt
from src.models import PlayerStats
from src.utils.stat_format import format_percent


class HoldemHandLogPrompt(AgentPrompt):
    """Prompt for the hand-log agent (pasted hand history -> strategic audit)."""

    def system_prompt_template(self) -> str:
        return """
You are a technical poker analyst auditing hand histories from PokerStars, GG and Winamax.
Identify the hero's key decision points and judge each one against sound No-Limit Hold'em strategy.

Output requirements:
- Keep it professional and technical
- Point out the single biggest mistake, or the best play if there was no mistake
- Use the opponent statistics when they are provided, and say when a read is based on them
- 1-2 short paragraphs, no markdown headers
"""

    def user_prompt_template(self) -> str:
        return """
Analyze this poker hand log and provide a logical breakdown of the hero's mistake or a good play.

**Known opponents (HUD stats):**
{known_players}

**Hand log:**
{hand_log}
"""

    def get_system_values(self, **kwargs) -> dict:
        return {}

    def get_user_values(
        self,
        hand_log: str,
        known_players: Iterable[PlayerStats] = (),
        **kwargs
    ) -> dict:
        return {
            "known_players": self._format_known_players(known_players),
            "hand_log": hand_log.strip(),
        }

    @staticmethod
    def _format_known_players(known_players: Iterable[PlayerStats]) -> str:
        lines = [
            f"- {p.player}: VPIP {format_percent(p.vpip)}, PFR {format_percent(p.pfr)}, "
            f"3Bet {format_percent(p.three_bet)}, Fold to 3Bet {format_percent(p.fold_to_three_bet)}, "
            f"WWSF {format_percent(p.wwsf)}, W$SD {format_percent(p.wsd)}, Hands {p.hands or 'n/a'}"
            for p in known_players
        ]
        return "\n".join(lines) if lines else "None of the players in this log are in the registry."
