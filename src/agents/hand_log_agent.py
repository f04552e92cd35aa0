from typing import Mapping, Optional

from prompts import get_game_config
from src.agents.insight_agent import GrokAgent
from src.models import PlayerStats
from src.utils.cancellation import CancellationToken
from src.utils.matching import NameMatcher

FALLBACK_LOG_ANALYSIS = "Error analyzing hand log."
EMPTY_LOG_ANALYSIS = "Could not analyze this hand log at this moment."


class HandLogAgent(GrokAgent):
    """
    Agent that audits a pasted hand history.

    Players from the registry that appear in the log are passed to the
    model with their HUD stats so the audit can use them as reads.
    """
    name = "Hand Log Agent"
    fallback_text = FALLBACK_LOG_ANALYSIS
    empty_text = EMPTY_LOG_ANALYSIS

    def __init__(self, *args, game: str = "holdem", **kwargs):
        super().__init__(*args, **kwargs)
        self.prompt = get_game_config(game).hand_log
        self.matcher = NameMatcher()

    def known_players(self, hand_log: str, registry: Mapping[str, PlayerStats]) -> list[PlayerStats]:
        """Registry players mentioned by name in the log, in registry order."""
        by_name = {stats.player: stats for stats in registry.values()}
        return [by_name[name] for name in self.matcher.mentioned_in(by_name, hand_log)]

    def analyze_hand_log(
        self,
        hand_log: str,
        registry: Optional[Mapping[str, PlayerStats]] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Optional[str]:
        """
        Request a strategic breakdown of a hand history.

        Returns:
            The service text, the fallback text on failure, or None when
            the log is blank or the request was cancelled.
        """
        if not hand_log or not hand_log.strip():
            return None

        known = self.known_players(hand_log, registry or {})
        self.logger.debug(f"Known players in log: {[p.player for p in known] or 'none'}")

        first_line = hand_log.strip().splitlines()[0][:60]
        return self._complete(
            self.prompt,
            f"hand log '{first_line}'",
            cancel_token,
            hand_log=hand_log,
            known_players=known,
        )
