from typing import Callable, Optional

from config.dashboard_config import DashboardConfig
from prompts import get_game_config
from prompts.base import AgentPrompt
from src.clients.grok_client import GrokClient
from src.logging import get_logger
from src.models import PlayerStats
from src.utils.cancellation import CancellationToken

ClientFactory = Callable[[], GrokClient]

FALLBACK_INSIGHT = "AI analysis unavailable. Ensure API key is configured."
EMPTY_INSIGHT = "Could not analyze player at this moment."


class GrokAgent:
    """
    Shared request flow for the dashboard's AI agents.

    The client is built lazily so that a missing API key surfaces as a
    failed request (fallback text) rather than a crash at startup.
    """
    name = "Agent"
    fallback_text = FALLBACK_INSIGHT
    empty_text = EMPTY_INSIGHT

    def __init__(
        self,
        grok_client: Optional[GrokClient] = None,
        client_factory: Optional[ClientFactory] = None,
        config: Optional[DashboardConfig] = None,
    ):
        """
        Args:
            grok_client: Ready client (tests pass a fake here)
            client_factory: Builds a client on first use when none was given
            config: Generation settings; defaults to DashboardConfig()
        """
        self.config = config or DashboardConfig()
        self._client = grok_client
        self._client_factory = client_factory or (lambda: GrokClient.from_config(self.config))
        self.logger = get_logger()

    @property
    def client(self) -> GrokClient:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def _complete(
        self,
        prompt: AgentPrompt,
        subject: str,
        cancel_token: Optional[CancellationToken] = None,
        **prompt_values
    ) -> Optional[str]:
        """
        Run one request and return the text, the fallback text, or None.

        None means the token was cancelled before or while the request ran,
        and the result must not be shown.
        """
        if cancel_token is not None and cancel_token.cancelled:
            self.logger.insight_discarded(self.name, subject)
            return None

        self.logger.insight_requested(self.name, subject)
        try:
            messages = prompt.generate_messages(**prompt_values)
            self.logger.agent_messages(self.name, messages)

            response = self.client.chat_completion(
                messages=messages,
                temperature=self.config.temperature,
                top_p=self.config.top_p,
            )
            self.logger.agent_response(self.name, response)
            content = response.get('content') or ''
            text = content if content.strip() else self.empty_text
        except Exception as e:
            self.logger.insight_failed(self.name, e)
            text = self.fallback_text

        if cancel_token is not None and cancel_token.cancelled:
            self.logger.insight_discarded(self.name, subject)
            return None
        return text


class InsightAgent(GrokAgent):
    """
    Agent that turns one player's HUD stats into a short exploit summary.

    Usage:
        agent = InsightAgent(config=config)
        text = agent.analyze_player(stats, cancel_token=store.view_token())
        if text is not None:
            store.dispatch(record_insight, stats.player, text)
    """
    name = "Insight Agent"

    def __init__(self, *args, game: str = "holdem", **kwargs):
        super().__init__(*args, **kwargs)
        self.prompt = get_game_config(game).insight

    def analyze_player(
        self,
        stats: PlayerStats,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Optional[str]:
        """
        Request a tactical summary for one player.

        Returns:
            The service text verbatim, EMPTY_INSIGHT for an empty response,
            FALLBACK_INSIGHT on any failure, or None if cancelled.
        """
        self.logger.player_debug(f"missing stats: {stats.missing_stats() or 'none'}", stats)
        return self._complete(self.prompt, stats.player, cancel_token, stats=stats)
