from prompts.base import GameConfig
from prompts.holdem.insight import HoldemInsightPrompt
from prompts.holdem.hand_log import HoldemHandLogPrompt

HOLDEM = GameConfig(
    name="holdem",
    insight=HoldemInsightPrompt(),
    hand_log=HoldemHandLogPrompt(),
)
