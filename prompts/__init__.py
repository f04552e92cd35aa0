from prompts.base import GameConfig, AgentPrompt
from prompts.holdem import HOLDEM

# Registry of all poker variants
_GAMES = {
    "holdem": HOLDEM,
}

def get_game_config(game: str = "holdem") -> GameConfig:
    """Get the prompting templates for a poker variant"""
    if game not in _GAMES:
        raise ValueError(f"Unknown game: {game},  Available: {list(_GAMES.keys())}")
    return _GAMES[game]

__all__ = ["GameConfig", "AgentPrompt", "get_game_config", "HOLDEM"]
