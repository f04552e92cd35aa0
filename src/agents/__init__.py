"""
Agents package - AI agents for the HUD dashboard.

Contains:
- Insight Agent: exploit summary for one player's stats
- Hand Log Agent: strategic audit of a pasted hand history
"""

from .insight_agent import InsightAgent, GrokAgent, FALLBACK_INSIGHT, EMPTY_INSIGHT
from .hand_log_agent import HandLogAgent, FALLBACK_LOG_ANALYSIS

__all__ = [
    'InsightAgent',
    'GrokAgent',
    'HandLogAgent',
    'FALLBACK_INSIGHT',
    'EMPTY_INSIGHT',
    'FALLBACK_LOG_ANALYSIS',
]
