"""
Clients package - External API integrations.

Handles communication with:
- Grok (xAI): tactical insight and hand-log summaries
"""

from .grok_client import GrokClient, RateLimitExceeded

__all__ = ['GrokClient', 'RateLimitExceeded']
