"""
Utils package - Shared utilities.

Contains:
- Session run ID
- Strict prompt formatting
- Screen name matching
- Stat and duration formatting
- View cancellation tokens
"""

from src.utils.matching import NameMatcher
from src.utils.cancellation import CancellationToken

__all__ = [
    "NameMatcher",
    "CancellationToken",
]
