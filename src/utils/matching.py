"""
Player name matching utilities.

Screen names coming from different poker clients and HUD exports may differ in:
- Case (AceMaster99 vs acemaster99)
- Accent handling (Señor_Fold vs Senor_Fold)
- Separator characters (Sharky_P vs Sharky P vs Sharky-P)
"""

import re
import unicodedata
from functools import lru_cache
from typing import Iterable, List


class NameMatcher:
    """
    Case- and accent-insensitive screen name matcher.

    Usage:
        matcher = NameMatcher()
        matcher.contains("sharky", "Sharky_P")  # True
        matcher.mentioned_in(["FishFinder"], "FishFinder raises to 3BB")  # ["FishFinder"]
    """

    @staticmethod
    @lru_cache(maxsize=1000)
    def normalize(name: str) -> str:
        """
        Normalize a screen name for comparison.

        Removes accents, converts to lowercase, folds separators to single spaces.

        Args:
            name: Screen name to normalize

        Returns:
            str: Normalized name
        """
        if not name:
            return ""

        name = name.lower().strip()

        # NFD decomposes characters, then combining marks are dropped
        normalized = unicodedata.normalize("NFD", name)
        normalized = "".join(
            char for char in normalized
            if unicodedata.category(char) != "Mn"
        )

        normalized = re.sub(r"[_\-\.]", " ", normalized)
        return " ".join(normalized.split())

    def contains(self, query: str, name: str) -> bool:
        """
        Check whether a search query matches a screen name.

        An empty query matches every name.
        """
        query_norm = self.normalize(query or "")
        if not query_norm:
            return True
        return query_norm in self.normalize(name)

    def mentioned_in(self, names: Iterable[str], text: str) -> List[str]:
        """
        Find which screen names appear as whole words in a block of text.

        Args:
            names: Candidate screen names (original casing is preserved in the result)
            text: Free text, e.g. a pasted hand history

        Returns:
            List of names found, in the order given
        """
        if not text:
            return []

        found = []
        for name in names:
            if not name:
                continue
            pattern = rf"(?<![\w]){re.escape(name)}(?![\w])"
            if re.search(pattern, text, flags=re.IGNORECASE):
                found.append(name)
        return found
