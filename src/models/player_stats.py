"""
Player statistics record.

One record per screen name, as exported by HUD tools. Every stat value is
kept as a decimal-number-shaped string ("24.5"), the way the exports carry
them; numeric work happens in the services that need it.
"""

import math
import re
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Recognized stat fields, keyed by their export names
STAT_FIELDS = (
    "VPIP",
    "PFR",
    "3Bet Total",
    "Fold to 3Bet",
    "4Bet PF",
    "Fold to 4Bet+",
    "5Bet+ PF",
    "WWSF",
    "W$SD",
    "Hands Abbr",
)

# Stats shown as percentages (everything except the hand count)
PERCENT_FIELDS = STAT_FIELDS[:-1]

_DECIMAL = re.compile(r"^-?\d+(\.\d+)?$")


class PlayerStats(BaseModel):
    """
    Statistics for a single player.

    Field names are Python identifiers; aliases are the export names used in
    import files ("3Bet Total", "W$SD", ...). Unrecognized keys are kept.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    player: str = Field(..., alias="Player", min_length=1, description="Display name")
    vpip: Optional[str] = Field(None, alias="VPIP")
    pfr: Optional[str] = Field(None, alias="PFR")
    three_bet: Optional[str] = Field(None, alias="3Bet Total")
    fold_to_three_bet: Optional[str] = Field(None, alias="Fold to 3Bet")
    four_bet: Optional[str] = Field(None, alias="4Bet PF")
    fold_to_four_bet: Optional[str] = Field(None, alias="Fold to 4Bet+")
    five_bet: Optional[str] = Field(None, alias="5Bet+ PF")
    wwsf: Optional[str] = Field(None, alias="WWSF")
    wsd: Optional[str] = Field(None, alias="W$SD")
    hands: Optional[str] = Field(None, alias="Hands Abbr")

    @field_validator("player", mode="before")
    @classmethod
    def _clean_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator(
        "vpip", "pfr", "three_bet", "fold_to_three_bet", "four_bet",
        "fold_to_four_bet", "five_bet", "wwsf", "wsd", "hands",
        mode="before",
    )
    @classmethod
    def _decimal_string(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValueError("expected a number, got a boolean")
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"'{value}' is not a decimal number")
            if value.is_integer():
                return str(int(value))
            # 1e-05 -> '0.00001'
            return format(Decimal(repr(value)), "f")
        if isinstance(value, str):
            text = value.strip().rstrip("%").strip()
            if not _DECIMAL.match(text):
                raise ValueError(f"'{value}' is not a decimal number")
            return text
        raise ValueError(f"expected a number, got {type(value).__name__}")

    @property
    def key(self) -> str:
        """Registry key: the display name case-folded to lowercase."""
        return self.player.lower()

    def stat(self, name: str) -> Optional[str]:
        """Look up a stat by its export name, e.g. stat("3Bet Total")."""
        return self.to_record().get(name)

    def missing_stats(self) -> List[str]:
        """Export names of recognized stats this record does not carry."""
        record = self.to_record()
        return [name for name in STAT_FIELDS if record.get(name) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_stats()

    def to_record(self) -> Dict[str, Any]:
        """Convert to the export format (alias keys, missing stats omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)
