"""
Poker table and hand history models.

Tables are immutable: seat changes produce a new PokerTable, so a state
snapshot never changes underneath a view that is rendering it.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.enums import TableSize


class SeatOutOfRangeError(ValueError):
    """Raised when a seat index falls outside a table's capacity."""
    pass


class PokerTable(BaseModel):
    """
    A simulated table with a fixed number of seats.

    Each seat holds a screen name (looked up in the registry, not owned by
    the table) or None when unassigned.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Table identifier")
    name: str = Field(..., description="Display name, e.g. 'Table #1024'")
    size: TableSize = Field(6, description="Seat capacity (6-max or 9-max)")
    seats: Tuple[Optional[str], ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _seats_match_size(self) -> "PokerTable":
        if len(self.seats) != self.size:
            raise ValueError(
                f"{self.name} has {len(self.seats)} seats but size {self.size}"
            )
        return self

    @classmethod
    def empty(cls, table_id: int, name: str, size: TableSize = 6) -> "PokerTable":
        return cls(id=table_id, name=name, size=size, seats=(None,) * size)

    def player_at(self, seat_index: int) -> Optional[str]:
        self._check_seat(seat_index)
        return self.seats[seat_index]

    def with_seat(self, seat_index: int, player_name: Optional[str]) -> "PokerTable":
        """Return a copy with one seat set (or cleared with None)."""
        self._check_seat(seat_index)
        seats = list(self.seats)
        seats[seat_index] = player_name
        return self.model_copy(update={"seats": tuple(seats)})

    def resized(self, size: TableSize) -> "PokerTable":
        """
        Return a copy with a new capacity.

        Growing pads with empty seats; shrinking drops the highest seats.
        """
        if size == self.size:
            return self
        seats = self.seats[:size] + (None,) * max(size - self.size, 0)
        return PokerTable(id=self.id, name=self.name, size=size, seats=seats)

    @property
    def occupied(self) -> Tuple[str, ...]:
        return tuple(name for name in self.seats if name)

    def _check_seat(self, seat_index: int) -> None:
        if not 0 <= seat_index < self.size:
            raise SeatOutOfRangeError(
                f"Seat {seat_index} is out of range for {self.name} ({self.size}-max)"
            )


class HandHistory(BaseModel):
    """A recently processed hand, as listed on the workspace screen."""
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: str
    hero: str
    table: str
    action: str
    outcome: str
