from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..domain.board import PIRATE_PATH_PART, BoardLayout
from ..errors import LayoutStateError


class PirateFleet:
    """Pirate ship that sails a fixed loop of hexes, one step per roll."""

    def __init__(self, path: Sequence[int], pirate_hex: Optional[int]) -> None:
        if not path:
            raise LayoutStateError("Pirate fleet needs a non-empty path")
        self.path: Tuple[int, ...] = tuple(path)
        self.pirate_hex = pirate_hex
        self.index = self.path.index(pirate_hex) if pirate_hex in self.path else 0

    @classmethod
    def from_board(cls, board: BoardLayout) -> "PirateFleet":
        path = board.added_part(PIRATE_PATH_PART)
        if not path:
            raise LayoutStateError(f"Board for {board.scenario.label} has no pirate fleet path")
        return cls(path, board.pirate_hex)

    @property
    def defeated(self) -> bool:
        return self.pirate_hex is None

    def advance(self, steps: int) -> Optional[int]:
        """Move ``steps`` hexes along the loop; returns None once the fleet is gone."""
        if self.defeated:
            return None
        self.index = (self.index + steps) % len(self.path)
        self.pirate_hex = self.path[self.index]
        return self.pirate_hex

    def defeat(self) -> None:
        self.pirate_hex = None
