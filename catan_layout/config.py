from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .domain.scenario import Scenario
from .errors import LayoutConfigError

MIN_PLAYERS = 2
MAX_PLAYERS = 6
MIN_CLUMP_SIZE = 2


@dataclass(frozen=True)
class BoardConfig:
    scenario: Scenario = Scenario.NONE
    player_count: int = 4
    break_clumps: bool = True
    clump_size: int = 3
    max_clump_attempts: int = 300
    max_port_attempts: int = 300
    max_board_attempts: int = 5

    def __post_init__(self) -> None:
        if not isinstance(self.scenario, Scenario):
            try:
                object.__setattr__(self, "scenario", Scenario.from_key(str(self.scenario)))
            except ValueError as exc:
                raise LayoutConfigError(str(exc)) from exc
        if not MIN_PLAYERS <= self.player_count <= MAX_PLAYERS:
            raise LayoutConfigError(
                f"player_count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, not {self.player_count}"
            )
        if self.clump_size < MIN_CLUMP_SIZE:
            raise LayoutConfigError(f"clump_size must be at least {MIN_CLUMP_SIZE}, not {self.clump_size}")
        for name in ("max_clump_attempts", "max_port_attempts", "max_board_attempts"):
            if getattr(self, name) < 1:
                raise LayoutConfigError(f"{name} must be at least 1")

    @property
    def player_variant(self) -> int:
        """Which table set to use: the 3-, 4- or 6-player layout."""
        if self.player_count > 4:
            return 6
        if self.player_count < 4:
            return 3
        return 4

    @property
    def clump_limit(self) -> Optional[int]:
        return self.clump_size if self.break_clumps else None
