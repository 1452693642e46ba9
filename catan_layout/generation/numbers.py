from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from ..domain.geometry import format_coord
from ..domain.hexes import HexType, is_rare
from ..errors import LayoutConfigError, LayoutStateError
from .state import GenerationState

logger = logging.getLogger(__name__)

MAX_BALANCE_RETRIES = 5
NOT_SWAP_CANDIDATES = (HexType.WATER, HexType.DESERT, HexType.GOLD)


@dataclass(frozen=True)
class NumberSwap:
    from_hex: int
    to_hex: int


@dataclass
class SwapLog:
    swaps: List[NumberSwap] = field(default_factory=list)

    def record(self, swap: NumberSwap) -> None:
        self.swaps.append(swap)

    def undo(self, state: GenerationState) -> None:
        for swap in reversed(self.swaps):
            state.swap_dice_numbers(swap.from_hex, swap.to_hex)
        self.swaps.clear()

    def __len__(self) -> int:
        return len(self.swaps)


def balance_frequent_numbers(
    state: GenerationState,
    coords: Sequence[int],
    frequent_hexes: Sequence[int],
) -> bool:
    """Move 6s and 8s apart within the newly placed ``coords``.

    Gold hexes never keep a 6 or 8. Returns False if the hexes are still
    touching after the last retry; the board stays playable in that case.
    """
    balancer = _FrequentNumberBalancer(state, coords, frequent_hexes)
    return balancer.run()


class _FrequentNumberBalancer:
    def __init__(self, state: GenerationState, coords: Sequence[int], frequent_hexes: Sequence[int]) -> None:
        self.state = state
        self.coords = list(coords)
        self.coord_set = set(coords)
        self.frequent: List[int] = list(frequent_hexes)
        self.log = SwapLog()
        self.coastal: Set[int] = set()
        self.interior: Set[int] = set()

    def run(self) -> bool:
        if not self.frequent:
            return True
        self._move_numbers_off_gold()

        initial = list(self.frequent)
        for attempt in range(MAX_BALANCE_RETRIES + 1):
            if attempt > 0:
                logger.debug(
                    "Undoing %d dice number swaps, retry %d of %d",
                    len(self.log),
                    attempt,
                    MAX_BALANCE_RETRIES,
                )
                self.log.undo(self.state)
                self.frequent = list(initial)
            if self._separate():
                return True
        return False

    def _move_numbers_off_gold(self) -> None:
        for gold in [coord for coord in self.frequent if self.state.hex_type(coord) is HexType.GOLD]:
            partners = [
                coord
                for coord in self.coords
                if coord != gold
                and self.state.hex_type(coord) is not HexType.GOLD
                and is_rare(self.state.dice_number(coord))
            ]
            if not partners:
                raise LayoutConfigError(
                    f"No rare dice number left to swap with gold hex {format_coord(gold)}"
                )
            partner = self.state.rng.choice(partners)
            self.state.swap_dice_numbers(gold, partner)
            self.frequent.remove(gold)
            self.frequent.append(partner)

    def _separate(self) -> bool:
        self.coastal, self.interior = self._collect_candidates()

        # first pass: hexes sitting between 2 or 3 otherwise separate frequent neighbors
        index = 0
        while index < len(self.frequent):
            coord = self.frequent[index]
            neighbors = self._frequent_neighbors(coord)
            if not neighbors:
                del self.frequent[index]
                continue
            if not self._is_middle_hex(neighbors):
                index += 1
                continue
            moved, removed_before = self._swap_one(coord, index)
            if not moved:
                return False
            index -= removed_before

        while self.frequent:
            coord = self.frequent[0]
            neighbors = self._frequent_neighbors(coord)
            if not neighbors:
                del self.frequent[0]
                continue
            target = coord if len(neighbors) > 1 else neighbors[0]
            position = self.frequent.index(target) if target in self.frequent else -1
            moved, _ = self._swap_one(target, position)
            if not moved:
                return False
        return True

    def _frequent_neighbors(self, coord: int) -> List[int]:
        return [
            neighbor for neighbor in self.state.adjacent_land_hexes(coord) if self.state.is_frequent_hex(neighbor)
        ]

    def _is_middle_hex(self, neighbors: List[int]) -> bool:
        if len(neighbors) < 2 or len(neighbors) > 3:
            return False
        geometry = self.state.geometry
        first, last = neighbors[0], neighbors[-1]
        if geometry.are_hexes_adjacent(first, last):
            return False
        if len(neighbors) == 3:
            middle = neighbors[1]
            if geometry.are_hexes_adjacent(middle, first) or geometry.are_hexes_adjacent(middle, last):
                return False
        return True

    def _is_candidate(self, coord: int) -> bool:
        if coord not in self.coord_set:
            return False
        hex_type = self.state.hex_type(coord)
        if hex_type is HexType.FOG:
            raise LayoutStateError(f"Can't balance dice numbers: fog hex at {format_coord(coord)}")
        if hex_type in NOT_SWAP_CANDIDATES:
            return False
        number = self.state.dice_number(coord)
        if number is None or number <= 0 or self.state.is_frequent_hex(coord):
            return False
        return not self._frequent_neighbors(coord)

    def _collect_candidates(self) -> Tuple[Set[int], Set[int]]:
        coastal: Set[int] = set()
        interior: Set[int] = set()
        for coord in self.coords:
            if self._is_candidate(coord):
                (coastal if self.state.is_coastline(coord) else interior).add(coord)
        return coastal, interior

    def _swap_one(self, coord: int, position: int) -> Tuple[bool, int]:
        """Swap ``coord``'s frequent number onto a random candidate hex.

        Returns whether a swap happened, and how many frequent-list entries
        before ``position`` were dropped.
        """
        pool: Optional[Set[int]] = self.coastal or self.interior or None
        if pool is None:
            return False, 0

        other = self.state.rng.choice(sorted(pool))
        self.state.swap_dice_numbers(coord, other)
        self.log.record(NumberSwap(coord, other))

        pool.discard(other)
        for neighbor in self.state.adjacent_land_hexes(other):
            self.coastal.discard(neighbor)
            self.interior.discard(neighbor)

        if coord in self.frequent:
            self.frequent.remove(coord)

        removed_before = 0
        for neighbor in self.state.adjacent_land_hexes(coord):
            if self._frequent_neighbors(neighbor):
                continue
            if self.state.is_frequent_hex(neighbor):
                if neighbor in self.frequent:
                    neighbor_index = self.frequent.index(neighbor)
                    del self.frequent[neighbor_index]
                    if neighbor_index < position:
                        removed_before += 1
                        position -= 1
            elif self._is_candidate(neighbor):
                (self.coastal if self.state.is_coastline(neighbor) else self.interior).add(neighbor)
        return True, removed_before
