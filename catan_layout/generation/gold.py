from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Set, Tuple

from ..domain.geometry import format_coord
from ..domain.hexes import HexType
from ..domain.scenario import Scenario
from ..errors import LayoutConfigError
from .state import GenerationState

logger = logging.getLogger(__name__)

NOT_GOLD_SWAP_TYPES = (HexType.GOLD, HexType.WATER, HexType.DESERT)


def arrange_gold(
    state: GenerationState,
    coords: Sequence[int],
    land_area_ranges: Sequence[Tuple[int, int]],
    scenario: Scenario,
) -> int:
    """Move gold hexes apart after a land shuffle and return the swap count.

    On the Through the Desert main island the single gold hex must end up in
    the second land area, past the desert strip.
    """
    if scenario is Scenario.THROUGH_THE_DESERT and land_area_ranges and land_area_ranges[0][0] == 1:
        return _move_gold_past_desert(state, coords, land_area_ranges)

    gold_neighbors: Dict[int, List[int]] = {}
    for coord in coords:
        if state.hex_type(coord) is not HexType.GOLD:
            continue
        neighbors = state.adjacent_land_hexes(coord)
        if neighbors:
            gold_neighbors[coord] = neighbors
    if len(gold_neighbors) < 2:
        return 0

    adjacent_golds: Dict[int, Set[int]] = {}
    for gold, neighbors in gold_neighbors.items():
        for neighbor in neighbors:
            if neighbor in gold_neighbors:
                adjacent_golds.setdefault(gold, set()).add(neighbor)
                adjacent_golds.setdefault(neighbor, set()).add(gold)
    if not adjacent_golds:
        return 0

    near_gold = {neighbor for neighbors in gold_neighbors.values() for neighbor in neighbors}
    # deserts never trade places with gold
    candidates = {
        coord
        for coord in coords
        if state.hex_type(coord) not in NOT_GOLD_SWAP_TYPES and coord not in near_gold
    }

    swaps = 0
    # the gold touching the most other golds moves first
    most_crowded = max(sorted(adjacent_golds), key=lambda gold: len(adjacent_golds[gold]))
    if candidates:
        _swap_with_random(state, most_crowded, candidates, adjacent_golds)
        swaps += 1
    while adjacent_golds and candidates:
        gold = min(adjacent_golds)
        _swap_with_random(state, gold, candidates, adjacent_golds)
        swaps += 1

    if adjacent_golds:
        logger.debug(
            "Gold hexes still adjacent after %d swaps: %s",
            swaps,
            ", ".join(format_coord(gold) for gold in sorted(adjacent_golds)),
        )
    return swaps


def _swap_with_random(
    state: GenerationState,
    gold: int,
    candidates: Set[int],
    adjacent_golds: Dict[int, Set[int]],
) -> None:
    target = state.rng.choice(sorted(candidates))
    state.swap_hex_types(gold, target)

    candidates.discard(target)
    candidates.difference_update(state.adjacent_land_hexes(target))

    for other in adjacent_golds.pop(gold, set()):
        partners = adjacent_golds.get(other)
        if partners is None:
            continue
        partners.discard(gold)
        if not partners:
            del adjacent_golds[other]


def _move_gold_past_desert(
    state: GenerationState,
    coords: Sequence[int],
    land_area_ranges: Sequence[Tuple[int, int]],
) -> int:
    golds = [index for index, coord in enumerate(coords) if state.hex_type(coord) is HexType.GOLD]
    if len(golds) != 1 or len(land_area_ranges) != 2:
        raise LayoutConfigError(
            f"{Scenario.THROUGH_THE_DESERT.label}: main island should have 1 gold hex and 2 land areas, "
            f"found {len(golds)} gold hexes and {len(land_area_ranges)} land areas"
        )

    first_area_length = land_area_ranges[0][1]
    gold_index = golds[0]
    if gold_index >= first_area_length:
        return 0

    target = coords[first_area_length + state.rng.randrange(land_area_ranges[1][1])]
    state.swap_hex_types(coords[gold_index], target)
    return 1
