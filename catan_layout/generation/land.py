from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..domain.geometry import format_coord
from ..domain.hexes import HexType, is_frequent
from ..domain.layout_spec import LayoutSpec
from ..domain.scenario import Scenario
from ..errors import LayoutConfigError, LayoutGenerationError
from .clumps import find_land_clumps
from .gold import arrange_gold
from .numbers import balance_frequent_numbers
from .state import GenerationState

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 300


@dataclass(frozen=True)
class PlacementResult:
    attempts: int
    gold_swaps: int
    frequent_numbers_balanced: bool


def place_land(
    state: GenerationState,
    spec: LayoutSpec,
    *,
    scenario: Scenario = Scenario.NONE,
    has_robber: bool = True,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> PlacementResult:
    """Shuffle and place one batch of land hexes and their dice numbers.

    The spec is checked before the board is touched. Placement is retried
    while the shuffled terrain forms clumps; golds and frequent numbers are
    spread out once a clump-free arrangement is found.
    """
    _check_spec(state, spec)

    hex_types = list(spec.hex_types)
    numbers = list(spec.dice_numbers) if spec.dice_numbers is not None else []
    check_clumps = spec.shuffle_land_hexes and spec.clump_limit is not None

    for attempt in range(1, max_attempts + 1):
        if spec.shuffle_land_hexes:
            state.rng.shuffle(hex_types)
        if spec.shuffle_dice_numbers:
            state.rng.shuffle(numbers)

        frequent = _write_hexes(state, spec, hex_types, numbers, has_robber=has_robber)

        if check_clumps:
            clumps = find_land_clumps(state, spec.coords, spec.clump_limit)
            if clumps:
                logger.debug(
                    "%s: attempt %d has %d clumps larger than %d, reshuffling",
                    spec.label or "land",
                    attempt,
                    len(clumps),
                    spec.clump_limit,
                )
                continue

        gold_swaps = 0
        if spec.shuffle_land_hexes:
            gold_swaps = arrange_gold(state, spec.coords, spec.land_area_ranges, scenario)
        balanced = True
        if spec.shuffle_dice_numbers:
            balanced = balance_frequent_numbers(state, spec.coords, frequent)
        break
    else:
        raise LayoutGenerationError(
            f"{spec.label or 'land'}: could not break up terrain clumps larger than "
            f"{spec.clump_limit} after {max_attempts} attempts",
            attempts=max_attempts,
        )

    state.land_hex_coords.extend(spec.coords)
    for area, area_coords in spec.area_slices():
        state.add_land_area_nodes(area, area_coords)

    return PlacementResult(attempts=attempt, gold_swaps=gold_swaps, frequent_numbers_balanced=balanced)


def _check_spec(state: GenerationState, spec: LayoutSpec) -> None:
    spec.validate()
    for index, coord in enumerate(spec.coords):
        if not state.geometry.is_hex_on_board(coord):
            raise LayoutConfigError(
                f"{spec.label or 'land'}: coordinate at index {index} ({format_coord(coord)}) is not a hex on this board"
            )
    for area, _ in spec.land_area_ranges:
        state.check_land_area_free(area)


def _write_hexes(
    state: GenerationState,
    spec: LayoutSpec,
    hex_types: List[HexType],
    numbers: List[int],
    *,
    has_robber: bool,
) -> List[int]:
    frequent: List[int] = []
    next_number = 0
    for coord, hex_type in zip(spec.coords, hex_types):
        state.set_hex_type(coord, hex_type)
        if hex_type is HexType.DESERT:
            state.set_dice_number(coord, None)
            if has_robber:
                state.robber_hex = coord
        elif hex_type is HexType.WATER:
            state.set_dice_number(coord, 0)
        elif next_number < len(numbers):
            number = numbers[next_number]
            next_number += 1
            state.set_dice_number(coord, number)
            if spec.shuffle_dice_numbers and is_frequent(number):
                frequent.append(coord)
        else:
            state.set_dice_number(coord, None)
    return frequent
