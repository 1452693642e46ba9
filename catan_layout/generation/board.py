from __future__ import annotations

import logging
import random
from typing import Optional

from ..config import BoardConfig
from ..domain.board import BoardLayout
from ..errors import LayoutGenerationError
from ..scenarios.registry import resolve_scenario
from .fog import hide_hexes_in_fog
from .land import place_land
from .ports import place_ports
from .state import GenerationState

logger = logging.getLogger(__name__)


def make_board(config: BoardConfig, rng: random.Random) -> BoardLayout:
    """Lay out one sea board for ``config`` using ``rng`` for every random pick.

    Raises LayoutConfigError for bad static data and LayoutGenerationError
    when a bounded re-shuffle runs out; no partial board is ever returned.
    """
    layout = resolve_scenario(config)
    state = GenerationState.create(
        layout.board_height,
        layout.board_width,
        land_area_count=layout.land_area_count,
        rng=rng,
    )

    for spec in layout.land_groups:
        result = place_land(
            state,
            spec,
            scenario=layout.scenario,
            has_robber=layout.has_robber,
            max_attempts=config.max_clump_attempts,
        )
        logger.debug(
            "Placed %s: %d hexes in %d attempts, %d gold swaps",
            spec.label,
            len(spec.coords),
            result.attempts,
            result.gold_swaps,
        )
        if not result.frequent_numbers_balanced:
            logger.warning("Could not separate all 6s and 8s on the %s", spec.label)
            state.unbalanced_groups.append(spec.label)

    state.pirate_hex = layout.pirate_hex
    state.check_land_areas_populated()

    if layout.mainland_ports is not None or layout.island_ports is not None:
        place_ports(state, layout.mainland_ports, layout.island_ports, max_attempts=config.max_port_attempts)

    if layout.fog_hexes:
        hide_hexes_in_fog(state, layout.fog_hexes)

    for name, part in layout.added_parts:
        state.added_parts[name] = tuple(part)

    board = state.freeze(
        scenario=layout.scenario,
        player_variant=layout.player_variant,
        starting_land_area=layout.starting_land_area,
    )
    logger.info(
        "Generated %s board for %d players: %d land hexes, %d ports",
        layout.scenario.label,
        layout.player_variant,
        len(board.land_hex_coords),
        len(board.ports),
    )
    return board


def generate_board(config: Optional[BoardConfig] = None, seed: Optional[int] = None) -> BoardLayout:
    """Seeded entry point; starts over when a whole layout can't be unclumped."""
    config = config or BoardConfig()
    rng = random.Random(seed)

    last_error: Optional[LayoutGenerationError] = None
    for attempt in range(1, config.max_board_attempts + 1):
        try:
            return make_board(config, rng)
        except LayoutGenerationError as exc:
            last_error = exc
            logger.info("Board attempt %d failed (%s), starting over", attempt, exc)

    raise LayoutGenerationError(
        f"Unable to generate a {config.scenario.label} board after {config.max_board_attempts} attempts: "
        f"{last_error}",
        attempts=config.max_board_attempts,
    ) from last_error
