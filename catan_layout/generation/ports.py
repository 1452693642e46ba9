from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..domain.board import PlacedPort
from ..domain.geometry import format_coord, legal_facings
from ..domain.hexes import Facing, HexType, PortType
from ..domain.layout_spec import PortSpec
from ..errors import LayoutConfigError, LayoutGenerationError
from .clumps import has_port_clump
from .state import GenerationState

logger = logging.getLogger(__name__)

MAX_PORT_SHUFFLE_ATTEMPTS = 300


def check_port_locations(state: GenerationState, edge_facings: Sequence[Tuple[int, Facing]]) -> None:
    """Make sure every port sits on a coast edge and faces a land hex."""
    for index, (edge, facing) in enumerate(edge_facings):
        prefix = f"Inconsistent layout: Port at index {index} edge {format_coord(edge)}"
        allowed = legal_facings(edge)
        if facing not in allowed:
            names = " or ".join(item.name for item in allowed)
            raise LayoutConfigError(f"{prefix} facing should be {names}, not {int(facing)}")

        land_hex = state.geometry.hex_across_edge(edge, facing)
        if land_hex is None or state.hex_type(land_hex) is HexType.WATER:
            shown = format_coord(land_hex) if land_hex is not None else "0x0000"
            raise LayoutConfigError(f"{prefix} faces water, not land, hex {shown}")

        sea_hex = state.geometry.hex_across_edge(edge, Facing(facing).opposite)
        if sea_hex is not None and state.hex_type(sea_hex).is_land:
            raise LayoutConfigError(f"{prefix} covers up land hex {format_coord(sea_hex)}")


def shuffle_port_types(
    port_types: Sequence[PortType],
    rng,
    *,
    clump_limit: Optional[int] = None,
    max_attempts: int = MAX_PORT_SHUFFLE_ATTEMPTS,
) -> List[PortType]:
    shuffled = list(port_types)
    for attempt in range(1, max_attempts + 1):
        rng.shuffle(shuffled)
        if clump_limit is None or not has_port_clump(shuffled, clump_limit):
            if attempt > 1:
                logger.debug("Port types unclumped after %d shuffles", attempt)
            return shuffled
    raise LayoutGenerationError(
        f"Could not shuffle {len(shuffled)} ports without runs longer than {clump_limit}",
        attempts=max_attempts,
    )


def place_ports(
    state: GenerationState,
    mainland: Optional[PortSpec],
    islands: Optional[PortSpec] = None,
    *,
    max_attempts: int = MAX_PORT_SHUFFLE_ATTEMPTS,
) -> None:
    """Validate, shuffle and place mainland then island ports."""
    groups = [(name, spec) for name, spec in (("mainland", mainland), ("islands", islands)) if spec is not None]
    for name, spec in groups:
        spec.validate(f"{name} ports")
        check_port_locations(state, spec.edge_facings)

    for _, spec in groups:
        port_types = list(spec.port_types)
        if spec.shuffle:
            port_types = shuffle_port_types(
                port_types, state.rng, clump_limit=spec.clump_limit, max_attempts=max_attempts
            )
        for port_type, (edge, facing) in zip(port_types, spec.edge_facings):
            _place_port(state, port_type, edge, Facing(facing))


def _place_port(state: GenerationState, port_type: PortType, edge: int, facing: Facing) -> None:
    nodes = state.geometry.nodes_of_edge(edge)
    state.ports.append(PlacedPort(port_type=port_type, edge=edge, facing=facing, nodes=nodes))
    for node in nodes:
        state.node_port_types[node] = port_type
