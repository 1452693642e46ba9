from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from .geometry import BoardGeometry, coord_col, coord_row
from .hexes import DiceNumber, Facing, HexType, PortType
from .scenario import Scenario

HexGrid = Tuple[Tuple[HexType, ...], ...]
NumberGrid = Tuple[Tuple[DiceNumber, ...], ...]

PIRATE_PATH_PART = "PP"


@dataclass(frozen=True)
class PlacedPort:
    port_type: PortType
    edge: int
    facing: Facing
    nodes: Tuple[int, int]


@dataclass(frozen=True)
class BoardLayout:
    """Finished sea board layout, as handed to the game layer."""

    scenario: Scenario
    player_variant: int
    height: int
    width: int
    hex_layout: HexGrid
    number_layout: NumberGrid
    land_hex_coords: Tuple[int, ...]
    nodes_on_land: FrozenSet[int]
    land_area_nodes: Tuple[Optional[FrozenSet[int]], ...]
    starting_land_area: int
    robber_hex: Optional[int]
    pirate_hex: Optional[int]
    ports: Tuple[PlacedPort, ...]
    node_port_types: Mapping[int, PortType]
    fog_hidden_hexes: Mapping[int, Tuple[HexType, DiceNumber]] = field(default_factory=dict)
    added_parts: Mapping[str, Tuple[int, ...]] = field(default_factory=dict)
    frequent_numbers_balanced: bool = True

    @property
    def geometry(self) -> BoardGeometry:
        return BoardGeometry(self.height, self.width)

    def hex_type(self, coord: int) -> HexType:
        row, col = coord_row(coord), coord_col(coord)
        if row >= len(self.hex_layout) or col >= len(self.hex_layout[row]):
            return HexType.UNSET
        return self.hex_layout[row][col]

    def dice_number(self, coord: int) -> DiceNumber:
        row, col = coord_row(coord), coord_col(coord)
        if row >= len(self.number_layout) or col >= len(self.number_layout[row]):
            return None
        return self.number_layout[row][col]

    def land_hexes(self) -> List[int]:
        return [coord for coord in self.land_hex_coords if self.hex_type(coord).is_land]

    def hexes_of_type(self, hex_type: HexType) -> List[int]:
        return [coord for coord in self.land_hex_coords if self.hex_type(coord) is hex_type]

    def port_nodes(self, port_type: PortType) -> List[int]:
        return sorted(node for node, node_type in self.node_port_types.items() if node_type is port_type)

    def node_land_area(self, node: int) -> int:
        for area, nodes in enumerate(self.land_area_nodes):
            if area > 0 and nodes is not None and node in nodes:
                return area
        return 0

    def added_part(self, name: str) -> Optional[Tuple[int, ...]]:
        return self.added_parts.get(name)

    def land_area_sizes(self) -> Dict[int, int]:
        return {
            area: len(nodes)
            for area, nodes in enumerate(self.land_area_nodes)
            if area > 0 and nodes is not None
        }
