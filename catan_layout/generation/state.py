from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..domain.board import BoardLayout, PlacedPort
from ..domain.geometry import BoardGeometry, coord_col, coord_row, format_coord
from ..domain.hexes import DiceNumber, HexType, PortType, is_frequent
from ..domain.scenario import Scenario
from ..errors import LayoutConfigError


@dataclass
class GenerationState:
    """Mutable working set for a single board generation run.

    Only the board driver writes to it; the placement steps receive it
    explicitly. ``freeze`` turns it into the immutable ``BoardLayout``.
    """

    geometry: BoardGeometry
    rng: random.Random
    hex_layout: List[List[HexType]]
    number_layout: List[List[DiceNumber]]
    land_area_nodes: List[Optional[Set[int]]]
    land_hex_coords: List[int] = field(default_factory=list)
    nodes_on_land: Set[int] = field(default_factory=set)
    robber_hex: Optional[int] = None
    pirate_hex: Optional[int] = None
    ports: List[PlacedPort] = field(default_factory=list)
    node_port_types: Dict[int, PortType] = field(default_factory=dict)
    fog_hidden_hexes: Dict[int, Tuple[HexType, DiceNumber]] = field(default_factory=dict)
    added_parts: Dict[str, Tuple[int, ...]] = field(default_factory=dict)
    unbalanced_groups: List[str] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        height: int,
        width: int,
        *,
        land_area_count: int,
        rng: random.Random,
    ) -> "GenerationState":
        return cls(
            geometry=BoardGeometry(height, width),
            rng=rng,
            hex_layout=[[HexType.WATER] * (width + 1) for _ in range(height + 1)],
            number_layout=[[None] * (width + 1) for _ in range(height + 1)],
            land_area_nodes=[None] * land_area_count,
        )

    def hex_type(self, coord: int) -> HexType:
        if not self.geometry.is_hex_on_board(coord):
            return HexType.UNSET
        return self.hex_layout[coord_row(coord)][coord_col(coord)]

    def set_hex_type(self, coord: int, hex_type: HexType) -> None:
        self.hex_layout[coord_row(coord)][coord_col(coord)] = hex_type

    def dice_number(self, coord: int) -> DiceNumber:
        if not self.geometry.is_hex_on_board(coord):
            return None
        return self.number_layout[coord_row(coord)][coord_col(coord)]

    def set_dice_number(self, coord: int, number: DiceNumber) -> None:
        self.number_layout[coord_row(coord)][coord_col(coord)] = number

    def is_frequent_hex(self, coord: int) -> bool:
        return is_frequent(self.dice_number(coord))

    def swap_dice_numbers(self, first: int, second: int) -> None:
        first_number = self.dice_number(first)
        self.set_dice_number(first, self.dice_number(second))
        self.set_dice_number(second, first_number)

    def swap_hex_types(self, first: int, second: int) -> None:
        first_type = self.hex_type(first)
        self.set_hex_type(first, self.hex_type(second))
        self.set_hex_type(second, first_type)

    def adjacent_land_hexes(self, coord: int) -> List[int]:
        return [
            neighbor
            for neighbor in self.geometry.adjacent_hex_coords(coord)
            if self.hex_type(neighbor).is_land
        ]

    def is_coastline(self, coord: int) -> bool:
        """True when a land hex touches water or the board's edge."""
        neighbors = self.geometry.adjacent_hex_coords(coord)
        if len(neighbors) < 6:
            return True
        return any(self.hex_type(neighbor) is HexType.WATER for neighbor in neighbors)

    def add_land_area_nodes(self, area: int, hex_coords: Tuple[int, ...]) -> None:
        nodes: Set[int] = set()
        for coord in hex_coords:
            if self.hex_type(coord) is HexType.WATER:
                continue
            nodes.update(self.geometry.nodes_of_hex(coord))
        self.nodes_on_land.update(nodes)

        if area == 0:
            return
        self.check_land_area_free(area)
        self.land_area_nodes[area] = nodes

    def check_land_area_free(self, area: int) -> None:
        if area == 0:
            return
        if not 0 < area < len(self.land_area_nodes):
            raise LayoutConfigError(
                f"Land area {area} is out of range; this board has {len(self.land_area_nodes) - 1} land areas"
            )
        if self.land_area_nodes[area] is not None:
            raise LayoutConfigError(f"Land area {area} is already populated")

    def check_land_areas_populated(self) -> None:
        for area in range(1, len(self.land_area_nodes)):
            if self.land_area_nodes[area] is None:
                raise LayoutConfigError(f"Inconsistent land areas: area {area} was never populated")

    def describe(self, coord: int) -> str:
        return f"{format_coord(coord)} ({self.hex_type(coord).value}, {self.dice_number(coord)})"

    def freeze(
        self,
        *,
        scenario: Scenario,
        player_variant: int,
        starting_land_area: int,
    ) -> BoardLayout:
        return BoardLayout(
            scenario=scenario,
            player_variant=player_variant,
            height=self.geometry.height,
            width=self.geometry.width,
            hex_layout=tuple(tuple(row) for row in self.hex_layout),
            number_layout=tuple(tuple(row) for row in self.number_layout),
            land_hex_coords=tuple(self.land_hex_coords),
            nodes_on_land=frozenset(self.nodes_on_land),
            land_area_nodes=tuple(
                frozenset(nodes) if nodes is not None else None for nodes in self.land_area_nodes
            ),
            starting_land_area=starting_land_area,
            robber_hex=self.robber_hex,
            pirate_hex=self.pirate_hex,
            ports=tuple(self.ports),
            node_port_types=dict(self.node_port_types),
            fog_hidden_hexes=dict(self.fog_hidden_hexes),
            added_parts=dict(self.added_parts),
            frequent_numbers_balanced=not self.unbalanced_groups,
        )
