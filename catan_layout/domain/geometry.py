from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .hexes import Facing

DEFAULT_BOARD_HEIGHT = 16
DEFAULT_BOARD_WIDTH = 18

HEX_NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (0, 2),
    (2, 1),
    (2, -1),
    (0, -2),
)
HEX_CORNER_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (-1, -1),
)

EDGE_VERTICAL = "|"
EDGE_RISING = "/"
EDGE_FALLING = "\\"

# land-side hex offset for each legal facing, keyed by edge orientation
_FACING_OFFSETS = {
    EDGE_VERTICAL: {Facing.E: (0, 1), Facing.W: (0, -1)},
    EDGE_RISING: {Facing.NW: (-1, 0), Facing.SE: (1, 1)},
    EDGE_FALLING: {Facing.NE: (-1, 1), Facing.SW: (1, 0)},
}


def hex_coord(row: int, col: int) -> int:
    return (row << 8) | col


def coord_row(coord: int) -> int:
    return coord >> 8


def coord_col(coord: int) -> int:
    return coord & 0xFF


def format_coord(coord: int) -> str:
    return f"0x{coord:04x}"


def parse_board_size(encoded: int) -> Tuple[int, int]:
    """Split a 0xHHWW board size into (height, width)."""
    return coord_row(encoded), coord_col(encoded)


def edge_orientation(edge: int) -> str:
    row, col = coord_row(edge), coord_col(edge)
    if row % 2 == 1:
        return EDGE_VERTICAL
    if col % 2 != (row // 2) % 2:
        return EDGE_RISING
    return EDGE_FALLING


def legal_facings(edge: int) -> Tuple[Facing, ...]:
    return tuple(_FACING_OFFSETS[edge_orientation(edge)])


@dataclass(frozen=True)
class BoardGeometry:
    """Coordinate math for a sea board of the given size.

    Hexes sit on odd rows; a hex column is even on rows where ``(r // 2)`` is
    even and odd otherwise. Nodes and edges share the same ``0xRRCC`` encoding.
    """

    height: int = DEFAULT_BOARD_HEIGHT
    width: int = DEFAULT_BOARD_WIDTH

    def is_hex_on_board(self, coord: int) -> bool:
        row, col = coord_row(coord), coord_col(coord)
        if row % 2 != 1 or not 1 <= row < self.height:
            return False
        if not 0 < col < self.width:
            return False
        return col % 2 == (row // 2) % 2

    def adjacent_hex_coords(self, coord: int) -> List[int]:
        row, col = coord_row(coord), coord_col(coord)
        adjacent = []
        for dr, dc in HEX_NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if r < 0 or c < 0:
                continue
            neighbor = hex_coord(r, c)
            if self.is_hex_on_board(neighbor):
                adjacent.append(neighbor)
        return adjacent

    def are_hexes_adjacent(self, first: int, second: int) -> bool:
        dr = coord_row(second) - coord_row(first)
        dc = coord_col(second) - coord_col(first)
        return (dr, dc) in HEX_NEIGHBOR_OFFSETS

    def nodes_of_hex(self, coord: int) -> List[int]:
        row, col = coord_row(coord), coord_col(coord)
        return [hex_coord(row + dr, col + dc) for dr, dc in HEX_CORNER_OFFSETS]

    def nodes_of_edge(self, edge: int) -> Tuple[int, int]:
        row, col = coord_row(edge), coord_col(edge)
        if edge_orientation(edge) == EDGE_VERTICAL:
            return hex_coord(row - 1, col), hex_coord(row + 1, col)
        return hex_coord(row, col), hex_coord(row, col + 1)

    def hex_across_edge(self, edge: int, facing: Facing) -> Optional[int]:
        """Hex on the ``facing`` side of ``edge``, or None when off the board."""
        offsets = _FACING_OFFSETS[edge_orientation(edge)]
        if facing not in offsets:
            raise ValueError(
                f"Edge {format_coord(edge)} has no hex facing {Facing(facing).name}"
            )
        dr, dc = offsets[facing]
        row, col = coord_row(edge) + dr, coord_col(edge) + dc
        if row < 0 or col < 0:
            return None
        coord = hex_coord(row, col)
        return coord if self.is_hex_on_board(coord) else None
