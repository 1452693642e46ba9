from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Tuple

from ..domain.board import BoardLayout
from ..domain.geometry import coord_col, coord_row, format_coord
from ..domain.hexes import DiceNumber, HexType
from ..errors import LayoutStateError
from .state import GenerationState

logger = logging.getLogger(__name__)


def hide_hexes_in_fog(state: GenerationState, hex_coords: Iterable[int]) -> None:
    """Cover hexes with fog, remembering what was underneath."""
    count = 0
    for coord in hex_coords:
        hex_type = state.hex_type(coord)
        if hex_type is HexType.FOG:
            raise LayoutStateError(f"Hex {format_coord(coord)} is already hidden by fog")
        state.fog_hidden_hexes[coord] = (hex_type, state.dice_number(coord))
        state.set_hex_type(coord, HexType.FOG)
        state.set_dice_number(coord, None)
        count += 1
    logger.debug("Hid %d hexes in fog", count)


def reveal_fog_hex(board: BoardLayout, coord: int) -> Tuple[BoardLayout, HexType, DiceNumber]:
    """Return a copy of ``board`` with one fog hex uncovered, plus what it hid."""
    if coord not in board.fog_hidden_hexes:
        raise LayoutStateError(f"Hex {format_coord(coord)} is not hidden by fog")

    hex_type, number = board.fog_hidden_hexes[coord]
    row, col = coord_row(coord), coord_col(coord)

    hex_rows = list(board.hex_layout)
    hex_row = list(hex_rows[row])
    hex_row[col] = hex_type
    hex_rows[row] = tuple(hex_row)

    number_rows = list(board.number_layout)
    number_row = list(number_rows[row])
    number_row[col] = number
    number_rows[row] = tuple(number_row)

    hidden = dict(board.fog_hidden_hexes)
    del hidden[coord]

    revealed = replace(
        board,
        hex_layout=tuple(hex_rows),
        number_layout=tuple(number_rows),
        fog_hidden_hexes=hidden,
    )
    return revealed, hex_type, number
