from __future__ import annotations

import hashlib

from ..domain.board import BoardLayout
from ..domain.geometry import format_coord


def layout_signature(board: BoardLayout) -> str:
    """Stable text form of a board: same seed and options give the same string."""
    hex_bits = []
    for coord in board.land_hex_coords:
        number = board.dice_number(coord)
        hex_bits.append(
            f"{format_coord(coord)}:{board.hex_type(coord).value}:{number if number is not None else '-'}"
        )
    fog_bits = [
        f"fog{format_coord(coord)}:{hex_type.value}:{number if number is not None else '-'}"
        for coord, (hex_type, number) in sorted(board.fog_hidden_hexes.items())
    ]
    port_bits = [
        f"port{format_coord(port.edge)}:{port.facing.name}:{port.port_type.value}" for port in board.ports
    ]
    piece_bits = [
        f"robber:{format_coord(board.robber_hex) if board.robber_hex is not None else '-'}",
        f"pirate:{format_coord(board.pirate_hex) if board.pirate_hex is not None else '-'}",
    ]
    return ";".join([*hex_bits, *fog_bits, *port_bits, *piece_bits])


def layout_digest(board: BoardLayout) -> str:
    payload = layout_signature(board).encode("utf-8")
    return hashlib.blake2b(payload, digest_size=8).hexdigest()
