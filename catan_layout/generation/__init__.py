"""Land, number and port placement for a single board generation run."""

from .board import generate_board, make_board
from .fog import hide_hexes_in_fog, reveal_fog_hex
from .pirate import PirateFleet
from .signature import layout_digest, layout_signature

__all__ = [
    "PirateFleet",
    "generate_board",
    "hide_hexes_in_fog",
    "layout_digest",
    "layout_signature",
    "make_board",
    "reveal_fog_hex",
]
