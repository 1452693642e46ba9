"""Randomized sea board layouts for hex-grid settlement games."""

from .config import BoardConfig
from .domain import BoardLayout, HexType, PortType, Scenario
from .errors import LayoutConfigError, LayoutGenerationError, LayoutStateError
from .generation import generate_board, make_board

__all__ = [
    "BoardConfig",
    "BoardLayout",
    "HexType",
    "LayoutConfigError",
    "LayoutGenerationError",
    "LayoutStateError",
    "PortType",
    "Scenario",
    "generate_board",
    "make_board",
]
