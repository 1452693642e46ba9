"""Board coordinates, terrain types and layout data models."""

from .board import BoardLayout, PlacedPort
from .geometry import BoardGeometry, format_coord, hex_coord
from .hexes import FREQUENT_NUMBERS, Facing, HexType, PortType
from .layout_spec import LayoutSpec, PortSpec, ScenarioLayout
from .scenario import Scenario

__all__ = [
    "BoardGeometry",
    "BoardLayout",
    "FREQUENT_NUMBERS",
    "Facing",
    "HexType",
    "LayoutSpec",
    "PlacedPort",
    "PortSpec",
    "PortType",
    "Scenario",
    "ScenarioLayout",
    "format_coord",
    "hex_coord",
]
