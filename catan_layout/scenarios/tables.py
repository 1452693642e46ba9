"""Static land, dice and port tables for each sea board layout.

Coordinates are ``0xRRCC``. Port tables pair an edge with the direction from
that edge toward the land hex it serves.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..domain.hexes import Facing, HexType, PortType

CLAY = HexType.CLAY
ORE = HexType.ORE
SHEEP = HexType.SHEEP
WHEAT = HexType.WHEAT
WOOD = HexType.WOOD
DESERT = HexType.DESERT
GOLD = HexType.GOLD
WATER = HexType.WATER

MISC_PORT = PortType.ANY_3TO1
CLAY_PORT = PortType.CLAY_2TO1
ORE_PORT = PortType.ORE_2TO1
SHEEP_PORT = PortType.SHEEP_2TO1
WHEAT_PORT = PortType.WHEAT_2TO1
WOOD_PORT = PortType.WOOD_2TO1

NE, E, SE, SW, W, NW = Facing.NE, Facing.E, Facing.SE, Facing.SW, Facing.W, Facing.NW


def hex_pool(counts: Dict[HexType, int]) -> List[HexType]:
    pool: List[HexType] = []
    for hex_type, count in counts.items():
        pool.extend([hex_type] * count)
    return pool


def port_pool(counts: Dict[PortType, int]) -> List[PortType]:
    pool: List[PortType] = []
    for port_type, count in counts.items():
        pool.extend([port_type] * count)
    return pool


EdgeFacings = Tuple[Tuple[int, Facing], ...]

# Sea board without a scenario

MAINLAND_HEX_TYPES_4PL = hex_pool({DESERT: 1, CLAY: 3, ORE: 3, SHEEP: 4, WHEAT: 4, WOOD: 4})
MAINLAND_HEX_TYPES_6PL = hex_pool({DESERT: 2, CLAY: 5, ORE: 5, SHEEP: 6, WHEAT: 6, WOOD: 6})

# dice numbers follow the path order; only the terrain is shuffled
MAINLAND_DICE_4PL = (5, 2, 6, 3, 8, 10, 9, 12, 11, 4, 8, 10, 9, 4, 5, 6, 3, 11)
MAINLAND_DICE_6PL = (
    2, 5, 4, 6, 3, 9, 8, 11, 11, 10, 6, 3, 8, 4,
    8, 10, 11, 12, 10, 5, 4, 9, 5, 9, 12, 3, 2, 6,
)

# clockwise from the northwest
MAINLAND_DICE_PATH_4PL = (
    0x0104, 0x0106, 0x0108, 0x0309, 0x050A,
    0x0709, 0x0908, 0x0906, 0x0904, 0x0703,
    0x0502, 0x0303, 0x0305, 0x0307, 0x0508,
    0x0707, 0x0705, 0x0504, 0x0506,
)
# clockwise inward from the western corner
MAINLAND_DICE_PATH_6PL = (
    0x0701, 0x0502, 0x0303, 0x0104, 0x0106, 0x0108, 0x0309, 0x050A,
    0x070B, 0x090A, 0x0B09, 0x0D08, 0x0D06, 0x0D04, 0x0B03, 0x0902,
    0x0703, 0x0504, 0x0305, 0x0307, 0x0508,
    0x0709, 0x0908, 0x0B07, 0x0B05, 0x0904,
    0x0705, 0x0506, 0x0707, 0x0906,
)

MAINLAND_PORT_TYPES_4PL = port_pool(
    {MISC_PORT: 4, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 1, WHEAT_PORT: 1, WOOD_PORT: 1}
)
MAINLAND_PORT_TYPES_6PL = port_pool(
    {MISC_PORT: 5, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 2, WHEAT_PORT: 1, WOOD_PORT: 1}
)
MAINLAND_PORT_EDGES_4PL: EdgeFacings = (
    (0x0003, SE), (0x0006, SW), (0x0209, SW), (0x050B, W),
    (0x0809, NW), (0x0A06, NW), (0x0A03, NE), (0x0702, E),
    (0x0302, E),
)
MAINLAND_PORT_EDGES_6PL: EdgeFacings = (
    (0x0501, E), (0x0202, SE), (0x0006, SW), (0x0209, SW),
    (0x050B, W), (0x080B, NW), (0x0B0A, W), (0x0E08, NW),
    (0x0E05, NE), (0x0C02, NE), (0x0800, NE),
)

ISLANDS_COORDS_4PL = (
    0x010E, 0x030D, 0x030F, 0x050E, 0x0510,
    0x0B0D, 0x0B0F, 0x0B11, 0x0D0C, 0x0D0E,
    0x0D02, 0x0D04, 0x0F05, 0x0F07,
)
ISLANDS_RANGES_4PL = ((2, 5), (3, 5), (4, 4))
ISLANDS_HEX_TYPES_4PL = hex_pool({CLAY: 2, ORE: 3, SHEEP: 2, WHEAT: 2, DESERT: 1, WOOD: 2, GOLD: 2})
ISLANDS_DICE_4PL = (5, 4, 6, 3, 8, 10, 9, 11, 5, 9, 4, 10, 5)
ISLANDS_PORT_EDGES_4PL: EdgeFacings = ((0x060E, NW), (0x0A0F, SW), (0x0E0C, NW), (0x0E06, SE))
ISLANDS_PORT_TYPES_4PL = (MISC_PORT, SHEEP_PORT, WHEAT_PORT, WOOD_PORT)

ISLANDS_COORDS_6PL = (
    0x010E, 0x0110, 0x030D, 0x030F, 0x0311, 0x050E, 0x0510, 0x0711,
    0x0B0D, 0x0B0F, 0x0B11, 0x0D0C, 0x0D0E, 0x0D10, 0x0F0F, 0x0F11,
    0x1102, 0x1104, 0x1106, 0x1108, 0x110A,
)
ISLANDS_RANGES_6PL = ((2, 8), (3, 8), (4, 5))
ISLANDS_HEX_TYPES_6PL = hex_pool({CLAY: 4, ORE: 4, SHEEP: 4, WHEAT: 3, DESERT: 1, WOOD: 3, GOLD: 2})
ISLANDS_DICE_6PL = (3, 3, 4, 4, 5, 5, 5, 6, 6, 6, 8, 8, 8, 9, 9, 9, 10, 10, 11, 11)
ISLANDS_PORT_EDGES_6PL: EdgeFacings = ((0x060F, NE), (0x0A0E, SE), (0x0E0D, NE), (0x1007, SE))
ISLANDS_PORT_TYPES_6PL = (MISC_PORT, MISC_PORT, CLAY_PORT, WOOD_PORT)

# Fog Island

FOG_BOARD_SIZE_4PL = 0x1011
FOG_BOARD_SIZE_6PL = 0x1014

FOG_MAIN_HEX_TYPES_3PL = hex_pool({CLAY: 2, ORE: 2, SHEEP: 4, WHEAT: 2, WOOD: 4})
FOG_MAIN_COORDS_3PL = (
    0x0703, 0x0902, 0x0904, 0x0B03, 0x0B05, 0x0D04, 0x0D06,
    0x010A, 0x0309, 0x030B, 0x050A, 0x050C, 0x070B, 0x070D,
)
FOG_MAIN_DICE_3PL = (3, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 11, 11, 12)
FOG_PORT_EDGES_3PL: EdgeFacings = (
    (0x0702, E), (0x0A01, NE), (0x0D03, E), (0x0E05, NE),
    (0x060D, SW), (0x040C, SW), (0x010B, W), (0x0208, SE),
)
FOG_PORT_TYPES_3PL = (
    MISC_PORT, WHEAT_PORT, SHEEP_PORT, MISC_PORT,
    ORE_PORT, WOOD_PORT, MISC_PORT, CLAY_PORT,
)

# shared by the 3- and 4-player fog islands
FOG_ISLAND_HEX_TYPES = hex_pool({WATER: 2, CLAY: 2, ORE: 2, SHEEP: 1, WHEAT: 2, WOOD: 1, GOLD: 2})
FOG_ISLAND_COORDS_3PL = (
    0x0104, 0x0106, 0x0303,
    0x0305, 0x0506, 0x0707, 0x0908, 0x0B09, 0x0D0A,
    0x0B0B, 0x0B0D, 0x0D0C,
)
FOG_ISLAND_DICE_3PL = (3, 3, 4, 5, 6, 8, 9, 10, 11, 12)

FOG_MAIN_HEX_TYPES_4PL = hex_pool({CLAY: 3, ORE: 3, SHEEP: 4, WHEAT: 3, WOOD: 4})
FOG_MAIN_COORDS_4PL = (
    0x0502, 0x0703, 0x0902, 0x0904, 0x0B03, 0x0B05, 0x0B07, 0x0D04, 0x0D06, 0x0D08,
    0x010A, 0x010C, 0x030B, 0x030D, 0x050C, 0x050E, 0x070D,
)
FOG_MAIN_DICE_4PL = (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 12)
FOG_PORT_EDGES_4PL: EdgeFacings = (
    (0x0601, NE), (0x0A01, NE), (0x0D03, E),
    (0x0E04, NW), (0x0E07, NE),
    (0x070E, W), (0x040E, SW),
    (0x010D, W), (0x000B, SE),
)
FOG_PORT_TYPES_4PL = (
    MISC_PORT, CLAY_PORT, MISC_PORT, WHEAT_PORT, SHEEP_PORT,
    WOOD_PORT, ORE_PORT, MISC_PORT, MISC_PORT,
)
FOG_ISLAND_COORDS_4PL = (
    0x0104, 0x0305, 0x0506, 0x0707,
    0x0106, 0x0307, 0x0508, 0x0709, 0x090A, 0x0B0B, 0x0D0C,
    0x0B0D,
)
FOG_ISLAND_DICE_4PL = (3, 4, 5, 6, 8, 9, 10, 11, 11, 12)

FOG_MAIN_HEX_TYPES_6PL = hex_pool({CLAY: 5, ORE: 5, SHEEP: 4, WHEAT: 5, WOOD: 4, DESERT: 1})
FOG_MAIN_COORDS_6PL = (
    0x0303, 0x0305, 0x0307, 0x0309, 0x030B, 0x030D, 0x030F, 0x0311,
    0x0504, 0x0506, 0x0508, 0x050A, 0x050C, 0x050E, 0x0510,
    0x0705, 0x0707, 0x0709, 0x070B, 0x070D, 0x070F,
    0x0908, 0x090A, 0x090C,
)
FOG_MAIN_DICE_6PL = (2, 3, 3, 3, 4, 4, 5, 5, 6, 6, 6, 8, 8, 8, 9, 9, 10, 10, 11, 11, 11, 12, 12)
FOG_PORT_EDGES_6PL: EdgeFacings = (
    (0x0503, E), (0x0806, NE), (0x0A0A, NW),
    (0x080D, NW), (0x0511, W), (0x0210, SE),
    (0x020B, SW), (0x0206, SE), (0x0203, SW),
)
FOG_PORT_TYPES_6PL = port_pool(
    {MISC_PORT: 4, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 1, WHEAT_PORT: 1, WOOD_PORT: 1}
)
FOG_ISLAND_HEX_TYPES_6PL = hex_pool({WATER: 12, CLAY: 2, ORE: 2, SHEEP: 3, WHEAT: 2, WOOD: 3, GOLD: 1})
FOG_ISLAND_COORDS_6PL = (
    0x0701, 0x0713, 0x0902, 0x0912,
    0x0B01, 0x0B03, 0x0B05, 0x0B0F, 0x0B11, 0x0B13,
    0x0D02, 0x0D04, 0x0D06, 0x0D08, 0x0D0A, 0x0D0C, 0x0D0E, 0x0D10, 0x0D12,
    0x0F05, 0x0F07, 0x0F09, 0x0F0B, 0x0F0D, 0x0F0F,
)
FOG_ISLAND_DICE_6PL = (2, 2, 3, 4, 5, 5, 6, 8, 9, 9, 10, 11, 12)

FOG_GOLD_CORNER_HEX_TYPES = (GOLD, GOLD)
FOG_GOLD_CORNER_COORDS = (0x0F03, 0x0F11)
FOG_GOLD_CORNER_DICE = (4, 10)

# Four Islands (six islands on the 6-player board)

FOUR_ISLANDS_BOARD_SIZE_4PL = 0x100E
FOUR_ISLANDS_BOARD_SIZE_6PL = 0x1014
FOUR_ISLANDS_PIRATE_HEX = {3: 0x0707, 4: 0x070D, 6: 0x0701}

FOUR_ISLANDS_HEX_TYPES_3PL = hex_pool({CLAY: 4, ORE: 4, SHEEP: 4, WHEAT: 4, WOOD: 4})
FOUR_ISLANDS_COORDS_3PL = (
    0x0303, 0x0305, 0x0502, 0x0504,
    0x0902, 0x0904, 0x0906, 0x0B03, 0x0B05, 0x0D04,
    0x0108, 0x010A, 0x0309, 0x030B, 0x0508, 0x050A,
    0x090A, 0x090C, 0x0B09, 0x0B0B,
)
FOUR_ISLANDS_DICE_3PL = (2, 3, 3, 4, 4, 5, 5, 5, 6, 6, 8, 8, 9, 9, 9, 10, 10, 11, 11, 12)
FOUR_ISLANDS_RANGES_3PL = ((1, 4), (2, 6), (3, 6), (4, 4))
FOUR_ISLANDS_PORT_EDGES_3PL: EdgeFacings = (
    (0x0401, SE), (0x0405, NW),
    (0x0802, SW), (0x0A01, NE), (0x0C05, NW),
    (0x020B, SW), (0x0609, NE),
    (0x0A08, SE), (0x0A0C, NW),
)
FOUR_ISLANDS_PORT_TYPES_3PL = (
    MISC_PORT, ORE_PORT,
    WOOD_PORT, MISC_PORT, SHEEP_PORT,
    MISC_PORT, CLAY_PORT,
    MISC_PORT, WHEAT_PORT,
)

FOUR_ISLANDS_HEX_TYPES_4PL = hex_pool({CLAY: 4, ORE: 4, SHEEP: 5, WHEAT: 5, WOOD: 5})
FOUR_ISLANDS_COORDS_4PL = (
    0x0104, 0x0303, 0x0502, 0x0504,
    0x0902, 0x0904, 0x0B03, 0x0B05, 0x0B07, 0x0D04, 0x0D06,
    0x0108, 0x010A, 0x0307, 0x0309, 0x030B, 0x0508, 0x050A, 0x0707,
    0x090A, 0x090C, 0x0B0B, 0x0D0A,
)
FOUR_ISLANDS_DICE_4PL = (2, 3, 3, 4, 4, 4, 5, 5, 5, 6, 6, 8, 8, 9, 9, 9, 10, 10, 10, 11, 11, 11, 12)
FOUR_ISLANDS_RANGES_4PL = ((1, 4), (2, 7), (3, 8), (4, 4))
FOUR_ISLANDS_PORT_EDGES_4PL: EdgeFacings = (
    (0x0302, E), (0x0602, NW),
    (0x0A01, NE), (0x0A05, SW), (0x0D03, E),
    (0x0606, SE), (0x040B, NW),
    (0x080B, SE), (0x0A0C, NW),
)
FOUR_ISLANDS_PORT_TYPES_4PL = (
    WHEAT_PORT, MISC_PORT,
    CLAY_PORT, MISC_PORT, SHEEP_PORT,
    MISC_PORT, WOOD_PORT,
    ORE_PORT, MISC_PORT,
)

FOUR_ISLANDS_HEX_TYPES_6PL = hex_pool({CLAY: 6, ORE: 6, SHEEP: 7, WHEAT: 6, WOOD: 7})
FOUR_ISLANDS_COORDS_6PL = (
    0x0104, 0x0106, 0x0303, 0x0305, 0x0502, 0x0504,
    0x010A, 0x0309, 0x030B, 0x0508, 0x050A,
    0x010E, 0x0110, 0x030F, 0x0311, 0x0510,
    0x0904, 0x0B03, 0x0B05, 0x0D04, 0x0D06,
    0x090A, 0x090C, 0x0B09, 0x0B0B, 0x0D0A,
    0x0910, 0x0912, 0x0B0F, 0x0B11, 0x0D0E, 0x0D10,
)
FOUR_ISLANDS_DICE_6PL = (
    2, 2, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 6, 6, 6, 6,
    8, 8, 8, 9, 9, 9, 9, 10, 10, 10, 10, 11, 11, 12, 12,
)
FOUR_ISLANDS_RANGES_6PL = ((1, 6), (2, 5), (3, 5), (4, 5), (5, 5), (6, 6))
FOUR_ISLANDS_PORT_EDGES_6PL: EdgeFacings = (
    (0x0005, SE), (0x0405, NW), (0x0603, NE),
    (0x000A, SW),
    (0x0010, SW), (0x040E, NE),
    (0x0B02, E), (0x0C06, SW),
    (0x0C08, NE),
    (0x0B12, W), (0x0E0D, NE),
)
FOUR_ISLANDS_PORT_TYPES_6PL = (
    CLAY_PORT, ORE_PORT, SHEEP_PORT, SHEEP_PORT, WHEAT_PORT, WOOD_PORT,
    MISC_PORT, MISC_PORT, MISC_PORT, MISC_PORT, MISC_PORT,
)

# Pirate Islands; tables are indexed by the 4- and 6-player variants

PIRATE_ISLANDS_BOARD_SIZE = {4: 0x1012, 6: 0x1016}
PIRATE_ISLANDS_PIRATE_HEX = {4: 0x0D0A, 6: 0x0D0A}

PIRATE_MAIN_HEX_TYPES = {
    4: (
        WHEAT, CLAY, ORE, WOOD,
        WOOD, SHEEP, WOOD,
        WHEAT, CLAY, SHEEP,
        SHEEP, WOOD, SHEEP,
        ORE, WOOD, WHEAT, CLAY,
    ),
    6: (
        SHEEP, WHEAT, CLAY,
        ORE, CLAY, WOOD,
        WOOD, WOOD, SHEEP, WOOD,
        WHEAT, WHEAT, ORE, SHEEP,
        SHEEP, SHEEP, CLAY, SHEEP,
        WHEAT, ORE, CLAY,
        WOOD, WHEAT, WOOD,
    ),
}
PIRATE_MAIN_COORDS = {
    4: (
        0x010C, 0x010E, 0x030D, 0x030F,
        0x050C, 0x050E, 0x0510,
        0x070B, 0x070D, 0x070F,
        0x090C, 0x090E, 0x0910,
        0x0B0D, 0x0B0F, 0x0D0C, 0x0D0E,
    ),
    6: (
        0x010E, 0x0110, 0x0112,
        0x030F, 0x0311, 0x0313,
        0x050E, 0x0510, 0x0512, 0x0514,
        0x070D, 0x070F, 0x0711, 0x0713,
        0x090E, 0x0910, 0x0912, 0x0914,
        0x0B0F, 0x0B11, 0x0B13,
        0x0D0E, 0x0D10, 0x0D12,
    ),
}
PIRATE_MAIN_DICE = {
    4: (4, 5, 9, 10, 3, 8, 5, 6, 9, 12, 11, 8, 9, 5, 2, 10, 4),
    6: (
        5, 4, 9, 3, 10, 11, 12, 6, 4, 10,
        6, 4, 5, 8,
        2, 10, 3, 5, 11, 9, 8, 9, 5, 4,
    ),
}
PIRATE_PORT_EDGES: Dict[int, EdgeFacings] = {
    4: (
        (0x000B, SE), (0x000D, SE), (0x010F, W),
        (0x0310, W), (0x0710, W), (0x0A10, NW),
        (0x0C0F, NW), (0x0E0C, NW),
    ),
    6: (
        (0x000F, SE), (0x0011, SE), (0x0113, W),
        (0x0314, W), (0x0714, W), (0x0B14, W),
        (0x0D13, W), (0x0E11, NE), (0x0E0F, NE),
    ),
}
PIRATE_PORT_TYPES = {
    4: port_pool({MISC_PORT: 3, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 1, WHEAT_PORT: 1, WOOD_PORT: 1}),
    6: port_pool({MISC_PORT: 4, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 1, WHEAT_PORT: 1, WOOD_PORT: 1}),
}
PIRATE_ISLES_HEX_TYPES = {
    4: (
        ORE, GOLD, WHEAT, ORE, GOLD, WHEAT, ORE,
        CLAY, CLAY, DESERT, DESERT, DESERT, SHEEP,
    ),
    6: (
        GOLD, ORE, GOLD, ORE, GOLD, ORE, GOLD, ORE,
        DESERT, DESERT, DESERT, DESERT, DESERT,
    ),
}
PIRATE_ISLES_COORDS = {
    4: (
        0x0106, 0x0104, 0x0502, 0x0D06, 0x0D04, 0x0902, 0x0705,
        0x0303, 0x0B03, 0x0309, 0x0508, 0x0908, 0x0B09,
    ),
    6: (
        0x0104, 0x0108, 0x0502, 0x0506, 0x0902, 0x0906, 0x0D04, 0x0D08,
        0x030B, 0x0504, 0x0709, 0x0904, 0x0B0B,
    ),
}
# only the first hexes along each path carry a number
PIRATE_ISLES_DICE = {
    4: (6, 11, 4, 6, 3, 10, 8),
    6: (3, 6, 11, 8, 11, 6, 3, 8),
}
PIRATE_FLEET_PATH = {
    4: (
        0x0D0A, 0x0D08, 0x0B07, 0x0906, 0x0707, 0x0506, 0x0307,
        0x0108, 0x010A, 0x030B, 0x050A, 0x0709, 0x090A, 0x0B0B,
    ),
    6: (
        0x0D0A, 0x0B09, 0x0908, 0x0707, 0x0508, 0x0309, 0x010A,
        0x010C, 0x030D, 0x050C, 0x070B, 0x090C, 0x0B0D, 0x0D0C,
    ),
}

# Through the Desert; tables are indexed by the 3-, 4- and 6-player variants

THROUGH_DESERT_BOARD_SIZE = {3: 0x1010, 4: 0x1012, 6: 0x1016}
THROUGH_DESERT_PIRATE_HEX = {3: 0x070D, 4: 0x070F, 6: 0x0D10}

THROUGH_DESERT_MAIN_HEX_TYPES = {
    3: hex_pool({CLAY: 3, ORE: 2, SHEEP: 3, WHEAT: 3, WOOD: 5, GOLD: 1}),
    4: hex_pool({CLAY: 4, ORE: 3, SHEEP: 4, WHEAT: 3, WOOD: 5, GOLD: 1}),
    6: hex_pool({CLAY: 7, ORE: 6, SHEEP: 5, WHEAT: 5, WOOD: 6, GOLD: 1}),
}
# the last hexes of each path are the strip beyond the desert (land area 2)
THROUGH_DESERT_MAIN_COORDS = {
    3: (
        0x0307, 0x0506, 0x0508, 0x0705, 0x0707,
        0x0902, 0x0904, 0x0906, 0x0908,
        0x0B03, 0x0B05, 0x0B07, 0x0D04, 0x0D06,
        0x0104, 0x0303, 0x0502,
    ),
    4: (
        0x0108, 0x0307, 0x0309,
        0x0506, 0x0508, 0x050A,
        0x0705, 0x0707, 0x0709,
        0x0902, 0x0904, 0x0906, 0x0908,
        0x0B03, 0x0B05, 0x0B07, 0x0D06,
        0x0104, 0x0303, 0x0502,
    ),
    6: (
        0x0508, 0x050A, 0x050C, 0x050E,
        0x0703, 0x0705, 0x0707, 0x0709, 0x070B, 0x070D, 0x070F,
        0x0902, 0x0904, 0x0906, 0x0908, 0x090A, 0x090C, 0x090E,
        0x0B03, 0x0B05, 0x0D04,
        0x0305, 0x0303, 0x0104, 0x0106, 0x0108, 0x010C, 0x010E, 0x0110, 0x0112,
    ),
}
THROUGH_DESERT_STRIP_LENGTH = {3: 3, 4: 3, 6: 9}
THROUGH_DESERT_DESERT_COORDS = {
    3: (0x0106, 0x0305, 0x0504),
    4: (0x0106, 0x0305, 0x0504),
    6: (0x0307, 0x0309, 0x030B, 0x030D, 0x030F),
}
THROUGH_DESERT_MAIN_DICE = {
    3: (2, 3, 3, 4, 4, 4, 5, 6, 6, 6, 8, 8, 9, 9, 10, 10, 11),
    4: (3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 8, 9, 9, 10, 10, 10, 11, 11, 11, 12),
    6: (
        2, 2, 3, 3, 3, 4, 4, 4, 5, 5, 5, 5,
        6, 6, 6, 6, 8, 8, 9, 9, 9, 10, 10, 10,
        11, 11, 11, 12, 12, 12,
    ),
}
THROUGH_DESERT_PORT_EDGES: Dict[int, EdgeFacings] = {
    3: (
        (0x0207, SW), (0x0808, SW), (0x0A08, NW),
        (0x0D07, W), (0x0E04, NW), (0x0D03, E),
        (0x0A01, NE), (0x0803, SE),
    ),
    4: (
        (0x0109, W), (0x040A, SW), (0x060A, NW),
        (0x0A08, NW), (0x0D07, W), (0x0E05, NE),
        (0x0C03, NW), (0x0B02, E), (0x0704, E),
    ),
    6: (
        (0x0B02, E), (0x0801, SE), (0x0602, SE),
        (0x0606, SE), (0x050F, W), (0x080F, NW),
        (0x0A0D, NE), (0x0A09, NE), (0x0A06, NW),
        (0x0C05, NW), (0x0E03, NE),
    ),
}
THROUGH_DESERT_PORT_TYPES = {
    3: port_pool({MISC_PORT: 3, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 1, WHEAT_PORT: 1, WOOD_PORT: 1}),
    4: port_pool({MISC_PORT: 4, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 1, WHEAT_PORT: 1, WOOD_PORT: 1}),
    6: port_pool({MISC_PORT: 5, CLAY_PORT: 1, ORE_PORT: 1, SHEEP_PORT: 2, WHEAT_PORT: 1, WOOD_PORT: 1}),
}
THROUGH_DESERT_SMALL_HEX_TYPES = {
    3: (ORE, ORE, SHEEP, WHEAT, GOLD),
    4: (CLAY, ORE, ORE, SHEEP, WHEAT, WHEAT, GOLD),
    6: (ORE, SHEEP, SHEEP, WHEAT, WHEAT, WOOD, GOLD, GOLD),
}
THROUGH_DESERT_SMALL_RANGES = {
    3: ((3, 2), (4, 1), (5, 2)),
    4: ((3, 3), (4, 2), (5, 2)),
    6: ((3, 2), (4, 1), (5, 4), (6, 1)),
}
THROUGH_DESERT_SMALL_COORDS = {
    3: (0x010A, 0x030B, 0x070B, 0x0B0B, 0x0D0A),
    4: (0x010C, 0x030D, 0x050E, 0x090C, 0x090E, 0x0D0A, 0x0D0C),
    6: (0x0D08, 0x0D0A, 0x0D0E, 0x0D12, 0x0B11, 0x0B13, 0x0914, 0x0514),
}
THROUGH_DESERT_SMALL_DICE = {
    3: (5, 5, 8, 9, 11),
    4: (2, 3, 4, 5, 6, 9, 12),
    6: (2, 3, 4, 8, 8, 9, 10, 11),
}

# Forgotten Tribe; tables are indexed by the 4- and 6-player variants

FORGOTTEN_TRIBE_BOARD_SIZE = {4: 0x0E11, 6: 0x0E15}
FORGOTTEN_TRIBE_PIRATE_HEX = {4: 0x0108, 6: 0x010E}

FORGOTTEN_TRIBE_MAIN_HEX_TYPES = {
    4: hex_pool({CLAY: 3, ORE: 3, SHEEP: 4, WHEAT: 4, WOOD: 4}),
    6: hex_pool({CLAY: 6, ORE: 5, SHEEP: 5, WHEAT: 6, WOOD: 7}),
}
FORGOTTEN_TRIBE_MAIN_COORDS = {
    4: (
        0x0502, 0x0504, 0x0506, 0x0508, 0x050A, 0x050C,
        0x0703, 0x0705, 0x0707, 0x0709, 0x070B, 0x070D,
        0x0902, 0x0904, 0x0906, 0x0908, 0x090A, 0x090C,
    ),
    6: (
        0x0502, 0x0504, 0x0506, 0x0508, 0x050A, 0x050C, 0x050E, 0x0510, 0x0512, 0x0514,
        0x0703, 0x0705, 0x0707, 0x0709, 0x070B, 0x070D, 0x070F, 0x0711, 0x0713,
        0x0902, 0x0904, 0x0906, 0x0908, 0x090A, 0x090C, 0x090E, 0x0910, 0x0912, 0x0914,
    ),
}
FORGOTTEN_TRIBE_MAIN_DICE = {
    4: (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12),
    6: (
        2, 3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 6, 6, 6,
        8, 8, 8, 9, 9, 9, 10, 10, 10, 11, 11, 11, 12,
    ),
}
FORGOTTEN_TRIBE_PORT_EDGES: Dict[int, EdgeFacings] = {
    4: (
        (0x0003, SE), (0x0009, SE), (0x0410, SW),
        (0x0A10, NW), (0x0E0A, NW), (0x0E03, NE),
    ),
    6: (
        (0x0006, SW), (0x0009, SE), (0x000F, SE), (0x0012, SW),
        (0x0E0F, NE), (0x0E0C, NW), (0x0E05, NE), (0x0E03, NE),
    ),
}
FORGOTTEN_TRIBE_PORT_TYPES = {
    4: (CLAY_PORT, ORE_PORT, SHEEP_PORT, WHEAT_PORT, WOOD_PORT, MISC_PORT),
    6: (CLAY_PORT, ORE_PORT, SHEEP_PORT, WHEAT_PORT, WOOD_PORT, MISC_PORT, MISC_PORT, MISC_PORT),
}
FORGOTTEN_TRIBE_ISLES_HEX_TYPES = {
    4: (
        GOLD, ORE, DESERT, ORE, WHEAT, SHEEP,
        WOOD, GOLD, DESERT, CLAY, CLAY, DESERT,
    ),
    6: (
        GOLD, WHEAT, CLAY, ORE, DESERT, DESERT,
        SHEEP, SHEEP, GOLD, GOLD, DESERT, DESERT,
    ),
}
FORGOTTEN_TRIBE_ISLES_COORDS = {
    4: (
        0x0104, 0x0106, 0x010A, 0x010C, 0x010E, 0x0510,
        0x0910, 0x0D0E, 0x0D0C, 0x0D0A, 0x0D06, 0x0D04,
    ),
    6: (
        0x0104, 0x0106, 0x010A, 0x010C, 0x0110, 0x0112,
        0x0D04, 0x0D06, 0x0D0A, 0x0D0C, 0x0D10, 0x0D12,
    ),
}
# edges holding special victory points and set-aside development cards
FORGOTTEN_TRIBE_VP_EDGES = {
    4: (0x0004, 0x000A, 0x000E, 0x0511, 0x0E04, 0x0E09, 0x0E0E, 0x0911),
    6: (0x0003, 0x0005, 0x000A, 0x000B, 0x0010, 0x0E06, 0x0E0A, 0x0E0B, 0x0E10, 0x0E12),
}
FORGOTTEN_TRIBE_DEV_CARD_EDGES = {
    4: (0x0103, 0x010F, 0x0D03, 0x0D0F),
    6: (0x0103, 0x000C, 0x0113, 0x0D03, 0x0E09, 0x0D13),
}
