from __future__ import annotations

from enum import Enum, IntEnum
from typing import FrozenSet, Optional


class HexType(str, Enum):
    WATER = "water"
    CLAY = "clay"
    ORE = "ore"
    SHEEP = "sheep"
    WHEAT = "wheat"
    WOOD = "wood"
    DESERT = "desert"
    GOLD = "gold"
    FOG = "fog"
    UNSET = "unset"

    @property
    def is_land(self) -> bool:
        return self not in (HexType.WATER, HexType.UNSET)


class PortType(str, Enum):
    ANY_3TO1 = "3:1"
    CLAY_2TO1 = "clay 2:1"
    ORE_2TO1 = "ore 2:1"
    SHEEP_2TO1 = "sheep 2:1"
    WHEAT_2TO1 = "wheat 2:1"
    WOOD_2TO1 = "wood 2:1"

    @property
    def is_generic(self) -> bool:
        return self is PortType.ANY_3TO1


class Facing(IntEnum):
    """Direction from a port's edge toward the land hex it serves."""

    NE = 1
    E = 2
    SE = 3
    SW = 4
    W = 5
    NW = 6

    @property
    def opposite(self) -> "Facing":
        return Facing((self.value + 2) % 6 + 1)


DiceNumber = Optional[int]

FREQUENT_NUMBERS: FrozenSet[int] = frozenset({6, 8})
RESOURCE_HEX_TYPES = (HexType.CLAY, HexType.ORE, HexType.SHEEP, HexType.WHEAT, HexType.WOOD)


def is_frequent(number: DiceNumber) -> bool:
    return number in FREQUENT_NUMBERS


def is_rare(number: DiceNumber) -> bool:
    if number is None or number <= 0:
        return False
    return number <= 4 or number >= 10
