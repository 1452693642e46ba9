from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Set

from ..domain.hexes import HexType, PortType
from .state import GenerationState

IGNORED_CLUMP_TYPES = (HexType.WATER, HexType.DESERT)


def find_land_clumps(state: GenerationState, coords: Iterable[int], limit: int) -> List[Set[int]]:
    """Same-terrain connected groups larger than ``limit`` among ``coords``.

    Only the given coordinates are searched; hexes placed earlier are ignored.
    """
    unvisited = set(coords)
    clumps: List[Set[int]] = []
    for start in sorted(unvisited):
        if start not in unvisited:
            continue
        unvisited.discard(start)
        hex_type = state.hex_type(start)
        if hex_type in IGNORED_CLUMP_TYPES:
            continue

        component = {start}
        queue: deque[int] = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in state.geometry.adjacent_hex_coords(current):
                if neighbor in unvisited and state.hex_type(neighbor) is hex_type:
                    unvisited.discard(neighbor)
                    component.add(neighbor)
                    queue.append(neighbor)

        if len(component) > limit:
            clumps.append(component)
    return clumps


def longest_port_run(port_types: Sequence[PortType]) -> int:
    """Longest circular run of ports sharing a class (3:1 versus 2:1)."""
    if not port_types:
        return 0
    classes = [port_type.is_generic for port_type in port_types]
    if all(value == classes[0] for value in classes):
        return len(classes)

    # rotate so the sequence starts at a class change; runs then never wrap
    start = next(index for index in range(len(classes)) if classes[index] != classes[index - 1])
    rotated = classes[start:] + classes[:start]
    longest = run = 1
    for previous, current in zip(rotated, rotated[1:]):
        run = run + 1 if current == previous else 1
        longest = max(longest, run)
    return longest


def has_port_clump(port_types: Sequence[PortType], limit: int) -> bool:
    return longest_port_run(port_types) > limit
