from __future__ import annotations

from typing import Callable, Dict, Optional

from ..config import BoardConfig
from ..domain.board import PIRATE_PATH_PART
from ..domain.geometry import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH, parse_board_size
from ..domain.hexes import HexType
from ..domain.layout_spec import LayoutSpec, PortSpec, ScenarioLayout
from ..domain.scenario import Scenario
from . import tables as t

ScenarioBuilder = Callable[[int, Optional[int]], ScenarioLayout]

DEV_CARD_EDGES_PART = "CE"
VP_EDGES_PART = "VE"


def _four_or_six(variant: int) -> int:
    return 6 if variant == 6 else 4


def _sea_board(variant: int, clump_limit: Optional[int]) -> ScenarioLayout:
    variant = _four_or_six(variant)
    six = variant == 6
    mainland = LayoutSpec.single_area(
        t.MAINLAND_HEX_TYPES_6PL if six else t.MAINLAND_HEX_TYPES_4PL,
        t.MAINLAND_DICE_PATH_6PL if six else t.MAINLAND_DICE_PATH_4PL,
        t.MAINLAND_DICE_6PL if six else t.MAINLAND_DICE_4PL,
        land_area=1,
        shuffle_land_hexes=True,
        clump_limit=clump_limit,
        label="mainland",
    )
    islands = LayoutSpec(
        hex_types=tuple(t.ISLANDS_HEX_TYPES_6PL if six else t.ISLANDS_HEX_TYPES_4PL),
        coords=t.ISLANDS_COORDS_6PL if six else t.ISLANDS_COORDS_4PL,
        dice_numbers=t.ISLANDS_DICE_6PL if six else t.ISLANDS_DICE_4PL,
        shuffle_land_hexes=True,
        shuffle_dice_numbers=True,
        land_area_ranges=t.ISLANDS_RANGES_6PL if six else t.ISLANDS_RANGES_4PL,
        label="outlying islands",
    )
    return ScenarioLayout(
        scenario=Scenario.NONE,
        player_variant=variant,
        board_height=DEFAULT_BOARD_HEIGHT + 3 if six else DEFAULT_BOARD_HEIGHT,
        board_width=DEFAULT_BOARD_WIDTH,
        land_area_count=5,
        land_groups=(mainland, islands),
        mainland_ports=PortSpec(
            port_types=tuple(t.MAINLAND_PORT_TYPES_6PL if six else t.MAINLAND_PORT_TYPES_4PL),
            edge_facings=t.MAINLAND_PORT_EDGES_6PL if six else t.MAINLAND_PORT_EDGES_4PL,
            clump_limit=clump_limit,
        ),
        island_ports=PortSpec(
            port_types=t.ISLANDS_PORT_TYPES_6PL if six else t.ISLANDS_PORT_TYPES_4PL,
            edge_facings=t.ISLANDS_PORT_EDGES_6PL if six else t.ISLANDS_PORT_EDGES_4PL,
        ),
    )


def _fog_island(variant: int, clump_limit: Optional[int]) -> ScenarioLayout:
    if variant == 6:
        main_types, main_coords, main_dice = t.FOG_MAIN_HEX_TYPES_6PL, t.FOG_MAIN_COORDS_6PL, t.FOG_MAIN_DICE_6PL
        fog_types, fog_coords, fog_dice = t.FOG_ISLAND_HEX_TYPES_6PL, t.FOG_ISLAND_COORDS_6PL, t.FOG_ISLAND_DICE_6PL
        port_types, port_edges = t.FOG_PORT_TYPES_6PL, t.FOG_PORT_EDGES_6PL
        board_size = t.FOG_BOARD_SIZE_6PL
    elif variant == 4:
        main_types, main_coords, main_dice = t.FOG_MAIN_HEX_TYPES_4PL, t.FOG_MAIN_COORDS_4PL, t.FOG_MAIN_DICE_4PL
        fog_types, fog_coords, fog_dice = t.FOG_ISLAND_HEX_TYPES, t.FOG_ISLAND_COORDS_4PL, t.FOG_ISLAND_DICE_4PL
        port_types, port_edges = t.FOG_PORT_TYPES_4PL, t.FOG_PORT_EDGES_4PL
        board_size = t.FOG_BOARD_SIZE_4PL
    else:
        main_types, main_coords, main_dice = t.FOG_MAIN_HEX_TYPES_3PL, t.FOG_MAIN_COORDS_3PL, t.FOG_MAIN_DICE_3PL
        fog_types, fog_coords, fog_dice = t.FOG_ISLAND_HEX_TYPES, t.FOG_ISLAND_COORDS_3PL, t.FOG_ISLAND_DICE_3PL
        port_types, port_edges = t.FOG_PORT_TYPES_3PL, t.FOG_PORT_EDGES_3PL
        board_size = t.FOG_BOARD_SIZE_4PL

    groups = [
        LayoutSpec.single_area(
            main_types,
            main_coords,
            main_dice,
            land_area=1,
            shuffle_land_hexes=True,
            shuffle_dice_numbers=True,
            clump_limit=clump_limit,
            label="main islands",
        ),
        LayoutSpec.single_area(
            fog_types,
            fog_coords,
            fog_dice,
            land_area=2,
            shuffle_land_hexes=True,
            shuffle_dice_numbers=True,
            clump_limit=clump_limit if variant == 6 else None,
            label="fog island",
        ),
    ]
    if variant == 6:
        groups.append(
            LayoutSpec.single_area(
                t.FOG_GOLD_CORNER_HEX_TYPES,
                t.FOG_GOLD_CORNER_COORDS,
                t.FOG_GOLD_CORNER_DICE,
                land_area=3,
                label="gold corners",
            )
        )

    height, width = parse_board_size(board_size)
    return ScenarioLayout(
        scenario=Scenario.FOG_ISLAND,
        player_variant=variant,
        board_height=height,
        board_width=width,
        land_area_count=4 if variant == 6 else 3,
        land_groups=tuple(groups),
        # the smaller boards' port types are laid out to match their islands
        mainland_ports=PortSpec(
            port_types=tuple(port_types),
            edge_facings=port_edges,
            shuffle=variant == 6,
            clump_limit=clump_limit,
        ),
        fog_hexes=fog_coords,
    )


def _four_islands(variant: int, clump_limit: Optional[int]) -> ScenarioLayout:
    if variant == 6:
        hex_types, coords, dice = t.FOUR_ISLANDS_HEX_TYPES_6PL, t.FOUR_ISLANDS_COORDS_6PL, t.FOUR_ISLANDS_DICE_6PL
        ranges = t.FOUR_ISLANDS_RANGES_6PL
        port_types, port_edges = t.FOUR_ISLANDS_PORT_TYPES_6PL, t.FOUR_ISLANDS_PORT_EDGES_6PL
        height, width = parse_board_size(t.FOUR_ISLANDS_BOARD_SIZE_6PL)
    elif variant == 4:
        hex_types, coords, dice = t.FOUR_ISLANDS_HEX_TYPES_4PL, t.FOUR_ISLANDS_COORDS_4PL, t.FOUR_ISLANDS_DICE_4PL
        ranges = t.FOUR_ISLANDS_RANGES_4PL
        port_types, port_edges = t.FOUR_ISLANDS_PORT_TYPES_4PL, t.FOUR_ISLANDS_PORT_EDGES_4PL
        height, width = parse_board_size(t.FOUR_ISLANDS_BOARD_SIZE_4PL)
    else:
        hex_types, coords, dice = t.FOUR_ISLANDS_HEX_TYPES_3PL, t.FOUR_ISLANDS_COORDS_3PL, t.FOUR_ISLANDS_DICE_3PL
        ranges = t.FOUR_ISLANDS_RANGES_3PL
        port_types, port_edges = t.FOUR_ISLANDS_PORT_TYPES_3PL, t.FOUR_ISLANDS_PORT_EDGES_3PL
        height, width = DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH

    islands = LayoutSpec(
        hex_types=tuple(hex_types),
        coords=coords,
        dice_numbers=dice,
        shuffle_land_hexes=True,
        shuffle_dice_numbers=True,
        land_area_ranges=ranges,
        clump_limit=clump_limit,
        label="islands",
    )
    return ScenarioLayout(
        scenario=Scenario.FOUR_ISLANDS,
        player_variant=variant,
        board_height=height,
        board_width=width,
        land_area_count=len(ranges) + 1,
        land_groups=(islands,),
        mainland_ports=PortSpec(port_types=tuple(port_types), edge_facings=port_edges, clump_limit=clump_limit),
        pirate_hex=t.FOUR_ISLANDS_PIRATE_HEX[variant],
        # players may start on any island
        starting_land_area=0,
    )


def _through_the_desert(variant: int, clump_limit: Optional[int]) -> ScenarioLayout:
    desert_coords = t.THROUGH_DESERT_DESERT_COORDS[variant]
    main_coords = t.THROUGH_DESERT_MAIN_COORDS[variant]
    strip_length = t.THROUGH_DESERT_STRIP_LENGTH[variant]
    small_ranges = t.THROUGH_DESERT_SMALL_RANGES[variant]

    desert = LayoutSpec.single_area(
        [HexType.DESERT] * len(desert_coords),
        desert_coords,
        None,
        land_area=0,
        label="desert strip",
    )
    main = LayoutSpec(
        hex_types=tuple(t.THROUGH_DESERT_MAIN_HEX_TYPES[variant]),
        coords=main_coords,
        dice_numbers=t.THROUGH_DESERT_MAIN_DICE[variant],
        shuffle_land_hexes=True,
        shuffle_dice_numbers=True,
        land_area_ranges=((1, len(main_coords) - strip_length), (2, strip_length)),
        clump_limit=clump_limit,
        label="main island",
    )
    small = LayoutSpec(
        hex_types=t.THROUGH_DESERT_SMALL_HEX_TYPES[variant],
        coords=t.THROUGH_DESERT_SMALL_COORDS[variant],
        dice_numbers=t.THROUGH_DESERT_SMALL_DICE[variant],
        shuffle_land_hexes=True,
        shuffle_dice_numbers=True,
        land_area_ranges=small_ranges,
        label="small islands",
    )
    height, width = parse_board_size(t.THROUGH_DESERT_BOARD_SIZE[variant])
    return ScenarioLayout(
        scenario=Scenario.THROUGH_THE_DESERT,
        player_variant=variant,
        board_height=height,
        board_width=width,
        land_area_count=1 + 2 + len(small_ranges),
        land_groups=(desert, main, small),
        mainland_ports=PortSpec(
            port_types=tuple(t.THROUGH_DESERT_PORT_TYPES[variant]),
            edge_facings=t.THROUGH_DESERT_PORT_EDGES[variant],
            clump_limit=clump_limit,
        ),
        pirate_hex=t.THROUGH_DESERT_PIRATE_HEX[variant],
    )


def _pirate_islands(variant: int, clump_limit: Optional[int]) -> ScenarioLayout:
    variant = _four_or_six(variant)
    main = LayoutSpec.single_area(
        t.PIRATE_MAIN_HEX_TYPES[variant],
        t.PIRATE_MAIN_COORDS[variant],
        t.PIRATE_MAIN_DICE[variant],
        land_area=1,
        label="main island",
    )
    # players can't settle the pirate islands (land area 0)
    isles = LayoutSpec.single_area(
        t.PIRATE_ISLES_HEX_TYPES[variant],
        t.PIRATE_ISLES_COORDS[variant],
        t.PIRATE_ISLES_DICE[variant],
        land_area=0,
        label="pirate islands",
    )
    height, width = parse_board_size(t.PIRATE_ISLANDS_BOARD_SIZE[variant])
    return ScenarioLayout(
        scenario=Scenario.PIRATE_ISLANDS,
        player_variant=variant,
        board_height=height,
        board_width=width,
        land_area_count=2,
        land_groups=(main, isles),
        mainland_ports=PortSpec(
            port_types=tuple(t.PIRATE_PORT_TYPES[variant]),
            edge_facings=t.PIRATE_PORT_EDGES[variant],
            clump_limit=clump_limit,
        ),
        pirate_hex=t.PIRATE_ISLANDS_PIRATE_HEX[variant],
        has_robber=False,
        added_parts=((PIRATE_PATH_PART, t.PIRATE_FLEET_PATH[variant]),),
    )


def _forgotten_tribe(variant: int, clump_limit: Optional[int]) -> ScenarioLayout:
    variant = _four_or_six(variant)
    main = LayoutSpec.single_area(
        t.FORGOTTEN_TRIBE_MAIN_HEX_TYPES[variant],
        t.FORGOTTEN_TRIBE_MAIN_COORDS[variant],
        t.FORGOTTEN_TRIBE_MAIN_DICE[variant],
        land_area=1,
        shuffle_land_hexes=True,
        shuffle_dice_numbers=True,
        clump_limit=clump_limit,
        label="main island",
    )
    isles = LayoutSpec.single_area(
        t.FORGOTTEN_TRIBE_ISLES_HEX_TYPES[variant],
        t.FORGOTTEN_TRIBE_ISLES_COORDS[variant],
        None,
        land_area=0,
        label="tribe islands",
    )
    ports = PortSpec(
        port_types=t.FORGOTTEN_TRIBE_PORT_TYPES[variant],
        edge_facings=t.FORGOTTEN_TRIBE_PORT_EDGES[variant],
        clump_limit=clump_limit if variant == 6 else None,
    )
    height, width = parse_board_size(t.FORGOTTEN_TRIBE_BOARD_SIZE[variant])
    return ScenarioLayout(
        scenario=Scenario.FORGOTTEN_TRIBE,
        player_variant=variant,
        board_height=height,
        board_width=width,
        land_area_count=2,
        land_groups=(main, isles),
        # the 4-player board has too few 3:1 ports to break up runs
        mainland_ports=ports if variant == 6 else None,
        island_ports=None if variant == 6 else ports,
        pirate_hex=t.FORGOTTEN_TRIBE_PIRATE_HEX[variant],
        added_parts=(
            (DEV_CARD_EDGES_PART, t.FORGOTTEN_TRIBE_DEV_CARD_EDGES[variant]),
            (VP_EDGES_PART, t.FORGOTTEN_TRIBE_VP_EDGES[variant]),
        ),
    )


SCENARIO_BUILDERS: Dict[Scenario, ScenarioBuilder] = {
    Scenario.NONE: _sea_board,
    Scenario.FOG_ISLAND: _fog_island,
    Scenario.FOUR_ISLANDS: _four_islands,
    Scenario.THROUGH_THE_DESERT: _through_the_desert,
    Scenario.PIRATE_ISLANDS: _pirate_islands,
    Scenario.FORGOTTEN_TRIBE: _forgotten_tribe,
}


def resolve_scenario(config: BoardConfig) -> ScenarioLayout:
    """Look up the layout tables for the configured scenario and player count."""
    builder = SCENARIO_BUILDERS[config.scenario]
    return builder(config.player_variant, config.clump_limit)
