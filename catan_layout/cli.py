from __future__ import annotations

import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .config import MAX_PLAYERS, MIN_CLUMP_SIZE, MIN_PLAYERS, BoardConfig
from .domain.board import BoardLayout
from .domain.geometry import format_coord
from .domain.hexes import HexType, is_frequent
from .domain.scenario import Scenario
from .errors import LayoutConfigError, LayoutGenerationError, LayoutStateError
from .generation.board import generate_board
from .generation.signature import layout_digest

HEX_STYLES = {
    HexType.CLAY: "red3",
    HexType.ORE: "grey62",
    HexType.SHEEP: "green_yellow",
    HexType.WHEAT: "gold1",
    HexType.WOOD: "dark_green",
    HexType.DESERT: "tan",
    HexType.GOLD: "bold yellow",
    HexType.WATER: "blue",
    HexType.FOG: "grey35",
}


def _configure_logging(console: Console, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _hex_table(board: BoardLayout) -> Table:
    table = Table(title=f"{board.scenario.label} ({board.player_variant} players)")
    table.add_column("Hex", style="cyan")
    table.add_column("Terrain")
    table.add_column("Dice", justify="right")
    table.add_column("Area", justify="right")
    for coord in board.land_hex_coords:
        hex_type = board.hex_type(coord)
        number = board.dice_number(coord)
        number_text = "-" if not number else str(number)
        if is_frequent(number):
            number_text = f"[bold red]{number_text}[/bold red]"
        area = board.node_land_area(board.geometry.nodes_of_hex(coord)[0])
        terrain = Text(hex_type.value, style=HEX_STYLES.get(hex_type, ""))
        table.add_row(format_coord(coord), terrain, number_text, str(area))
    return table


def _port_table(board: BoardLayout) -> Table:
    table = Table(title="Ports")
    table.add_column("Edge", style="cyan")
    table.add_column("Facing")
    table.add_column("Trade")
    table.add_column("Nodes")
    for port in board.ports:
        table.add_row(
            format_coord(port.edge),
            port.facing.name,
            port.port_type.value,
            ", ".join(format_coord(node) for node in port.nodes),
        )
    return table


def _summary_table(board: BoardLayout) -> Table:
    table = Table(title="Summary", show_header=False)
    table.add_column("Item", style="bold")
    table.add_column("Value")
    table.add_row("Board size", f"{board.height} x {board.width}")
    table.add_row("Robber", format_coord(board.robber_hex) if board.robber_hex is not None else "none")
    table.add_row("Pirate", format_coord(board.pirate_hex) if board.pirate_hex is not None else "none")
    table.add_row("Starting land area", str(board.starting_land_area))
    sizes = board.land_area_sizes()
    table.add_row("Land areas", ", ".join(f"{area}: {count} nodes" for area, count in sizes.items()) or "none")
    table.add_row("Fog hexes", str(len(board.fog_hidden_hexes)))
    table.add_row("6s and 8s separated", "yes" if board.frequent_numbers_balanced else "no")
    for name, part in sorted(board.added_parts.items()):
        table.add_row(f"Layout part {name}", f"{len(part)} entries")
    table.add_row("Digest", layout_digest(board))
    return table


@click.command()
@click.option(
    "--scenario",
    default="NONE",
    show_default=True,
    type=click.Choice([scenario.name for scenario in Scenario], case_sensitive=False),
    help="Scenario layout to generate.",
)
@click.option(
    "--players",
    default=4,
    show_default=True,
    type=click.IntRange(MIN_PLAYERS, MAX_PLAYERS),
    help="Player count; picks the 3-, 4- or 6-player layout.",
)
@click.option("--seed", default=None, type=int, help="Random seed for a reproducible board.")
@click.option(
    "--clump-size",
    default=3,
    show_default=True,
    type=click.IntRange(MIN_CLUMP_SIZE, None),
    help="Largest group of same-terrain hexes allowed when breaking clumps.",
)
@click.option(
    "--break-clumps/--no-break-clumps",
    default=True,
    show_default=True,
    help="Reshuffle terrain and ports that form clumps.",
)
@click.option(
    "--board-attempts",
    default=5,
    show_default=True,
    type=click.IntRange(1, None),
    help="Whole-board attempts before giving up.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log every placement step.")
def main(
    scenario: str,
    players: int,
    seed: Optional[int],
    clump_size: int,
    break_clumps: bool,
    board_attempts: int,
    verbose: bool,
):
    """Generate a randomized sea board layout and print it."""
    console = Console()
    _configure_logging(console, verbose)

    try:
        config = BoardConfig(
            scenario=Scenario[scenario.upper()],
            player_count=players,
            break_clumps=break_clumps,
            clump_size=clump_size,
            max_board_attempts=board_attempts,
        )
    except LayoutConfigError as exc:
        raise click.BadParameter(str(exc)) from exc

    try:
        board = generate_board(config, seed=seed)
    except (LayoutConfigError, LayoutGenerationError, LayoutStateError) as exc:
        raise click.ClickException(str(exc)) from exc

    console.print(_hex_table(board))
    if board.ports:
        console.print(_port_table(board))
    console.print(_summary_table(board))


if __name__ == "__main__":
    main()
