from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.table import Table

from catanalyzer.analysis.analyzer import analyze_board
from catanalyzer.analysis.types import DEFAULT_TOP_K, AnalysisConfig, AnalysisResult
from catanalyzer.domain.board import Board, BoardFormatError, HexTile, Resource
from catanalyzer.domain.randomizer import generate_randomized_board

logger = logging.getLogger(__name__)

RESOURCE_STYLES = {
    Resource.WOOD: "green",
    Resource.BRICK: "dark_orange3",
    Resource.WHEAT: "yellow",
    Resource.ORE: "grey62",
    Resource.SHEEP: "bright_green",
    Resource.DESERT: "tan",
    Resource.NONE: "dim",
}


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log analysis details to stderr.")
def cli(verbose: bool) -> None:
    """Rank the best settlement spots on a Catan board."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.option(
    "--board",
    "board_file",
    type=click.File("r"),
    default=None,
    help="Board JSON ({'radius': 2, 'tiles': [{q, r, resource, number}, ...]}). Use - for stdin.",
)
@click.option(
    "--seed",
    default=None,
    type=int,
    help="Analyze a randomized board built from this seed when --board is not given.",
)
@click.option(
    "--top",
    "top_k",
    default=DEFAULT_TOP_K,
    show_default=True,
    type=click.IntRange(1, None),
    help="Number of ranked spots to show.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON.")
def analyze(board_file, seed: int | None, top_k: int, as_json: bool) -> None:
    """Score every junction on the board and print the best ones."""
    if board_file is not None and seed is not None:
        raise click.UsageError("--board and --seed cannot be combined.")
    if board_file is not None:
        board = _load_board(board_file)
    else:
        board = generate_randomized_board(seed)
        logger.debug("Generated randomized board with seed=%s", seed)

    missing = board.missing_assignments()
    if missing:
        coords = ", ".join(f"{q},{r}" for q, r in missing)
        raise click.UsageError(f"Board is incomplete; assign a resource and number to: {coords}")

    result = analyze_board(board, AnalysisConfig(top_k=top_k))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    console = Console()
    if not result.ranked:
        console.print("[yellow]No settlement spots found on this board.[/yellow]")
        return
    console.print(results_table(result))


@cli.command()
@click.option("--seed", default=None, type=int, help="Seed for a reproducible board.")
def randomize(seed: int | None) -> None:
    """Print a randomized standard board as JSON."""
    click.echo(json.dumps(generate_randomized_board(seed).to_dict(), indent=2))


def results_table(result: AnalysisResult) -> Table:
    table = Table(title=f"Top Settlements ({result.junction_count} junctions scored)")
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right")
    table.add_column("Top")
    table.add_column("Left")
    table.add_column("Right")
    table.add_column("Diversity", justify="right")
    for ranked in result.ranked:
        table.add_row(
            str(ranked.rank),
            f"{ranked.score:.1f}",
            *(_tile_label(tile) for tile in ranked.oriented.as_tuple()),
            str(ranked.diversity),
        )
    return table


def _tile_label(tile: HexTile) -> str:
    style = RESOURCE_STYLES.get(tile.resource, "")
    return f"[{style}]{tile.resource.value} {tile.number}[/{style}] ({tile.q},{tile.r})"


def _load_board(board_file) -> Board:
    try:
        payload = json.load(board_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}", param_hint="--board") from exc
    if not isinstance(payload, dict):
        raise click.BadParameter("Board JSON must be an object.", param_hint="--board")
    try:
        return Board.from_dict(payload)
    except BoardFormatError as exc:
        raise click.BadParameter(str(exc), param_hint="--board") from exc


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
