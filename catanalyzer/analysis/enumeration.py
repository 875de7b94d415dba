from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from catanalyzer.domain.board import Board, HexTile
from catanalyzer.domain.hexgrid import Axial, are_adjacent, neighbor_coords

from .runtime import AnalysisRuntime
from .types import Junction

KEY_SEPARATOR = "|"


def junction_key(tiles: Iterable[HexTile]) -> str:
    return KEY_SEPARATOR.join(sorted(f"{tile.q},{tile.r}" for tile in tiles))


def discovery_order(tiles: Sequence[HexTile]) -> Tuple[HexTile, ...]:
    """Order tiles the way the enumerator first meets them on a generated board.

    The pivot is the tile earliest in board order (q, then r); its partners
    follow in neighbour-scan order around it.
    """
    pivot = min(tiles, key=lambda tile: tile.coord)
    scan_index = {coord: index for index, coord in enumerate(neighbor_coords(pivot.q, pivot.r))}
    partners = sorted(
        (tile for tile in tiles if tile is not pivot),
        key=lambda tile: scan_index.get(tile.coord, len(scan_index)),
    )
    return (pivot, *partners)


def production_neighbors(tile: HexTile, lookup: Dict[Axial, HexTile]) -> List[HexTile]:
    return [lookup[coord] for coord in neighbor_coords(tile.q, tile.r) if coord in lookup]


def enumerate_junctions(board: Board, runtime: AnalysisRuntime | None = None) -> List[Junction]:
    """Return every junction of three production tiles, each exactly once.

    Each production tile acts as a pivot; any two of its production neighbours
    that also touch each other close a triangle around one shared vertex. A
    vertex is reached once per member tile, so later discoveries are dropped
    by canonical key.
    """
    pivots = board.production_tiles()
    lookup = {tile.coord: tile for tile in pivots}
    seen: set[str] = set()
    junctions: List[Junction] = []
    total = len(pivots)

    for index, pivot in enumerate(pivots, start=1):
        if runtime is not None:
            runtime.report_progress("Enumerating junctions…", index / max(1, total))
        neighbors = production_neighbors(pivot, lookup)
        for first_index in range(len(neighbors)):
            for second_index in range(first_index + 1, len(neighbors)):
                first = neighbors[first_index]
                second = neighbors[second_index]
                if not are_adjacent(first.coord, second.coord):
                    continue
                tiles = (pivot, first, second)
                key = junction_key(tiles)
                if key in seen:
                    continue
                seen.add(key)
                junctions.append(
                    Junction(
                        key=key,
                        tiles=tiles,
                        vertex=(
                            sum(tile.q for tile in tiles) / 3,
                            sum(tile.r for tile in tiles) / 3,
                        ),
                    )
                )
    return junctions
