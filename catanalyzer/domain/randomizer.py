from __future__ import annotations

import random
from typing import Dict, Optional

from .board import Board, HexTile, Resource, build_board
from .hexgrid import BOARD_RADIUS

RESOURCE_COUNTS: Dict[Resource, int] = {
    Resource.WOOD: 4,
    Resource.SHEEP: 4,
    Resource.WHEAT: 4,
    Resource.BRICK: 3,
    Resource.ORE: 3,
    Resource.DESERT: 1,
}

NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]
STANDARD_TILE_COUNT = sum(RESOURCE_COUNTS.values())


def generate_randomized_board(seed: Optional[int] = None) -> Board:
    return randomize_board(build_board(BOARD_RADIUS), seed=seed)


def randomize_board(board: Board, seed: Optional[int] = None) -> Board:
    """Return a copy of ``board`` filled from the standard resource and number pools."""
    if len(board) != STANDARD_TILE_COUNT:
        raise ValueError(
            f"Randomizing needs a {STANDARD_TILE_COUNT}-tile board, received {len(board)} tiles."
        )
    rng = random.Random(seed)

    resources = []
    for resource, count in RESOURCE_COUNTS.items():
        resources.extend([resource] * count)
    rng.shuffle(resources)

    numbers = NUMBER_TOKENS[:]
    rng.shuffle(numbers)

    tiles = []
    number_index = 0
    for tile, resource in zip(board.tiles, resources):
        if resource is Resource.DESERT:
            number = None
        else:
            number = numbers[number_index]
            number_index += 1
        tiles.append(HexTile(q=tile.q, r=tile.r, resource=resource, number=number))

    return Board(radius=board.radius, tiles=tiles)


def validate_standard_counts(board: Board) -> bool:
    resource_counts: Dict[Resource, int] = {resource: 0 for resource in RESOURCE_COUNTS}
    numbers = []
    for tile in board.tiles:
        if tile.resource not in resource_counts:
            return False
        resource_counts[tile.resource] += 1
        if tile.resource is Resource.DESERT:
            if tile.number is not None:
                return False
        elif tile.number is None:
            return False
        else:
            numbers.append(tile.number)

    if resource_counts != RESOURCE_COUNTS:
        return False

    return sorted(numbers) == sorted(NUMBER_TOKENS)
