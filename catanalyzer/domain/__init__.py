"""Board model, hex coordinates and board generation."""

from .board import (
    Board,
    BoardFormatError,
    HexTile,
    InvalidTileEdit,
    Resource,
    build_board,
)
from .hexgrid import AXIAL_DIRECTIONS, are_adjacent, generate_axial_coords, neighbor_coords
from .randomizer import generate_randomized_board, randomize_board

__all__ = [
    "AXIAL_DIRECTIONS",
    "Board",
    "BoardFormatError",
    "HexTile",
    "InvalidTileEdit",
    "Resource",
    "are_adjacent",
    "build_board",
    "generate_axial_coords",
    "generate_randomized_board",
    "neighbor_coords",
    "randomize_board",
]
