from __future__ import annotations

from typing import List, Tuple

Axial = Tuple[int, int]

BOARD_RADIUS = 2

# Unit steps between neighbouring hexes, in neighbour-scan order.
AXIAL_DIRECTIONS: Tuple[Axial, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)
_DIRECTION_SET = frozenset(AXIAL_DIRECTIONS)


def cube_s(q: int, r: int) -> int:
    return -q - r


def neighbor_coords(q: int, r: int) -> List[Axial]:
    return [(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def are_adjacent(first: Axial, second: Axial) -> bool:
    """True when the two hexes share an edge.

    Both the forward and the reverse difference are checked so the relation is
    symmetric regardless of argument order.
    """
    forward = (second[0] - first[0], second[1] - first[1])
    backward = (first[0] - second[0], first[1] - second[1])
    return forward in _DIRECTION_SET or backward in _DIRECTION_SET


def in_radius(q: int, r: int, radius: int) -> bool:
    return max(abs(q), abs(r), abs(cube_s(q, r))) <= radius


def generate_axial_coords(radius: int = BOARD_RADIUS) -> List[Axial]:
    if radius < 0:
        raise ValueError(f"Board radius must be non-negative, received {radius}.")
    coords: List[Axial] = []
    for q in range(-radius, radius + 1):
        for r in range(-radius, radius + 1):
            if abs(cube_s(q, r)) <= radius:
                coords.append((q, r))
    return coords
