from __future__ import annotations

import math
from typing import Sequence

from catanalyzer.domain.board import HexTile

from .types import OrientedHexes


def orient_junction(tiles: Sequence[HexTile]) -> OrientedHexes:
    """Order a junction's tiles as (top, left, right) for display.

    The tile farthest from the centroid in raw (q, r) space is the apex. Ties
    go to whichever tied tile comes first in ``tiles``; the remaining two form
    the base, ordered by q. An apex above the centroid (smaller r) points the
    triangle upward and sits on top; otherwise the base row goes first and the
    apex lands on the right.
    """
    if len(tiles) != 3:
        raise ValueError(f"A junction has exactly three tiles, received {len(tiles)}.")

    center_q = sum(tile.q for tile in tiles) / 3
    center_r = sum(tile.r for tile in tiles) / 3

    by_distance = sorted(
        tiles,
        key=lambda tile: math.sqrt((tile.q - center_q) ** 2 + (tile.r - center_r) ** 2),
        reverse=True,
    )
    apex = by_distance[0]
    base = sorted((tile for tile in tiles if tile is not apex), key=lambda tile: tile.q)

    if apex.r < center_r:
        return OrientedHexes(top=apex, left=base[0], right=base[1])
    return OrientedHexes(top=base[0], left=base[1], right=apex)
