from __future__ import annotations

from typing import Iterable, Optional

from catanalyzer.domain.board import HexTile, Resource

from .enumeration import discovery_order
from .orientation import orient_junction
from .types import Junction, JunctionScore

DICE_PROBABILITIES = {
    2: 1 / 36,
    3: 2 / 36,
    4: 3 / 36,
    5: 4 / 36,
    6: 5 / 36,
    8: 5 / 36,
    9: 4 / 36,
    10: 3 / 36,
    11: 2 / 36,
    12: 1 / 36,
}

RESOURCE_WEIGHTS = {
    Resource.WHEAT: 1.0,
    Resource.ORE: 1.0,
    Resource.WOOD: 0.9,
    Resource.SHEEP: 0.8,
    Resource.BRICK: 0.75,
    Resource.DESERT: 0.0,
}

DIVERSITY_BONUS_PER_RESOURCE = 0.1
DICE_OUTCOMES = 36
SCORE_MULTIPLIER = 4
# Display scale; applied as two multiplications, which rounds differently from a single * 144.
SCORE_SCALE = DICE_OUTCOMES * SCORE_MULTIPLIER


def dice_probability(number: Optional[int]) -> float:
    if number is None:
        return 0.0
    return DICE_PROBABILITIES.get(number, 0.0)


def resource_weight(resource: Resource) -> float:
    return RESOURCE_WEIGHTS.get(resource, 0.0)


def pip_score(tiles: Iterable[HexTile]) -> float:
    # Plain left-to-right sum; callers fix the tile order.
    return sum(dice_probability(tile.number) * resource_weight(tile.resource) for tile in tiles)


def resource_diversity(tiles: Iterable[HexTile]) -> int:
    return len({tile.resource for tile in tiles})


def score_junction(junction: Junction) -> JunctionScore:
    """Score a junction independently of how its tiles happen to be listed.

    Pips are summed in discovery order so that near-tied spots rank the same
    way regardless of board storage order.
    """
    pips = pip_score(discovery_order(junction.tiles))
    diversity = resource_diversity(junction.tiles)
    bonus = DIVERSITY_BONUS_PER_RESOURCE * diversity
    return JunctionScore(
        junction=junction,
        score=(pips + bonus) * DICE_OUTCOMES * SCORE_MULTIPLIER,
        pip_score=pips,
        diversity=diversity,
        diversity_bonus=bonus,
        oriented=orient_junction(junction.tiles),
    )
